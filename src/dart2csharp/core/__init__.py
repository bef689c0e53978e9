"""
Core transpilation machinery: scanning, header rewriting, directive
stripping and the engine tying them together.
"""
