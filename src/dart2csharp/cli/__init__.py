"""
Command Line Interface for dart2csharp.
"""
