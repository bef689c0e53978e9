"""
Shared utilities: console/logging plumbing and the reserved-word guard.
"""
