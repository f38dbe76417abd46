"""
timeguard

Attribute validators for host configuration frameworks.
"""
