"""
Shared helpers: default random source and rounding.
"""
