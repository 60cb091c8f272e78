"""
Python support for the Mambu core banking platform
"""
