"""
utility functions used across the Mambu API SDK, including support for command-line tools
"""
