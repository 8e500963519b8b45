"""
digitkit: digit-level operations on native-width and arbitrary-precision integers.
"""

__version__ = "0.1.0"
