"""
Core math primitives, domain models and configuration.

Everything here is pure and stateless: no I/O beyond reading settings
from the environment.
"""
