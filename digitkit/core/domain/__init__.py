"""
Domain models and value objects.

Contains the digit sequence value object.
"""

from digitkit.core.domain.digit_sequence import Digit, DigitSequence

__all__ = [
    "Digit",
    "DigitSequence",
]
