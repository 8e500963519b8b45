"""
Core math modules для digitkit

Разрядные операции над целыми: native-width и arbitrary-precision.
Big-integer варианты публикуются только при DigitkitSettings.bigint_enabled.
"""

import logging

from pydantic import ValidationError

from digitkit.core.config import DigitkitSettings, get_settings

# Digits (native-width)
from digitkit.core.math.digits import (
    # Constants
    NATIVE_INT_BITS,
    NATIVE_INT_MAX,
    NATIVE_INT_MIN,
    RADIX,
    # Exceptions
    DigitContractViolation,
    NativeWidthOverflow,
    # Functions
    digit_at,
    digit_length,
    digit_sum,
    digits_to_integer,
    integer_to_digits,
)

__all__ = [
    # Digits — Constants
    "NATIVE_INT_BITS",
    "NATIVE_INT_MAX",
    "NATIVE_INT_MIN",
    "RADIX",
    # Digits — Exceptions
    "DigitContractViolation",
    "NativeWidthOverflow",
    # Digits — Functions
    "digit_at",
    "digit_length",
    "digit_sum",
    "digits_to_integer",
    "integer_to_digits",
]

logger = logging.getLogger(__name__)

try:
    BIGINT_ENABLED: bool = get_settings().bigint_enabled
except ValidationError as e:
    # Native API импортируется при любых настройках
    BIGINT_ENABLED = DigitkitSettings.model_fields["bigint_enabled"].default
    logger.warning(
        "Invalid digitkit settings, using bigint_enabled=%s: %s", BIGINT_ENABLED, e
    )

# BigDigits (arbitrary-precision)
if BIGINT_ENABLED:
    from digitkit.core.math.bigdigits import (
        big_digit_at,
        big_digit_length,
        big_digit_sum,
        big_integer_to_digits,
        digits_to_bigint,
    )

    __all__ += [
        "big_digit_at",
        "big_digit_length",
        "big_digit_sum",
        "big_integer_to_digits",
        "digits_to_bigint",
    ]
