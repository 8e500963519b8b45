"""
BigDigits — Разрядные операции над arbitrary-precision целыми

Параллельное семейство функций к digitkit.core.math.digits без ограничения
native-диапазона. Арифметика: встроенный int Python (arbitrary precision);
принимаются любые объекты с __index__ (например, gmpy2.mpz).

Контракты идентичны native-варианту:
- big_digit_length(0) == 0
- big_digit_at проверяет 1 <= position <= big_digit_length(n)
- big_integer_to_digits требует n >= 0, усекает/дополняет нулями по length
- digits_to_bigint собирает число точно (умножение на 10 и сложение)

ВАЖНО: преобразование int → str не используется. Для чисел длиннее
sys.get_int_max_str_digits() str(n) бросает ValueError, а разрядные
операции должны работать при любой длине.
"""

import logging
import operator
from typing import Final, Sequence

from digitkit.core.math.digits import (
    RADIX,
    check_sequence_length,
    contract_violation,
)

logger = logging.getLogger(__name__)

# Нижняя оценка log10(2) в виде рациональной дроби (30102 / 100000 < log10(2))
_LOG10_2_NUMERATOR: Final[int] = 30102
_LOG10_2_DENOMINATOR: Final[int] = 100000


# =============================================================================
# РАЗРЯДНЫЕ ОПЕРАЦИИ
# =============================================================================


def big_digit_length(n: int) -> int:
    """
    Количество десятичных разрядов в |n| для arbitrary-precision n.

    Вместо деления на 10 по одному разряду (квадратичная сложность для
    длинных чисел) длина оценивается снизу по bit_length и уточняется
    сравнением со степенями 10. Все вычисления целочисленные.

    Для |n| >= 2^(b-1), b = bit_length:
        digits >= floor((b - 1) * log10(2)) + 1

    Args:
        n: Целое произвольной длины (может быть отрицательным)

    Returns:
        Количество разрядов (>= 0), 0 для n == 0

    Examples:
        >>> big_digit_length(10 ** 100)
        101
        >>> big_digit_length(0)
        0
    """
    number = abs(operator.index(n))
    if number == 0:
        return 0

    length = (number.bit_length() - 1) * _LOG10_2_NUMERATOR // _LOG10_2_DENOMINATOR + 1
    power = RADIX ** length
    while power <= number:
        power *= RADIX
        length += 1
    return length


def big_digit_at(n: int, position: int) -> int:
    """
    Разряд |n| на позиции position (1 = самый старший разряд).

    Младшие (length - position) разрядов отбрасываются одним делением
    на 10^(length - position).

    Args:
        n: Целое произвольной длины (может быть отрицательным)
        position: Позиция слева, 1 <= position <= big_digit_length(n)

    Returns:
        Разряд в [0, 9]

    Raises:
        DigitContractViolation: Если position вне [1, big_digit_length(n)]

    Examples:
        >>> big_digit_at(123456789, 3)
        3
        >>> big_digit_at(10 ** 50 + 7, 51)
        7
    """
    number = abs(operator.index(n))
    position = operator.index(position)
    length = big_digit_length(number)

    if not 0 < position <= length:
        raise contract_violation(
            f"position must be in [1, {length}] for a {length}-digit value, got {position}",
            logger,
        )

    return number // RADIX ** (length - position) % RADIX


def big_integer_to_digits(n: int, length: int) -> list[int]:
    """
    Разложение неотрицательного n в список из ровно length разрядов.

    Семантика совпадает с integer_to_digits: усечение до length младших
    разрядов, дополнение нулями слева.

    Raises:
        DigitContractViolation: Если n < 0 или length < 0

    Examples:
        >>> big_integer_to_digits(2 ** 70, 5)
        [0, 3, 4, 2, 4]
    """
    number = operator.index(n)
    length = operator.index(length)

    if number < 0:
        raise contract_violation(f"n must be non-negative, got {number}", logger)
    if length < 0:
        raise contract_violation(f"length must be non-negative, got {length}", logger)

    digits = [0] * length
    for index in range(length - 1, -1, -1):
        number, digits[index] = divmod(number, RADIX)
    return digits


def digits_to_bigint(digits: Sequence[int], length: int) -> int:
    """
    Сборка arbitrary-precision целого из первых length разрядов.

    Схема Горнера: result = result × 10 + digit. Эквивалентно
    Σ digits[i] × 10^(length-i-1), но без вычисления каждой степени.

    Raises:
        DigitContractViolation: Если length вне [0, len(digits)]

    Examples:
        >>> digits_to_bigint([1, 2, 3, 4, 5, 6, 7, 8, 9], 9)
        123456789
    """
    length = check_sequence_length(digits, length, logger)

    result = 0
    for index in range(length):
        result = result * RADIX + operator.index(digits[index])
    return result


def big_digit_sum(digits: Sequence[int], length: int) -> int:
    """Сумма первых length элементов (без ограничения диапазона)."""
    length = check_sequence_length(digits, length, logger)
    return sum(operator.index(digits[index]) for index in range(length))
