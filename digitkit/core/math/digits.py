"""
Digits — Разрядные операции над native-width целыми

Модуль реализует базовые операции над десятичными разрядами целых чисел
фиксированной ширины (signed 64-bit, аналог C long на LP64):
- Количество разрядов |n| (digit_length)
- Разряд на заданной позиции, считая слева с 1 (digit_at)
- Разложение неотрицательного числа в последовательность разрядов
- Сборка числа из последовательности разрядов
- Сумма элементов последовательности разрядов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции работают с abs(n): знак не входит в представление разрядов
2. digit_length(0) == 0 (а не 1)
3. Нарушение контракта → DigitContractViolation, никогда не clamp/wrap
4. Выход за native-диапазон → NativeWidthOverflow
5. Сборка числа использует только точную целочисленную арифметику

ИНВАРИАНТ RoundTrip:
    n >= 0, L = digit_length(n):
    digits_to_integer(integer_to_digits(n, L), L) == n
"""

import logging
import operator
from typing import Final, Sequence

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления
RADIX: Final[int] = 10

# Ширина native-целого (бит, со знаком)
NATIVE_INT_BITS: Final[int] = 64

# Границы native-диапазона: [-2**63, 2**63 - 1]
NATIVE_INT_MIN: Final[int] = -(1 << (NATIVE_INT_BITS - 1))
NATIVE_INT_MAX: Final[int] = (1 << (NATIVE_INT_BITS - 1)) - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DigitContractViolation(AssertionError):
    """
    Нарушение контракта разрядной операции (ошибка программиста).

    Примеры:
    - position вне диапазона [1, digit_length(n)]
    - отрицательное n в integer_to_digits
    - length больше длины переданной последовательности

    Это не recoverable-ошибка: вызывающий код не должен перехватывать её
    для продолжения работы. Проверки выполняются явно (не через assert),
    поэтому действуют и при запуске с python -O.
    """
    pass


class NativeWidthOverflow(OverflowError):
    """
    Значение не помещается в native-width целое (signed 64-bit).

    Для чисел вне диапазона используйте big-integer варианты
    (digitkit.core.math.bigdigits).
    """
    pass


# =============================================================================
# ПРОВЕРКИ КОНТРАКТА
# =============================================================================


def contract_violation(
    message: str, log: logging.Logger = logger
) -> DigitContractViolation:
    """Логирование и создание DigitContractViolation (raise на стороне вызова)."""
    log.debug("digit contract violation: %s", message)
    return DigitContractViolation(message)


def require_native(value: int, name: str) -> int:
    """
    Приведение к int и проверка native-диапазона.

    Args:
        value: Целое (int или объект с __index__)
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        TypeError: Если value не целое (float, str, ...)
        NativeWidthOverflow: Если value вне [NATIVE_INT_MIN, NATIVE_INT_MAX]
    """
    number = operator.index(value)
    if not NATIVE_INT_MIN <= number <= NATIVE_INT_MAX:
        logger.debug("%s=%d outside native range", name, number)
        raise NativeWidthOverflow(
            f"{name}={number} does not fit in a signed {NATIVE_INT_BITS}-bit integer"
        )
    return number


def check_sequence_length(
    digits: Sequence[int], length: int, log: logging.Logger = logger
) -> int:
    """
    Проверка, что length не выходит за пределы последовательности.

    Элементы после length никогда не читаются, поэтому длинная
    последовательность с меньшим length допустима.

    Returns:
        length как int

    Raises:
        DigitContractViolation: Если length < 0 или length > len(digits)
    """
    length = operator.index(length)
    if length < 0:
        raise contract_violation(f"length must be non-negative, got {length}", log)
    if length > len(digits):
        raise contract_violation(
            f"length {length} exceeds sequence of {len(digits)} digits", log
        )
    return length


# =============================================================================
# РАЗРЯДНЫЕ ОПЕРАЦИИ
# =============================================================================


def digit_length(n: int) -> int:
    """
    Количество десятичных разрядов в |n|.

    Повторное целочисленное деление на 10, пока значение не станет 0.
    Для n == 0 цикл не выполняется ни разу, поэтому результат 0.

    Args:
        n: Native-width целое (может быть отрицательным)

    Returns:
        Количество разрядов (>= 0)

    Examples:
        >>> digit_length(11234352)
        8
        >>> digit_length(-5421)
        4
        >>> digit_length(0)
        0
    """
    number = abs(require_native(n, "n"))

    length = 0
    while number != 0:
        number //= RADIX
        length += 1
    return length


def digit_at(n: int, position: int) -> int:
    """
    Разряд |n| на позиции position (1 = самый старший разряд).

    Отбрасывает (digit_length(n) - position) младших разрядов и
    возвращает последний оставшийся.

    Args:
        n: Native-width целое (может быть отрицательным)
        position: Позиция слева, 1 <= position <= digit_length(n)

    Returns:
        Разряд в [0, 9]

    Raises:
        DigitContractViolation: Если position вне [1, digit_length(n)]

    Examples:
        >>> digit_at(5421, 2)
        4
        >>> digit_at(-5421, 4)
        1
    """
    number = require_native(n, "n")
    position = operator.index(position)
    # abs(NATIVE_INT_MIN) вне native-диапазона: длина считается по исходному n
    length = digit_length(number)
    number = abs(number)

    if not 0 < position <= length:
        raise contract_violation(
            f"position must be in [1, {length}] for n={n}, got {position}"
        )

    for _ in range(length - position):
        number //= RADIX
    return number % RADIX


def integer_to_digits(n: int, length: int) -> list[int]:
    """
    Разложение неотрицательного n в список из ровно length разрядов.

    Заполнение справа налево: младший разряд рабочей копии n записывается
    в позицию length-1, затем length-2 и т.д.

    Граничные случаи:
    - length < digit_length(n): остаются только length младших разрядов
      (усечение без ошибки)
    - length > digit_length(n): старшие позиции заполняются нулями

    Args:
        n: Неотрицательное native-width целое
        length: Количество разрядов в результате (>= 0)

    Returns:
        Новый список разрядов, старший разряд первым

    Raises:
        DigitContractViolation: Если n < 0 или length < 0

    Examples:
        >>> integer_to_digits(123456789, 9)
        [1, 2, 3, 4, 5, 6, 7, 8, 9]
        >>> integer_to_digits(123456789, 3)
        [7, 8, 9]
        >>> integer_to_digits(42, 4)
        [0, 0, 4, 2]
    """
    number = require_native(n, "n")
    length = operator.index(length)

    if number < 0:
        raise contract_violation(f"n must be non-negative, got {number}")
    if length < 0:
        raise contract_violation(f"length must be non-negative, got {length}")

    digits = [0] * length
    for index in range(length - 1, -1, -1):
        digits[index] = number % RADIX
        number //= RADIX
    return digits


def digits_to_integer(digits: Sequence[int], length: int) -> int:
    """
    Сборка целого из первых length разрядов (старший первым).

    Формула: Σ digits[i] × 10^(length-i-1), i ∈ [0, length)

    Степени 10 вычисляются точно в целых числах (без float pow),
    поэтому результат точен при любой длине, пока он помещается
    в native-диапазон. Значения разрядов не проверяются: разряды
    вне [0, 9] дают арифметически согласованный результат.

    Args:
        digits: Последовательность разрядов
        length: Количество используемых элементов (<= len(digits))

    Returns:
        Собранное native-width целое

    Raises:
        DigitContractViolation: Если length вне [0, len(digits)]
        NativeWidthOverflow: Если результат не помещается в native-диапазон

    Examples:
        >>> digits_to_integer([1, 2, 3, 4, 5, 6, 7, 8, 9], 9)
        123456789
        >>> digits_to_integer([0, 0, 4, 2], 4)
        42
    """
    length = check_sequence_length(digits, length)

    result = 0
    for index in range(length):
        result += operator.index(digits[index]) * RADIX ** (length - index - 1)

    return require_native(result, "result")


def digit_sum(digits: Sequence[int], length: int) -> int:
    """
    Сумма первых length элементов последовательности.

    Args:
        digits: Последовательность разрядов
        length: Количество суммируемых элементов (<= len(digits))

    Returns:
        Сумма как int

    Raises:
        DigitContractViolation: Если length вне [0, len(digits)]

    Examples:
        >>> digit_sum([1, 2, 3, 4, 5, 6, 7, 8, 9], 9)
        45
    """
    length = check_sequence_length(digits, length)

    total = 0
    for index in range(length):
        total += operator.index(digits[index])
    return total
