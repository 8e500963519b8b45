"""
DigitSequence — Модель последовательности десятичных разрядов

Immutable Pydantic модель DigitSequence: упорядоченные разряды (старший
первым), каждый в [0, 9].

Арифметика делегируется в digitkit.core.math.bigdigits, поэтому модель
работает с числами любой длины.
"""

import logging
import operator
from typing import Annotated, Optional

from pydantic import BaseModel, Field

from digitkit.core.math.bigdigits import (
    big_digit_length,
    big_digit_sum,
    big_integer_to_digits,
    digits_to_bigint,
)
from digitkit.core.math.digits import contract_violation

logger = logging.getLogger(__name__)

# Разряд: целое в [0, 9]
Digit = Annotated[int, Field(ge=0, le=9)]


# =============================================================================
# DIGIT SEQUENCE
# =============================================================================


class DigitSequence(BaseModel):
    """
    Последовательность десятичных разрядов, старший разряд первым.

    Immutable модель (frozen=True). Ведущие нули допустимы: они сохраняются
    как есть и учитываются в length и digit_at.
    """

    digits: tuple[Digit, ...] = Field(..., description="Разряды, старший первым")

    model_config = {"frozen": True}

    @classmethod
    def from_integer(cls, n: int, length: Optional[int] = None) -> "DigitSequence":
        """
        Разложение неотрицательного n.

        Args:
            n: Неотрицательное целое
            length: Количество разрядов (default: big_digit_length(n));
                меньшее значение усекает старшие разряды, большее дополняет нулями

        Raises:
            DigitContractViolation: Если n < 0 или length < 0
        """
        if length is None:
            length = big_digit_length(n)
        return cls(digits=tuple(big_integer_to_digits(n, length)))

    @property
    def length(self) -> int:
        return len(self.digits)

    def to_integer(self) -> int:
        """Сборка целого из всех разрядов."""
        return digits_to_bigint(self.digits, self.length)

    def digit_sum(self) -> int:
        return big_digit_sum(self.digits, self.length)

    def digit_at(self, position: int) -> int:
        """
        Разряд на позиции position (1 = первый элемент последовательности).

        В отличие от big_digit_at, ведущие нули последовательности
        считаются позициями.

        Raises:
            DigitContractViolation: Если position вне [1, length]
        """
        position = operator.index(position)
        if not 0 < position <= self.length:
            raise contract_violation(
                f"position must be in [1, {self.length}], got {position}",
                logger,
            )
        return self.digits[position - 1]
