"""
ArithmeticContext — политика точности и округления

Все приближённые операции (abs, argument, to_decimal, деление Decimal)
получают контекст явно. Глобальный контекст модуля decimal не используется:
при context=None применяется DEFAULT_CONTEXT.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Один режим округления и одна точность на вызов, без скрытых default
2. Контекст immutable (frozen=True)
3. Результаты воспроизводимы при одинаковом контексте
"""

import decimal
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """Режим округления (значения совпадают с константами модуля decimal)"""

    CEILING = decimal.ROUND_CEILING
    DOWN = decimal.ROUND_DOWN
    FLOOR = decimal.ROUND_FLOOR
    HALF_DOWN = decimal.ROUND_HALF_DOWN
    HALF_EVEN = decimal.ROUND_HALF_EVEN
    HALF_UP = decimal.ROUND_HALF_UP
    UP = decimal.ROUND_UP
    ZERO_FIVE_UP = decimal.ROUND_05UP


# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# 34 значащие цифры (decimal128)
DEFAULT_PRECISION: Final[int] = 34

DEFAULT_ROUNDING: Final[RoundingMode] = RoundingMode.HALF_EVEN


# =============================================================================
# CONTEXT MODEL
# =============================================================================


class ArithmeticContext(BaseModel):
    """
    Точность и режим округления для приближённых вычислений.

    Immutable модель (frozen=True): контекст передаётся как значение
    и может разделяться между потоками без синхронизации.
    """

    precision: int = Field(
        DEFAULT_PRECISION, gt=0, description="Количество значащих цифр"
    )
    rounding: RoundingMode = Field(DEFAULT_ROUNDING, description="Режим округления")

    model_config = {"frozen": True}  # Immutable

    def to_decimal_context(self) -> decimal.Context:
        """
        Построение decimal.Context с параметрами этого контекста.

        Returns:
            Новый decimal.Context (traps по умолчанию модуля decimal)
        """
        return decimal.Context(prec=self.precision, rounding=self.rounding.value)

    def round(self, value: decimal.Decimal) -> decimal.Decimal:
        """Округление value до precision значащих цифр."""
        return self.to_decimal_context().plus(value)

    def with_precision(self, precision: int) -> "ArithmeticContext":
        """Копия контекста с другой точностью (с валидацией)."""
        return ArithmeticContext(precision=precision, rounding=self.rounding)


DEFAULT_CONTEXT: Final[ArithmeticContext] = ArithmeticContext()


def resolve_context(context: ArithmeticContext | None) -> ArithmeticContext:
    """
    Явный контекст или DEFAULT_CONTEXT.

    Args:
        context: Контекст вызывающего кода (optional)

    Returns:
        context если задан, иначе DEFAULT_CONTEXT
    """
    if context is None:
        return DEFAULT_CONTEXT
    return context
