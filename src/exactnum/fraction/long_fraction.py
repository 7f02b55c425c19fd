"""
LongFraction — дробь над signed 64-bit целыми

Компоненты ограничены диапазоном [LONG_MIN, LONG_MAX]:
- при конструировании выход за диапазон → pydantic.ValidationError
- в арифметике промежуточный или итоговый выход за диапазон → OverflowError
"""

from typing import Final

from pydantic import field_validator

from exactnum.core.components import LONG_MAX, LONG_MIN, LongOps
from exactnum.fraction.base import AbstractFraction

_LONG_OPS: Final[LongOps] = LongOps()


class LongFraction(AbstractFraction):
    """Immutable дробь с компонентами в диапазоне signed 64-bit."""

    @field_validator("numerator", "denominator")
    @classmethod
    def validate_long_range(cls, v: int) -> int:
        """Компонента должна помещаться в signed 64-bit."""
        if v < LONG_MIN or v > LONG_MAX:
            raise ValueError(f"component {v} outside signed 64-bit range")
        return v

    @classmethod
    def ops(cls) -> LongOps:
        return _LONG_OPS
