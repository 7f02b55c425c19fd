"""
DecimalComplex — complex число с компонентами Decimal

Сложение, вычитание и умножение точные (без округления).
Деление, обращение и отрицательные степени округляются
по переданному ArithmeticContext.
"""

from decimal import Decimal
from typing import Final

from pydantic import Field

from exactnum.complex.base import AbstractComplex, guarded_context
from exactnum.complex.polar import PolarForm
from exactnum.core import decimal_math
from exactnum.core.components import DecimalOps
from exactnum.core.context import ArithmeticContext, resolve_context

_DECIMAL_OPS: Final[DecimalOps] = DecimalOps()


class DecimalComplex(AbstractComplex):
    """Complex число с конечными Decimal компонентами (без NaN/Inf)."""

    real: Decimal = Field(..., allow_inf_nan=False, description="Действительная часть")
    imaginary: Decimal = Field(
        ..., allow_inf_nan=False, description="Мнимая часть"
    )

    @classmethod
    def ops(cls) -> DecimalOps:
        return _DECIMAL_OPS

    def widen(self) -> "DecimalComplex":
        return self

    @classmethod
    def from_polar_form(
        cls, polar: PolarForm, context: ArithmeticContext | None = None
    ) -> "DecimalComplex":
        """
        Обратная конверсия: modulus * (cos(argument) + i * sin(argument)).

        Args:
            polar: Полярная форма
            context: Точность и округление результата (default: DEFAULT_CONTEXT)
        """
        ctx = resolve_context(context)
        guarded = guarded_context(ctx)
        cos = decimal_math.cos(polar.argument, guarded)
        sin = decimal_math.sin(polar.argument, guarded)
        decimal_ctx = ctx.to_decimal_context()
        return cls(
            decimal_ctx.multiply(polar.modulus, cos),
            decimal_ctx.multiply(polar.modulus, sin),
        )
