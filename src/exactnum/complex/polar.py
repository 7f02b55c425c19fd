"""
PolarForm — полярная форма complex числа
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class PolarForm(BaseModel):
    """
    Пара (modulus, argument).

    argument — угол в радианах в диапазоне (-pi, pi].
    """

    modulus: Decimal = Field(..., ge=0, allow_inf_nan=False, description="Модуль")
    argument: Decimal = Field(..., allow_inf_nan=False, description="Угол (радианы)")

    model_config = {"frozen": True}  # Immutable
