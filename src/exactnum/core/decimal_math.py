"""
Decimal Math — приближённые функции над Decimal

Функции, необходимые для модуля и аргумента complex, а также
для обратной конверсии из полярной формы:
- sqrt (Decimal.sqrt)
- pi, atan, atan2, sin, cos (mpmath)

Трансцендентные функции вычисляются в mpmath с GUARD_DIGITS дополнительными
цифрами (mpmath.workdps) и округляются один раз до точности и режима
ArithmeticContext вызывающего кода. Глобальные контексты decimal и mpmath
не изменяются.
"""

import logging
from decimal import Decimal
from typing import Callable, Final

import mpmath

from exactnum.core.context import ArithmeticContext

logger = logging.getLogger(__name__)

# Дополнительные цифры для промежуточных вычислений
GUARD_DIGITS: Final[int] = 10


def _working_digits(context: ArithmeticContext) -> int:
    return context.precision + GUARD_DIGITS


def _to_mpf(value: Decimal) -> mpmath.mpf:
    # Разбор строки в текущей рабочей точности mpmath
    return mpmath.mpf(str(value))


def _to_decimal(value: mpmath.mpf, context: ArithmeticContext) -> Decimal:
    return context.round(Decimal(str(value)))


def _evaluate(
    name: str, function: Callable[..., mpmath.mpf], context: ArithmeticContext, *args: Decimal
) -> Decimal:
    digits = _working_digits(context)
    logger.debug("%s at %d working digits", name, digits)
    with mpmath.workdps(digits):
        result = function(*(_to_mpf(arg) for arg in args))
        return _to_decimal(result, context)


# =============================================================================
# КОРНИ И КОНСТАНТЫ
# =============================================================================


def sqrt(value: Decimal, context: ArithmeticContext) -> Decimal:
    """
    Квадратный корень с округлением по контексту.

    Raises:
        ValueError: Если value < 0
    """
    if value < 0:
        raise ValueError(f"sqrt of negative value: {value}")
    return value.sqrt(context=context.to_decimal_context())


def pi(context: ArithmeticContext) -> Decimal:
    """Число pi с точностью контекста."""
    with mpmath.workdps(_working_digits(context)):
        return _to_decimal(+mpmath.pi, context)


# =============================================================================
# ARCTANGENT
# =============================================================================


def atan(value: Decimal, context: ArithmeticContext) -> Decimal:
    """Arctangent в радианах, диапазон (-pi/2, pi/2)."""
    return _evaluate("atan", mpmath.atan, context, value)


def atan2(y: Decimal, x: Decimal, context: ArithmeticContext) -> Decimal:
    """
    Двухаргументный arctangent: угол точки (x, y) в стандартной позиции.

    Args:
        y: Ордината
        x: Абсцисса
        context: Точность и округление результата

    Returns:
        Угол в радианах в диапазоне (-pi, pi]

    Raises:
        ValueError: Если x == 0 и y == 0 (угол не определён)
    """
    if x == 0 and y == 0:
        raise ValueError("atan2 is undefined for the origin")
    return _evaluate("atan2", mpmath.atan2, context, y, x)


# =============================================================================
# SINE / COSINE
# =============================================================================


def cos(value: Decimal, context: ArithmeticContext) -> Decimal:
    """Cosine аргумента в радианах."""
    return _evaluate("cos", mpmath.cos, context, value)


def sin(value: Decimal, context: ArithmeticContext) -> Decimal:
    """Sine аргумента в радианах."""
    return _evaluate("sin", mpmath.sin, context, value)
