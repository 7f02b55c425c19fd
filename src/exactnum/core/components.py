"""
Components — capability set типов компонент

Fraction и Complex параметризованы типом компоненты N (int, Decimal,
BigFraction). Алгоритмы пишутся один раз поверх ComponentOps[N] и не
зависят от конкретного типа компоненты.

Иерархия:
- ComponentOps[N]   — упорядоченное кольцо: +, -, *, знак, сравнение, to_decimal
- IntegralOps[N]    — + gcd и точное частное (для Fraction)
    - IntegerOps    — произвольная точность (int)
    - LongOps       — int в диапазоне signed 64-bit, переполнение → OverflowError
- FieldOps[N]       — + деление (для quotient type Complex)
    - DecimalOps    — Decimal

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. add/subtract/multiply точны (без округления) для всех реализаций
2. Округление возможно только в divide и to_decimal, по явному контексту
"""

import decimal
import math
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Final, Generic, TypeVar

from exactnum.core.context import ArithmeticContext

N = TypeVar("N")

# =============================================================================
# ГРАНИЦЫ SIGNED 64-BIT
# =============================================================================

LONG_MIN: Final[int] = -(2**63)
LONG_MAX: Final[int] = 2**63 - 1

# Контекст без округления для кольцевых операций над Decimal
_EXACT_DECIMAL_CONTEXT: Final[decimal.Context] = decimal.Context(
    prec=decimal.MAX_PREC,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
    traps=[decimal.InvalidOperation, decimal.Overflow, decimal.Inexact],
)


# =============================================================================
# БАЗОВЫЙ CAPABILITY SET
# =============================================================================


class ComponentOps(ABC, Generic[N]):
    """Операции упорядоченного кольца над типом компоненты N."""

    @property
    @abstractmethod
    def zero(self) -> N: ...

    @property
    @abstractmethod
    def one(self) -> N: ...

    @abstractmethod
    def add(self, a: N, b: N) -> N: ...

    @abstractmethod
    def subtract(self, a: N, b: N) -> N: ...

    @abstractmethod
    def multiply(self, a: N, b: N) -> N: ...

    @abstractmethod
    def negate(self, a: N) -> N: ...

    @abstractmethod
    def abs(self, a: N) -> N: ...

    @abstractmethod
    def signum(self, a: N) -> int: ...

    @abstractmethod
    def to_decimal(self, a: N, context: ArithmeticContext) -> Decimal: ...

    @abstractmethod
    def to_int(self, a: N) -> int:
        """Целая часть a с отбрасыванием дробной (к нулю)."""

    @abstractmethod
    def to_float(self, a: N) -> float: ...

    def compare(self, a: N, b: N) -> int:
        """
        Трёхзначное сравнение.

        Returns:
            -1 если a < b, 0 если a == b, +1 если a > b
        """
        return self.signum(self.subtract(a, b))

    def is_zero(self, a: N) -> bool:
        return self.signum(a) == 0

    def equivalent(self, a: N, b: N) -> bool:
        """Численное равенство (может отличаться от структурного ==)."""
        return self.compare(a, b) == 0


class IntegralOps(ComponentOps[N]):
    """Целочисленные компоненты: gcd и точное частное."""

    @abstractmethod
    def gcd(self, a: N, b: N) -> N: ...

    @abstractmethod
    def exact_quotient(self, a: N, b: N) -> N:
        """Частное a / b, если b делит a нацело."""

    @abstractmethod
    def is_power_of_two(self, a: N) -> bool: ...


class FieldOps(ComponentOps[N]):
    """Компоненты с делением (quotient type для Complex)."""

    @abstractmethod
    def divide(self, a: N, b: N, context: ArithmeticContext) -> N: ...


# =============================================================================
# INTEGER
# =============================================================================


class IntegerOps(IntegralOps[int]):
    """int произвольной точности."""

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    def add(self, a: int, b: int) -> int:
        return a + b

    def subtract(self, a: int, b: int) -> int:
        return a - b

    def multiply(self, a: int, b: int) -> int:
        return a * b

    def negate(self, a: int) -> int:
        return -a

    def abs(self, a: int) -> int:
        return abs(a)

    def signum(self, a: int) -> int:
        return (a > 0) - (a < 0)

    def compare(self, a: int, b: int) -> int:
        return (a > b) - (a < b)

    def to_decimal(self, a: int, context: ArithmeticContext) -> Decimal:
        return context.to_decimal_context().create_decimal(a)

    def to_int(self, a: int) -> int:
        return a

    def to_float(self, a: int) -> float:
        return float(a)

    def gcd(self, a: int, b: int) -> int:
        return math.gcd(a, b)

    def exact_quotient(self, a: int, b: int) -> int:
        quotient, remainder = divmod(a, b)
        if remainder != 0:
            raise ValueError(f"{b} does not divide {a}")
        return quotient

    def is_power_of_two(self, a: int) -> bool:
        return a > 0 and a & (a - 1) == 0


class LongOps(IntegerOps):
    """
    int в диапазоне [LONG_MIN, LONG_MAX].

    Каждый результат проверяется; выход за диапазон → OverflowError.
    Исключение: gcd не проверяется (gcd(LONG_MIN, LONG_MIN) == 2**63),
    проверяются только частные exact_quotient, в которых он участвует.
    """

    def _checked(self, value: int) -> int:
        if value < LONG_MIN or value > LONG_MAX:
            raise OverflowError(f"long overflow: {value}")
        return value

    def add(self, a: int, b: int) -> int:
        return self._checked(a + b)

    def subtract(self, a: int, b: int) -> int:
        return self._checked(a - b)

    def multiply(self, a: int, b: int) -> int:
        return self._checked(a * b)

    def negate(self, a: int) -> int:
        return self._checked(-a)

    def abs(self, a: int) -> int:
        return self._checked(abs(a))

    def exact_quotient(self, a: int, b: int) -> int:
        return self._checked(super().exact_quotient(a, b))


# =============================================================================
# DECIMAL
# =============================================================================


class DecimalOps(FieldOps[Decimal]):
    """
    Decimal: кольцевые операции точные, деление по ArithmeticContext.
    """

    @property
    def zero(self) -> Decimal:
        return Decimal(0)

    @property
    def one(self) -> Decimal:
        return Decimal(1)

    def add(self, a: Decimal, b: Decimal) -> Decimal:
        return _EXACT_DECIMAL_CONTEXT.add(a, b)

    def subtract(self, a: Decimal, b: Decimal) -> Decimal:
        return _EXACT_DECIMAL_CONTEXT.subtract(a, b)

    def multiply(self, a: Decimal, b: Decimal) -> Decimal:
        return _EXACT_DECIMAL_CONTEXT.multiply(a, b)

    def negate(self, a: Decimal) -> Decimal:
        return a.copy_negate()

    def abs(self, a: Decimal) -> Decimal:
        return a.copy_abs()

    def signum(self, a: Decimal) -> int:
        if a.is_zero():
            return 0
        return -1 if a.is_signed() else 1

    def compare(self, a: Decimal, b: Decimal) -> int:
        return int(a.compare(b))

    def to_decimal(self, a: Decimal, context: ArithmeticContext) -> Decimal:
        return context.round(a)

    def to_int(self, a: Decimal) -> int:
        return int(a)

    def to_float(self, a: Decimal) -> float:
        return float(a)

    def divide(self, a: Decimal, b: Decimal, context: ArithmeticContext) -> Decimal:
        return context.to_decimal_context().divide(a, b)
