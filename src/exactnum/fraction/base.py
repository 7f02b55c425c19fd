"""
AbstractFraction — контракт рациональных чисел

Immutable дробь numerator / denominator над целочисленным типом компоненты.
Все алгоритмы написаны один раз поверх IntegralOps и разделяются всеми
конкретными вариантами (BigFraction, LongFraction).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator != 0 (проверяется при конструировании)
2. Экземпляр не изменяется после создания; все операции возвращают новый
3. add/subtract/multiply/divide НЕ сокращают результат:
   сокращение — отдельный явный шаг reduce()
4. == — структурное равенство полей; математическое равенство — equivalent()
5. Порядок выводится из одного трёхзначного compare_to (перекрёстное
   умножение), без перехода к float

КАНОНИЗАЦИЯ:
    normalize(): знаменатель > 0, ноль → 0/1
    reduce():    деление на gcd(numerator, denominator), знак не переносится
    equivalent(): reduce().normalize() == other.reduce().normalize()
"""

from abc import abstractmethod
from decimal import Decimal
from typing import Any, TypeVar

from pydantic import BaseModel, Field, field_validator

from exactnum.core.components import IntegralOps
from exactnum.core.context import ArithmeticContext, resolve_context
from exactnum.core.conversions import (
    INT8_BITS,
    INT16_BITS,
    INT32_BITS,
    INT64_BITS,
    truncate_quotient,
    wrap_to_width,
)
from exactnum.core.errors import (
    InexactConversionError,
    InvalidArgumentError,
    InvalidStateError,
)

T = TypeVar("T", bound="AbstractFraction")


# =============================================================================
# FRACTION CONTRACT
# =============================================================================


class AbstractFraction(BaseModel):
    """
    Рациональное число numerator / denominator.

    Конкретный вариант задаёт capability set компоненты через ops().
    Операции принимают только дробь того же конкретного типа,
    иначе InvalidArgumentError.
    """

    numerator: int = Field(..., description="Числитель")
    denominator: int = Field(..., description="Знаменатель (не ноль)")

    model_config = {"frozen": True, "strict": True}  # Immutable

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        super().__init__(numerator=numerator, denominator=denominator)

    @field_validator("denominator")
    @classmethod
    def validate_denominator_not_zero(cls, v: int) -> int:
        """Знаменатель не может быть нулём."""
        if v == 0:
            raise ValueError("denominator must not be zero")
        return v

    @classmethod
    @abstractmethod
    def ops(cls) -> IntegralOps[int]:
        """Capability set типа компоненты."""

    # -------------------------------------------------------------------------
    # Named constructors
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls: type[T]) -> T:
        return cls(cls.ops().zero, cls.ops().one)

    @classmethod
    def one(cls: type[T]) -> T:
        return cls(cls.ops().one, cls.ops().one)

    @classmethod
    def of(cls: type[T], value: int) -> T:
        """Целое value как дробь value / 1."""
        return cls(value, cls.ops().one)

    def _new(self: T, numerator: int, denominator: int) -> T:
        return type(self)(numerator, denominator)

    def _require_same_type(self, other: Any) -> None:
        if type(other) is not type(self):
            raise InvalidArgumentError(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )

    # -------------------------------------------------------------------------
    # Классификация (вычисляется по запросу, не кэшируется)
    # -------------------------------------------------------------------------

    @property
    def signum(self) -> int:
        """Знак значения: -1, 0 или 1."""
        ops = self.ops()
        return ops.signum(self.numerator) * ops.signum(self.denominator)

    @property
    def is_zero(self) -> bool:
        return self.ops().is_zero(self.numerator)

    @property
    def is_invertible(self) -> bool:
        return not self.is_zero

    @property
    def is_not_invertible(self) -> bool:
        return not self.is_invertible

    @property
    def is_unit(self) -> bool:
        """Значение равно 1."""
        return self.ops().compare(self.numerator, self.denominator) == 0

    @property
    def is_not_unit(self) -> bool:
        return not self.is_unit

    @property
    def is_dyadic(self) -> bool:
        """Знаменатель после сокращения — степень двойки."""
        # Модуль компоненты вне диапазона типа (|LONG_MIN|) допустим
        return self.ops().is_power_of_two(abs(self.reduce().denominator))

    @property
    def is_not_dyadic(self) -> bool:
        return not self.is_dyadic

    @property
    def is_irreducible(self) -> bool:
        """gcd(numerator, denominator) == 1."""
        ops = self.ops()
        return ops.compare(ops.gcd(self.numerator, self.denominator), ops.one) == 0

    @property
    def is_reducible(self) -> bool:
        return not self.is_irreducible

    @property
    def is_proper(self) -> bool:
        """|value| < 1."""
        return abs(self.numerator) < abs(self.denominator)

    @property
    def is_improper(self) -> bool:
        return not self.is_proper

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self: T, summand: T) -> T:
        """a/b + c/d = (a*d + c*b) / (b*d), без сокращения."""
        self._require_same_type(summand)
        ops = self.ops()
        return self._new(
            ops.add(
                ops.multiply(self.numerator, summand.denominator),
                ops.multiply(summand.numerator, self.denominator),
            ),
            ops.multiply(self.denominator, summand.denominator),
        )

    def subtract(self: T, subtrahend: T) -> T:
        """a/b - c/d = (a*d - c*b) / (b*d), без сокращения."""
        self._require_same_type(subtrahend)
        ops = self.ops()
        return self._new(
            ops.subtract(
                ops.multiply(self.numerator, subtrahend.denominator),
                ops.multiply(subtrahend.numerator, self.denominator),
            ),
            ops.multiply(self.denominator, subtrahend.denominator),
        )

    def multiply(self: T, factor: T) -> T:
        self._require_same_type(factor)
        ops = self.ops()
        return self._new(
            ops.multiply(self.numerator, factor.numerator),
            ops.multiply(self.denominator, factor.denominator),
        )

    def divide(self: T, divisor: T) -> T:
        """
        (a/b) / (c/d) = (a*d) / (b*c)

        Raises:
            InvalidArgumentError: Если divisor другого типа или необратим (numerator == 0)
        """
        self._require_same_type(divisor)
        if divisor.is_not_invertible:
            raise InvalidArgumentError(f"divisor is not invertible: {divisor!r}")
        ops = self.ops()
        return self._new(
            ops.multiply(self.numerator, divisor.denominator),
            ops.multiply(self.denominator, divisor.numerator),
        )

    def pow(self: T, exponent: int) -> T:
        """
        Целая степень (возведение квадратами).

        pow(0) — единица для любого основания, включая ноль.
        Отрицательная степень требует обратимости.

        Raises:
            InvalidStateError: Если exponent < 0 и значение необратимо
        """
        if exponent == 0:
            return self.one()
        if exponent < 0:
            return self.invert().pow(-exponent)

        result = self.one()
        base = self
        while exponent:
            if exponent & 1:
                result = result.multiply(base)
            exponent >>= 1
            if exponent:
                base = base.multiply(base)
        return result

    def negate(self: T) -> T:
        return self._new(self.ops().negate(self.numerator), self.denominator)

    def invert(self: T) -> T:
        """
        Обратная дробь denominator / numerator.

        Raises:
            InvalidStateError: Если значение необратимо
        """
        if self.is_not_invertible:
            raise InvalidStateError(f"fraction is not invertible: {self!r}")
        return self._new(self.denominator, self.numerator)

    def abs(self: T) -> T:
        ops = self.ops()
        return self._new(ops.abs(self.numerator), ops.abs(self.denominator))

    def inc(self: T) -> T:
        """(a + b) / b"""
        ops = self.ops()
        return self._new(ops.add(self.numerator, self.denominator), self.denominator)

    def dec(self: T) -> T:
        """(a - b) / b"""
        ops = self.ops()
        return self._new(ops.subtract(self.numerator, self.denominator), self.denominator)

    # -------------------------------------------------------------------------
    # Канонизация
    # -------------------------------------------------------------------------

    def normalize(self: T) -> T:
        """Знак переносится в числитель; ноль → 0/1."""
        ops = self.ops()
        if self.is_zero:
            return self.zero()
        if ops.signum(self.denominator) < 0:
            return self._new(ops.negate(self.numerator), ops.negate(self.denominator))
        return self._new(self.numerator, self.denominator)

    def reduce(self: T) -> T:
        """Деление на gcd; расположение знака не меняется."""
        ops = self.ops()
        divisor = ops.gcd(self.numerator, self.denominator)
        return self._new(
            ops.exact_quotient(self.numerator, divisor),
            ops.exact_quotient(self.denominator, divisor),
        )

    def expand(self: T, factor: int) -> T:
        """
        Расширение дроби: numerator и denominator умножаются на factor.

        Raises:
            InvalidArgumentError: Если factor == 0
        """
        ops = self.ops()
        if ops.is_zero(factor):
            raise InvalidArgumentError("expansion factor must not be zero")
        return self._new(
            ops.multiply(self.numerator, factor),
            ops.multiply(self.denominator, factor),
        )

    def equivalent(self: T, other: T) -> bool:
        """Математическое равенство (3/6 эквивалентно 1/2)."""
        # reduce до normalize: LongFraction(LONG_MIN, LONG_MIN) сокращается до 1/1
        # без промежуточного negate(LONG_MIN)
        return self.reduce().normalize() == other.reduce().normalize()

    # -------------------------------------------------------------------------
    # Порядок
    # -------------------------------------------------------------------------

    def compare_to(self: T, other: T) -> int:
        """
        Трёхзначное сравнение перекрёстным умножением.

        a/b <op> c/d  ⇔  sign(b*d) * (a*d - c*b) <op> 0

        Returns:
            -1 если self < other, 0 если эквивалентны, +1 если self > other
        """
        self._require_same_type(other)
        ops = self.ops()
        lhs = ops.multiply(self.numerator, other.denominator)
        rhs = ops.multiply(other.numerator, self.denominator)
        return (
            ops.compare(lhs, rhs)
            * ops.signum(self.denominator)
            * ops.signum(other.denominator)
        )

    def less_than_or_equal_to(self: T, other: T) -> bool:
        return self.compare_to(other) <= 0

    def greater_than_or_equal_to(self: T, other: T) -> bool:
        return self.compare_to(other) >= 0

    def less_than(self: T, other: T) -> bool:
        return self.compare_to(other) < 0

    def greater_than(self: T, other: T) -> bool:
        return self.compare_to(other) > 0

    def min(self: T, other: T) -> T:
        return min_of(self, other)

    def max(self: T, other: T) -> T:
        return max_of(self, other)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_decimal(self, context: ArithmeticContext | None = None) -> Decimal:
        """
        Десятичное приближение numerator / denominator.

        Args:
            context: Точность и округление (default: DEFAULT_CONTEXT)
        """
        ctx = resolve_context(context).to_decimal_context()
        return ctx.divide(Decimal(self.numerator), Decimal(self.denominator))

    def to_int(self) -> int:
        """Целая часть с отбрасыванием дробной (к нулю)."""
        return truncate_quotient(self.numerator, self.denominator)

    def to_int_exact(self) -> int:
        """
        Точное целое значение.

        Raises:
            InexactConversionError: Если значение не целое
        """
        if self.numerator % self.denominator != 0:
            raise InexactConversionError(f"fraction is not integral: {self!r}")
        return self.numerator // self.denominator

    def to_float(self) -> float:
        return self.numerator / self.denominator

    def to_int8(self) -> int:
        return wrap_to_width(self.to_int(), INT8_BITS)

    def to_int16(self) -> int:
        return wrap_to_width(self.to_int(), INT16_BITS)

    def to_int32(self) -> int:
        return wrap_to_width(self.to_int(), INT32_BITS)

    def to_int64(self) -> int:
        return wrap_to_width(self.to_int(), INT64_BITS)

    def __int__(self) -> int:
        return self.to_int()

    def __trunc__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_float()

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def _coerce(self: T, other: Any) -> T | None:
        if isinstance(other, type(self)):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return self.of(other)
        return None

    def __add__(self, other: Any) -> Any:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    def __radd__(self, other: Any) -> Any:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.add(self)

    def __sub__(self, other: Any) -> Any:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.subtract(operand)

    def __rsub__(self, other: Any) -> Any:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.subtract(self)

    def __mul__(self, other: Any) -> Any:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.multiply(operand)

    def __rmul__(self, other: Any) -> Any:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.multiply(self)

    def __truediv__(self, other: Any) -> Any:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.divide(operand)

    def __rtruediv__(self, other: Any) -> Any:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.divide(self)

    def __pow__(self, exponent: Any) -> Any:
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self: T) -> T:
        return self.negate()

    def __pos__(self: T) -> T:
        return self

    def __abs__(self: T) -> T:
        return self.abs()

    def __lt__(self, other: Any) -> Any:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.less_than(operand)

    def __le__(self, other: Any) -> Any:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.less_than_or_equal_to(operand)

    def __gt__(self, other: Any) -> Any:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.greater_than(operand)

    def __ge__(self, other: Any) -> Any:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.greater_than_or_equal_to(operand)


# =============================================================================
# ORDERING (free functions)
# =============================================================================


def compare(a: T, b: T) -> int:
    """Трёхзначное сравнение двух дробей одного типа."""
    return a.compare_to(b)


def min_of(a: T, b: T) -> T:
    """Меньшая из двух дробей; при эквивалентности — a."""
    return b if a.greater_than(b) else a


def max_of(a: T, b: T) -> T:
    """Большая из двух дробей; при эквивалентности — a."""
    return b if a.less_than(b) else a
