"""
AbstractComplex — контракт complex чисел

Immutable пара (real, imaginary) над типом компоненты N.
Параметры семейства:
- N — тип компонент (int, Decimal, BigFraction)
- Q — quotient type: результат divide/invert/pow; может быть шире N
      (деление гауссовых целых даёт FractionComplex)
- A — тип модуля и аргумента: Decimal (приближение по ArithmeticContext)
- P — PolarForm

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Экземпляр не изменяется после создания
2. add/subtract/multiply/conjugate/negate точны и возвращают тот же тип
3. Деление: умножение на сопряжённое и деление на abs_pow2 в quotient type
4. Unit ⇔ abs_pow2 != 0 (обратимость в quotient type)
5. argument/to_polar_form для нуля → InvalidStateError
"""

from abc import abstractmethod
from decimal import Decimal
from typing import Any, TypeVar

from pydantic import BaseModel

from exactnum.core import decimal_math
from exactnum.core.components import ComponentOps
from exactnum.core.context import DEFAULT_CONTEXT, ArithmeticContext, resolve_context
from exactnum.core.conversions import (
    INT8_BITS,
    INT16_BITS,
    INT32_BITS,
    INT64_BITS,
    wrap_to_width,
)
from exactnum.core.errors import InvalidArgumentError, InvalidStateError
from exactnum.complex.polar import PolarForm

T = TypeVar("T", bound="AbstractComplex")


def guarded_context(context: ArithmeticContext) -> ArithmeticContext:
    """Контекст с GUARD_DIGITS дополнительными цифрами для промежуточных значений."""
    return context.with_precision(context.precision + decimal_math.GUARD_DIGITS)


def _power(base: T, exponent: int) -> T:
    # Возведение квадратами, exponent >= 0; точно в типе base
    result = base.one()
    while exponent:
        if exponent & 1:
            result = result.multiply(base)
        exponent >>= 1
        if exponent:
            base = base.multiply(base)
    return result


class AbstractComplex(BaseModel):
    """
    Complex число real + imaginary * i.

    Конкретный вариант задаёт ops() и quotient type через widen().
    Операции принимают только complex того же конкретного типа.
    """

    real: Any
    imaginary: Any

    model_config = {"frozen": True, "strict": True}  # Immutable

    def __init__(self, real: Any, imaginary: Any = None) -> None:
        if imaginary is None:
            imaginary = type(self).ops().zero
        super().__init__(real=real, imaginary=imaginary)

    @classmethod
    @abstractmethod
    def ops(cls) -> ComponentOps[Any]:
        """Capability set типа компоненты."""

    @abstractmethod
    def widen(self) -> "AbstractComplex":
        """Точное вложение в quotient type Q."""

    # -------------------------------------------------------------------------
    # Named constructors
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls: type[T]) -> T:
        return cls(cls.ops().zero, cls.ops().zero)

    @classmethod
    def one(cls: type[T]) -> T:
        return cls(cls.ops().one, cls.ops().zero)

    @classmethod
    def imaginary_unit(cls: type[T]) -> T:
        return cls(cls.ops().zero, cls.ops().one)

    def _new(self: T, real: Any, imaginary: Any) -> T:
        return type(self)(real, imaginary)

    def _require_same_type(self, other: Any) -> None:
        if type(other) is not type(self):
            raise InvalidArgumentError(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )

    # -------------------------------------------------------------------------
    # Классификация
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        ops = self.ops()
        return ops.is_zero(self.real) and ops.is_zero(self.imaginary)

    @property
    def is_unit(self) -> bool:
        """Обратимость: real^2 + imaginary^2 != 0."""
        return not self.ops().is_zero(self.abs_pow2())

    @property
    def is_not_unit(self) -> bool:
        return not self.is_unit

    @property
    def has_unit_modulus(self) -> bool:
        """real^2 + imaginary^2 == 1."""
        ops = self.ops()
        return ops.equivalent(self.abs_pow2(), ops.one)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self: T, summand: T) -> T:
        self._require_same_type(summand)
        ops = self.ops()
        return self._new(
            ops.add(self.real, summand.real),
            ops.add(self.imaginary, summand.imaginary),
        )

    def subtract(self: T, subtrahend: T) -> T:
        self._require_same_type(subtrahend)
        ops = self.ops()
        return self._new(
            ops.subtract(self.real, subtrahend.real),
            ops.subtract(self.imaginary, subtrahend.imaginary),
        )

    def multiply(self: T, factor: T) -> T:
        """(a+bi)(c+di) = (ac - bd) + (ad + bc)i"""
        self._require_same_type(factor)
        ops = self.ops()
        return self._new(
            ops.subtract(
                ops.multiply(self.real, factor.real),
                ops.multiply(self.imaginary, factor.imaginary),
            ),
            ops.add(
                ops.multiply(self.real, factor.imaginary),
                ops.multiply(self.imaginary, factor.real),
            ),
        )

    def divide(self, divisor: T, context: ArithmeticContext | None = None) -> Any:
        """
        Частное в quotient type.

        Args:
            divisor: Делитель того же типа
            context: Точность деления для приближённых компонент (Decimal)

        Returns:
            self / divisor в типе Q

        Raises:
            InvalidArgumentError: Если divisor другого типа или не unit
        """
        self._require_same_type(divisor)
        if divisor.is_not_unit:
            raise InvalidArgumentError(f"divisor is not a unit: {divisor!r}")
        return self.widen()._divide_widened(divisor.widen(), resolve_context(context))

    def _divide_widened(self: T, divisor: T, context: ArithmeticContext) -> T:
        # self и divisor уже в quotient type, ops — FieldOps
        ops = self.ops()
        product = self.multiply(divisor.conjugate())
        denominator = divisor.abs_pow2()
        return self._new(
            ops.divide(product.real, denominator, context),
            ops.divide(product.imaginary, denominator, context),
        )

    def invert(self, context: ArithmeticContext | None = None) -> Any:
        """
        Обратное значение в quotient type.

        Raises:
            InvalidStateError: Если значение не unit
        """
        if self.is_not_unit:
            raise InvalidStateError(f"complex number is not a unit: {self!r}")
        widened = self.widen()
        return widened.one()._divide_widened(widened, resolve_context(context))

    def pow(self, exponent: int, context: ArithmeticContext | None = None) -> Any:
        """
        Целая степень в quotient type.

        pow(0) — единица Q. Положительная степень точная; отрицательная
        вычисляется как одно деление 1 / self^|exponent|, поэтому округление
        по контексту происходит ровно один раз.

        Raises:
            InvalidStateError: Если exponent < 0 и значение не unit
        """
        widened = self.widen()
        if exponent >= 0:
            return _power(widened, exponent)
        if self.is_not_unit:
            raise InvalidStateError(f"complex number is not a unit: {self!r}")
        power = _power(widened, -exponent)
        return power.one()._divide_widened(power, resolve_context(context))

    def negate(self: T) -> T:
        ops = self.ops()
        return self._new(ops.negate(self.real), ops.negate(self.imaginary))

    def conjugate(self: T) -> T:
        return self._new(self.real, self.ops().negate(self.imaginary))

    # -------------------------------------------------------------------------
    # Модуль и аргумент
    # -------------------------------------------------------------------------

    def abs_pow2(self) -> Any:
        """real^2 + imaginary^2, точно в типе компоненты."""
        ops = self.ops()
        return ops.add(
            ops.multiply(self.real, self.real),
            ops.multiply(self.imaginary, self.imaginary),
        )

    def abs(self, context: ArithmeticContext | None = None) -> Decimal:
        """
        Модуль sqrt(abs_pow2) как Decimal.

        Args:
            context: Точность и округление (default: DEFAULT_CONTEXT)
        """
        ctx = resolve_context(context)
        square = self.ops().to_decimal(self.abs_pow2(), guarded_context(ctx))
        return decimal_math.sqrt(square, ctx)

    def argument(self, context: ArithmeticContext | None = None) -> Decimal:
        """
        Угол в стандартной позиции, диапазон (-pi, pi].

        Raises:
            InvalidStateError: Если значение равно нулю
        """
        if self.is_zero:
            raise InvalidStateError("argument is undefined for zero")
        ctx = resolve_context(context)
        guarded = guarded_context(ctx)
        ops = self.ops()
        return decimal_math.atan2(
            ops.to_decimal(self.imaginary, guarded),
            ops.to_decimal(self.real, guarded),
            ctx,
        )

    def to_polar_form(self, context: ArithmeticContext | None = None) -> PolarForm:
        """
        Полярная форма (abs, argument).

        Raises:
            InvalidStateError: Если значение равно нулю
        """
        argument = self.argument(context)
        return PolarForm(modulus=self.abs(context), argument=argument)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def equals_by_comparing(self: T, other: T) -> bool:
        """
        Численное равенство компонент.

        В отличие от ==, BigFraction(1, 2) и BigFraction(2, 4) совпадают.
        """
        ops = self.ops()
        return ops.equivalent(self.real, other.real) and ops.equivalent(
            self.imaginary, other.imaginary
        )

    def does_not_equal_by_comparing(self: T, other: T) -> bool:
        return not self.equals_by_comparing(other)

    # -------------------------------------------------------------------------
    # Конверсии и операторы
    # -------------------------------------------------------------------------

    def to_decimal(self, context: ArithmeticContext | None = None) -> Decimal:
        """Действительная часть как Decimal (default: DEFAULT_CONTEXT)."""
        return self.ops().to_decimal(self.real, resolve_context(context))

    def to_int(self) -> int:
        """Действительная часть, дробная часть отбрасывается (к нулю)."""
        return self.ops().to_int(self.real)

    def to_float(self) -> float:
        return self.ops().to_float(self.real)

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

    def __float__(self) -> float:
        return self.to_float()

    def __complex__(self) -> complex:
        ops = self.ops()
        return complex(
            float(ops.to_decimal(self.real, DEFAULT_CONTEXT)),
            float(ops.to_decimal(self.imaginary, DEFAULT_CONTEXT)),
        )

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> Any:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Any) -> Any:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, exponent: Any) -> Any:
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self: T) -> T:
        return self.negate()

    def __pos__(self: T) -> T:
        return self

    def __abs__(self) -> Decimal:
        return self.abs()
