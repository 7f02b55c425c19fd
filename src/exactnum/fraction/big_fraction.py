"""
BigFraction — дробь над int произвольной точности

Также содержит BigFractionOps: capability set, позволяющий использовать
BigFraction как тип компоненты (например, в FractionComplex).
"""

from decimal import Decimal
from typing import Final

from exactnum.core.components import FieldOps, IntegerOps
from exactnum.core.context import ArithmeticContext
from exactnum.fraction.base import AbstractFraction

_INTEGER_OPS: Final[IntegerOps] = IntegerOps()


class BigFraction(AbstractFraction):
    """
    Immutable дробь с компонентами int без ограничения разрядности.

    Examples:
        >>> BigFraction(6, 4).reduce()
        BigFraction(numerator=3, denominator=2)
    """

    @classmethod
    def ops(cls) -> IntegerOps:
        return _INTEGER_OPS


class BigFractionOps(FieldOps[BigFraction]):
    """
    BigFraction как компонента.

    Результаты кольцевых операций и деления возвращаются в канонической
    форме (normalize + reduce), чтобы компоненты не разрастались.
    Деление точное; context не используется.
    """

    @property
    def zero(self) -> BigFraction:
        return BigFraction.zero()

    @property
    def one(self) -> BigFraction:
        return BigFraction.one()

    def add(self, a: BigFraction, b: BigFraction) -> BigFraction:
        return a.add(b).normalize().reduce()

    def subtract(self, a: BigFraction, b: BigFraction) -> BigFraction:
        return a.subtract(b).normalize().reduce()

    def multiply(self, a: BigFraction, b: BigFraction) -> BigFraction:
        return a.multiply(b).normalize().reduce()

    def negate(self, a: BigFraction) -> BigFraction:
        return a.negate().normalize().reduce()

    def abs(self, a: BigFraction) -> BigFraction:
        return a.abs().normalize().reduce()

    def signum(self, a: BigFraction) -> int:
        return a.signum

    def compare(self, a: BigFraction, b: BigFraction) -> int:
        return a.compare_to(b)

    def is_zero(self, a: BigFraction) -> bool:
        return a.is_zero

    def equivalent(self, a: BigFraction, b: BigFraction) -> bool:
        return a.equivalent(b)

    def to_decimal(self, a: BigFraction, context: ArithmeticContext) -> Decimal:
        return a.to_decimal(context)

    def to_int(self, a: BigFraction) -> int:
        return a.to_int()

    def to_float(self, a: BigFraction) -> float:
        return a.to_float()

    def divide(
        self, a: BigFraction, b: BigFraction, context: ArithmeticContext
    ) -> BigFraction:
        return a.divide(b).normalize().reduce()
