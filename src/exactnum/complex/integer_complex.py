"""
BigIntegerComplex — гауссовы целые (компоненты int)

Кольцевые операции остаются в int; divide/invert/pow расширяются
до FractionComplex, чтобы результат оставался точным.
"""

from typing import Final

from exactnum.complex.base import AbstractComplex
from exactnum.complex.fraction_complex import FractionComplex
from exactnum.core.components import IntegerOps
from exactnum.fraction.big_fraction import BigFraction

_INTEGER_OPS: Final[IntegerOps] = IntegerOps()


class BigIntegerComplex(AbstractComplex):
    """
    Complex число с целыми компонентами произвольной точности.

    Examples:
        >>> BigIntegerComplex(3, 4).abs_pow2()
        25
    """

    real: int
    imaginary: int

    @classmethod
    def ops(cls) -> IntegerOps:
        return _INTEGER_OPS

    def widen(self) -> FractionComplex:
        return FractionComplex(BigFraction.of(self.real), BigFraction.of(self.imaginary))
