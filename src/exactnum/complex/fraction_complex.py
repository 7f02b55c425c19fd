"""
FractionComplex — complex число с компонентами BigFraction

Quotient type для BigIntegerComplex и для самого себя: деление точное.
"""

from typing import Final

from exactnum.complex.base import AbstractComplex
from exactnum.fraction.big_fraction import BigFraction, BigFractionOps

_FRACTION_OPS: Final[BigFractionOps] = BigFractionOps()


class FractionComplex(AbstractComplex):
    """
    Complex число с рациональными компонентами.

    Результаты операций хранят компоненты в канонической форме
    (normalize + reduce); == остаётся структурным, для численного
    сравнения используется equals_by_comparing.
    """

    real: BigFraction
    imaginary: BigFraction

    @classmethod
    def ops(cls) -> BigFractionOps:
        return _FRACTION_OPS

    def widen(self) -> "FractionComplex":
        return self
