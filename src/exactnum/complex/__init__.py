"""
ComplexCore: complex числа над int, Decimal и BigFraction компонентами.
"""

from exactnum.complex.base import AbstractComplex
from exactnum.complex.decimal_complex import DecimalComplex
from exactnum.complex.fraction_complex import FractionComplex
from exactnum.complex.integer_complex import BigIntegerComplex
from exactnum.complex.polar import PolarForm

__all__ = [
    # Contract
    "AbstractComplex",
    "PolarForm",
    # Variants
    "BigIntegerComplex",
    "DecimalComplex",
    "FractionComplex",
]
