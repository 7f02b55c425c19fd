"""
exactnum — точная арифметика рациональных и complex чисел

Два независимых семейства immutable value types:
- FractionCore: BigFraction, LongFraction
- ComplexCore:  BigIntegerComplex, DecimalComplex, FractionComplex
"""

from exactnum.complex import (
    AbstractComplex,
    BigIntegerComplex,
    DecimalComplex,
    FractionComplex,
    PolarForm,
)
from exactnum.core import (
    DEFAULT_CONTEXT,
    ArithmeticContext,
    InexactConversionError,
    InvalidArgumentError,
    InvalidStateError,
    RoundingMode,
)
from exactnum.fraction import (
    AbstractFraction,
    BigFraction,
    LongFraction,
    compare,
    max_of,
    min_of,
)

__all__ = [
    # Context
    "DEFAULT_CONTEXT",
    "ArithmeticContext",
    "RoundingMode",
    # Errors
    "InexactConversionError",
    "InvalidArgumentError",
    "InvalidStateError",
    # Fractions
    "AbstractFraction",
    "BigFraction",
    "LongFraction",
    "compare",
    "max_of",
    "min_of",
    # Complex numbers
    "AbstractComplex",
    "BigIntegerComplex",
    "DecimalComplex",
    "FractionComplex",
    "PolarForm",
]
