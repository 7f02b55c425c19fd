"""
FractionCore: рациональные числа над целочисленными компонентами.
"""

from exactnum.fraction.base import AbstractFraction, compare, max_of, min_of
from exactnum.fraction.big_fraction import BigFraction, BigFractionOps
from exactnum.fraction.long_fraction import LongFraction

__all__ = [
    # Contract
    "AbstractFraction",
    # Ordering
    "compare",
    "max_of",
    "min_of",
    # Variants
    "BigFraction",
    "BigFractionOps",
    "LongFraction",
]
