"""
Conversions — конверсии в примитивы фиксированной ширины

Сужение выполняется как в двоичном дополнении: берутся младшие bits бит
(аналог narrowing toByte/toShort/toInt/toLong на платформах с
фиксированной шириной целых).
"""

from typing import Final

INT8_BITS: Final[int] = 8
INT16_BITS: Final[int] = 16
INT32_BITS: Final[int] = 32
INT64_BITS: Final[int] = 64


def truncate_quotient(numerator: int, denominator: int) -> int:
    """
    Целая часть numerator / denominator с округлением к нулю.

    Raises:
        ZeroDivisionError: Если denominator == 0
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def wrap_to_width(value: int, bits: int) -> int:
    """
    Сужение value до signed целого ширины bits (двоичное дополнение).

    Examples:
        >>> wrap_to_width(127, 8)
        127
        >>> wrap_to_width(128, 8)
        -128
        >>> wrap_to_width(-129, 8)
        127
    """
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")
    modulus = 1 << bits
    wrapped = value & (modulus - 1)
    if wrapped >= modulus >> 1:
        wrapped -= modulus
    return wrapped
