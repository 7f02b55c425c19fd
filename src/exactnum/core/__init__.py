"""
Core primitives: ошибки, контекст точности, capability set компонент,
конверсии и приближённые функции над Decimal.
"""

from exactnum.core.components import (
    LONG_MAX,
    LONG_MIN,
    ComponentOps,
    DecimalOps,
    FieldOps,
    IntegerOps,
    IntegralOps,
    LongOps,
)
from exactnum.core.context import (
    DEFAULT_CONTEXT,
    DEFAULT_PRECISION,
    DEFAULT_ROUNDING,
    ArithmeticContext,
    RoundingMode,
    resolve_context,
)
from exactnum.core.errors import (
    InexactConversionError,
    InvalidArgumentError,
    InvalidStateError,
)

__all__ = [
    # Components
    "LONG_MAX",
    "LONG_MIN",
    "ComponentOps",
    "DecimalOps",
    "FieldOps",
    "IntegerOps",
    "IntegralOps",
    "LongOps",
    # Context
    "DEFAULT_CONTEXT",
    "DEFAULT_PRECISION",
    "DEFAULT_ROUNDING",
    "ArithmeticContext",
    "RoundingMode",
    "resolve_context",
    # Errors
    "InexactConversionError",
    "InvalidArgumentError",
    "InvalidStateError",
]
