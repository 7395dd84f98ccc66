"""
decimal-bignum — десятичные целые произвольной точности

Знако-модульное представление с основанием 10, сложение/вычитание
со знаком, сравнение модулей, умножение Karatsuba и деление с остатком.
"""

from bignum.core.config import (
    DEFAULT_CONFIG,
    BigNumConfig,
    DivisionStrategy,
    StorageKind,
)
from bignum.core.domain import (
    BASE,
    AllocationFailure,
    BigNum,
    BigNumError,
    BigNumPayload,
    DivisionByZero,
    ParseError,
    ReleasedValueError,
    ReleasePool,
    from_digits,
    from_integer,
    from_payload,
    from_string,
    negate,
    release,
    release_all,
    reserve,
    to_payload,
    to_string,
)
from bignum.core.math import (
    Ordering,
    add,
    compare,
    copy,
    divide,
    divide_with_remainder,
    multiply,
    multiply_by_digit,
    pad,
    shift,
    split,
    subtract,
    unshift,
)

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "BigNumConfig",
    "DEFAULT_CONFIG",
    "DivisionStrategy",
    "StorageKind",
    # Errors
    "BigNumError",
    "ParseError",
    "DivisionByZero",
    "AllocationFailure",
    "ReleasedValueError",
    # Construction & conversion
    "BASE",
    "BigNum",
    "reserve",
    "from_integer",
    "from_digits",
    "from_string",
    "to_string",
    "negate",
    # Lifecycle
    "release",
    "release_all",
    "ReleasePool",
    # Payload
    "BigNumPayload",
    "to_payload",
    "from_payload",
    # Arithmetic
    "Ordering",
    "compare",
    "add",
    "subtract",
    "multiply",
    "multiply_by_digit",
    "divide",
    "divide_with_remainder",
    # Helpers
    "copy",
    "pad",
    "shift",
    "unshift",
    "split",
]
