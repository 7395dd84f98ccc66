"""
Domain models and value objects.

Contains the BigNum value, its digit storage, lifecycle helpers,
textual conversion and the JSON payload model.
"""

from bignum.core.domain.errors import (
    AllocationFailure,
    BigNumError,
    DivisionByZero,
    ParseError,
    ReleasedValueError,
)
from bignum.core.domain.lifecycle import ReleasePool, release, release_all
from bignum.core.domain.payload import BigNumPayload, from_payload, to_payload
from bignum.core.domain.storage import (
    BASE,
    DigitStorage,
    DynamicDigitStorage,
    FixedDigitStorage,
    allocate_storage,
)
from bignum.core.domain.text import from_string, to_string
from bignum.core.domain.value import (
    BigNum,
    from_digits,
    from_integer,
    negate,
    reserve,
)

__all__ = [
    # Errors
    "BigNumError",
    "ParseError",
    "DivisionByZero",
    "AllocationFailure",
    "ReleasedValueError",
    # Storage
    "BASE",
    "DigitStorage",
    "DynamicDigitStorage",
    "FixedDigitStorage",
    "allocate_storage",
    # Value
    "BigNum",
    "reserve",
    "from_integer",
    "from_digits",
    "negate",
    # Text
    "from_string",
    "to_string",
    # Lifecycle
    "release",
    "release_all",
    "ReleasePool",
    # Payload
    "BigNumPayload",
    "to_payload",
    "from_payload",
]
