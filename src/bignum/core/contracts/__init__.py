"""
Contract Validation Module

Модуль для валидации JSON контрактов decimal-bignum.
"""

from .validators import (
    SCHEMA_VERSION,
    BigNumValueValidator,
    ContractValidator,
    SchemaLoader,
    validate_bignum_value,
)

__all__ = [
    "SCHEMA_VERSION",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigNumValueValidator",
    # Functions
    "validate_bignum_value",
]
