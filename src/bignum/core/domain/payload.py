"""
BigNumPayload — JSON-представление значения

Immutable Pydantic модель, соответствующая схеме
bignum/core/contracts/schema/bignum_value.json.

Формат:
    {"schema_version": "1", "negative": false, "digits": "12345"}
"""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from bignum.core.config import BigNumConfig
from bignum.core.contracts import SCHEMA_VERSION, validate_bignum_value
from bignum.core.domain.text import from_string, to_string
from bignum.core.domain.value import BigNum


class BigNumPayload(BaseModel):
    """
    JSON-представление BigNum.

    Immutable модель (frozen=True). digits — модуль в каноническом виде
    (от старшей цифры, без ведущих нулей).
    """

    schema_version: Literal["1"] = Field(SCHEMA_VERSION, description="Версия контракта")
    negative: bool = Field(..., description="Знак (True — отрицательное)")
    digits: str = Field(
        ...,
        min_length=1,
        pattern=r"^(0|[1-9][0-9]*)$",
        description="Модуль, от старшей цифры к младшей",
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_no_negative_zero(self) -> "BigNumPayload":
        """Ноль всегда неотрицателен."""
        if self.negative and self.digits == "0":
            raise ValueError("zero cannot be negative")
        return self

    def to_bignum(self, config: Optional[BigNumConfig] = None) -> BigNum:
        """Построение нового значения из payload."""
        text = f"-{self.digits}" if self.negative else self.digits
        return from_string(text, config)

    @classmethod
    def from_bignum(cls, value: BigNum) -> "BigNumPayload":
        text = to_string(value)
        return cls(negative=text.startswith("-"), digits=text.lstrip("-"))


def to_payload(value: BigNum) -> Dict[str, Any]:
    """
    Сериализация значения в JSON-совместимый dict.

    Examples:
        >>> to_payload(from_integer(-42))
        {'schema_version': '1', 'negative': True, 'digits': '42'}
    """
    return BigNumPayload.from_bignum(value).model_dump()


def from_payload(data: Dict[str, Any], config: Optional[BigNumConfig] = None) -> BigNum:
    """
    Десериализация значения из JSON-совместимого dict.

    Сначала данные проверяются по JSON Schema контракту, затем
    строится Pydantic модель.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если данные не проходят валидацию модели
    """
    validate_bignum_value(data)
    return BigNumPayload.model_validate(data).to_bignum(config)
