"""
Textual Conversion — граничные адаптеры строка ↔ BigNum

Формат: необязательный '-', затем цифры от старшей к младшей,
без ведущих нулей (кроме литерала "0").

Разбор строгий: после необязательного '+'/'-' допускаются только ASCII
цифры '0'-'9', хотя бы одна. Любой другой ввод → ParseError.
"""

import logging
from typing import Final, Optional

from bignum.core.config import BigNumConfig
from bignum.core.domain.errors import ParseError
from bignum.core.domain.value import BigNum, reserve

logger = logging.getLogger(__name__)

DECIMAL_DIGITS: Final[str] = "0123456789"


def from_string(text: str, config: Optional[BigNumConfig] = None) -> BigNum:
    """
    Разбор десятичной строки.

    Цифры сохраняются в обратном (little-endian) порядке. Ведущие нули
    допускаются и срезаются; "-0" даёт ноль.

    Args:
        text: Строка вида [+-]?[0-9]+
        config: Конфигурация (default: DEFAULT_CONFIG)

    Returns:
        Новое значение

    Raises:
        TypeError: Если text не str
        ParseError: Если нет цифр или встречен нецифровой символ

    Examples:
        >>> str(from_string("-00120"))
        '-120'
        >>> from_string("12a")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ParseError: Cannot parse '12a' at position 2: ...
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")

    start = 1 if text[:1] in ("+", "-") else 0
    negative = text[:1] == "-"

    if start == len(text):
        logger.debug("Rejected %r: no digits", text)
        raise ParseError(text, start, "expected at least one decimal digit")

    for position in range(start, len(text)):
        if text[position] not in DECIMAL_DIGITS:
            logger.debug("Rejected %r: non-digit at %d", text, position)
            raise ParseError(
                text, position, f"unexpected character {text[position]!r}"
            )

    count = len(text) - start
    result = reserve(count, config)
    result.put_digits(0, [ord(ch) - ord("0") for ch in reversed(text[start:])])
    result.set_length(count)
    result.trim()
    result.set_sign(negative)
    return result


def to_string(value: BigNum) -> str:
    """
    Десятичная запись значения.

    Args:
        value: Значение

    Returns:
        '-' для отрицательных, затем цифры от старшей к младшей

    Examples:
        >>> to_string(from_string("12345"))
        '12345'
    """
    digits = value.digits
    n = len(digits)
    while n > 1 and digits[n - 1] == 0:
        n -= 1

    body = "".join(DECIMAL_DIGITS[d] for d in reversed(digits[:n]))
    if value.sign and body != "0":
        return "-" + body
    return body
