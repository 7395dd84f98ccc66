"""
Comparator — сравнение модулей значений

ПРЕДУСЛОВИЕ: compare() сравнивает только модули и НЕ учитывает знак.
Вызывающий код обязан передавать операнды одного знака или заранее
снять знаки. Все внутренние вызовы (вычитание после нормализации знаков,
деление над модулями) это предусловие соблюдают.
"""

from enum import IntEnum

from bignum.core.domain.value import BigNum


class Ordering(IntEnum):
    """Результат сравнения"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare(a: BigNum, b: BigNum) -> Ordering:
    """
    Сравнение модулей |a| и |b|.

    При разной длине результат определяется более длинным операндом,
    при равной — поразрядно, начиная со старшей цифры.

    Args:
        a: Первый операнд (нормализованный)
        b: Второй операнд (нормализованный)

    Returns:
        Ordering.LESS / EQUAL / GREATER для |a| относительно |b|

    Examples:
        >>> compare(from_integer(99), from_integer(100))
        <Ordering.LESS: -1>
        >>> compare(from_integer(-5), from_integer(5))
        <Ordering.EQUAL: 0>
    """
    if a.length < b.length:
        return Ordering.LESS
    if a.length > b.length:
        return Ordering.GREATER

    a_digits = a.digits
    b_digits = b.digits
    for i in range(len(a_digits) - 1, -1, -1):
        if a_digits[i] < b_digits[i]:
            return Ordering.LESS
        if a_digits[i] > b_digits[i]:
            return Ordering.GREATER
    return Ordering.EQUAL
