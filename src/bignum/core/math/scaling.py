"""
Scaling & Partition Helpers — структурные утилиты для Karatsuba и деления

- copy: глубокая копия с минимальной ёмкостью
- pad: копия, дополненная до заданной длины
- shift: умножение на BASE^k (k нулей в младших разрядах)
- unshift: целочисленное деление на BASE^k (отбросить k младших цифр)
- split: разбиение на младшую и старшую половины

Все операции возвращают новые значения; операнд не меняется.
shift/unshift сохраняют знак (ноль всегда неотрицателен).
"""

from bignum.core.domain.storage import BASE
from bignum.core.domain.value import BigNum, from_digits, reserve


def copy(value: BigNum, min_capacity: int = 0) -> BigNum:
    """
    Глубокая копия значения.

    Args:
        value: Исходное значение
        min_capacity: Минимальная ёмкость копии

    Returns:
        Новое значение ёмкостью max(value.length, min_capacity)
        с теми же знаком, длиной и цифрами
    """
    result = reserve(max(value.length, min_capacity), value.config)
    result.put_digits(0, value.digits)
    result.set_length(value.length)
    result.set_sign(value.sign)
    return result


def pad(value: BigNum, target_length: int, fill_digit: int = 0) -> BigNum:
    """
    Копия, расширенная до target_length цифр.

    Новые старшие позиции заполняются fill_digit. Результат НЕ
    нормализуется (используется для выравнивания длин перед split).

    Args:
        value: Исходное значение
        target_length: Требуемая длина
        fill_digit: Цифра заполнения в [0, BASE-1]

    Returns:
        Новое значение длиной max(value.length, target_length)

    Raises:
        ValueError: Если fill_digit вне [0, BASE-1]
    """
    if not 0 <= fill_digit < BASE:
        raise ValueError(f"fill_digit must be in [0, {BASE - 1}], got {fill_digit}")

    result = copy(value, target_length)
    length = value.length
    if target_length > length:
        result.put_digits(length, [fill_digit] * (target_length - length))
        result.set_length(target_length)
    return result


def shift(value: BigNum, times: int) -> BigNum:
    """
    Умножение на BASE^times.

    Args:
        value: Исходное значение
        times: Количество добавляемых младших нулей (>= 0)

    Returns:
        Новое нормализованное значение

    Raises:
        ValueError: Если times < 0

    Examples:
        >>> str(shift(from_integer(12), 3))
        '12000'
        >>> str(shift(from_integer(0), 3))
        '0'
    """
    if times < 0:
        raise ValueError(f"times must be non-negative, got {times}")

    if value.is_zero:
        return reserve(1, value.config)
    return from_digits(
        [0] * times + list(value.digits), negative=value.sign, config=value.config
    )


def unshift(value: BigNum, times: int) -> BigNum:
    """
    Целочисленное деление на BASE^times (отбрасывание младших цифр).

    Args:
        value: Исходное значение
        times: Количество отбрасываемых младших цифр (>= 0)

    Returns:
        Новое нормализованное значение; ноль, если times >= length

    Raises:
        ValueError: Если times < 0

    Examples:
        >>> str(unshift(from_integer(12345), 2))
        '123'
        >>> str(unshift(from_integer(12), 5))
        '0'
    """
    if times < 0:
        raise ValueError(f"times must be non-negative, got {times}")

    if times >= value.length:
        return reserve(1, value.config)

    length = value.length - times
    result = reserve(length, value.config)
    result.put_digits(0, value.digits[times:])
    result.set_length(length)
    result.trim()
    result.set_sign(value.sign)
    return result


def split(value: BigNum) -> tuple[BigNum, BigNum]:
    """
    Разбиение на младшую и старшую половины.

    low получает цифры [0, length // 2), high — [length // 2, length).
    Обе половины неотрицательны и нормализованы.

    Args:
        value: Значение длиной >= 2

    Returns:
        (low, high)

    Raises:
        ValueError: Если value.length < 2

    Examples:
        >>> low, high = split(from_integer(12345))
        >>> (str(low), str(high))
        ('45', '123')
    """
    if value.length < 2:
        raise ValueError(f"split requires at least 2 digits, got {value.length}")

    digits = value.digits
    middle = len(digits) // 2

    low = reserve(middle, value.config)
    low.put_digits(0, digits[:middle])
    low.set_length(middle)
    low.trim()

    high = reserve(len(digits) - middle, value.config)
    high.put_digits(0, digits[middle:])
    high.set_length(len(digits) - middle)
    high.trim()

    return low, high
