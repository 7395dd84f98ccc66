"""
Multiplicative Core — умножение Karatsuba

Рекурсивное умножение "разделяй и властвуй" за O(n^log2(3)) ≈ O(n^1.585)
цифровых операций, глубина рекурсии O(log n).

ФОРМУЛЫ:
    x = x_high * B^m + x_low,  y = y_high * B^m + y_low,  m = L // 2
    p_high  = x_high * y_high
    p_low   = x_low * y_low
    p_mid   = (x_high + x_low) * (y_high + y_low)
    p_cross = p_mid - (p_high + p_low)
    x * y   = p_high * B^(2m) + p_cross * B^m + p_low

Базовый случай: один из операндов — одна цифра d; результат — другой
операнд, сложенный сам с собой d раз (d < BASE).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Знак результата = XOR знаков операндов (ноль неотрицателен)
2. Все 16 промежуточных значений одного вызова освобождаются до возврата
"""

from bignum.core.domain.lifecycle import ReleasePool
from bignum.core.domain.storage import BASE
from bignum.core.domain.value import BigNum, reserve
from bignum.core.math.additive import add, subtract
from bignum.core.math.scaling import pad, shift, split


def multiply_by_digit(value: BigNum, digit: int) -> BigNum:
    """
    Умножение на одну цифру повторным сложением.

    Args:
        value: Множимое
        digit: Цифра в [0, BASE-1]

    Returns:
        Новое значение value * digit (знак value; ноль неотрицателен)

    Raises:
        ValueError: Если digit вне [0, BASE-1]

    Examples:
        >>> str(multiply_by_digit(from_integer(123), 3))
        '369'
    """
    if not 0 <= digit < BASE:
        raise ValueError(f"digit must be in [0, {BASE - 1}], got {digit}")

    total = reserve(1, value.config)
    for _ in range(digit):
        next_total = add(total, value)
        total.release()
        total = next_total
    return total


def multiply(x: BigNum, y: BigNum) -> BigNum:
    """
    Умножение x * y (Karatsuba).

    Args:
        x: Первый множитель
        y: Второй множитель

    Returns:
        Новое значение x * y

    Examples:
        >>> str(multiply(from_string("123456789"), from_string("987654321")))
        '121932631112635269'
        >>> str(multiply(from_integer(-12), from_integer(12)))
        '-144'
    """
    negative = x.sign != y.sign

    if x.length == 1:
        result = multiply_by_digit(y, x.digit(0))
    elif y.length == 1:
        result = multiply_by_digit(x, y.digit(0))
    else:
        result = _karatsuba(x, y)

    result.set_sign(negative)
    return result


def _karatsuba(x: BigNum, y: BigNum) -> BigNum:
    """Рекурсивный шаг для операндов длиной >= 2 (результат неотрицателен)."""
    width = max(x.length, y.length)
    half = width // 2

    with ReleasePool() as pool:
        # Выравнивание длин
        x_padded = pool.track(pad(x, width))
        y_padded = pool.track(pad(y, width))

        x_low, x_high = split(x_padded)
        y_low, y_high = split(y_padded)
        for part in (x_low, x_high, y_low, y_high):
            pool.track(part)

        # Три рекурсивных произведения
        p_high = pool.track(multiply(x_high, y_high))
        p_low = pool.track(multiply(x_low, y_low))
        sum_x = pool.track(add(x_high, x_low))
        sum_y = pool.track(add(y_high, y_low))
        p_mid = pool.track(multiply(sum_x, sum_y))

        # Перекрёстный член
        p_outer = pool.track(add(p_high, p_low))
        p_cross = pool.track(subtract(p_mid, p_outer))

        # Сборка результата
        high_shifted = pool.track(shift(p_high, 2 * half))
        cross_shifted = pool.track(shift(p_cross, half))
        partial = pool.track(add(high_shifted, cross_shifted))
        return add(partial, p_low)
