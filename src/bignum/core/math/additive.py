"""
Additive Core — сложение и вычитание со знаком

Смешанные знаки сводятся к беззнаковой поразрядной арифметике:
- add с разными знаками → subtract с инвертированным операндом
- subtract: четыре случая знаков нормализуются к "оба >= 0, a >= b"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операнды не модифицируются; инвертированные операнды — глубокие копии,
   освобождаемые после использования
2. Результат нормализован (старшие нули срезаны, >= 1 цифры)
3. Глубина рекурсии диспетчеризации знаков <= 3
"""

from bignum.core.domain.lifecycle import ReleasePool
from bignum.core.domain.storage import BASE
from bignum.core.domain.value import BigNum, from_digits, negate
from bignum.core.math.comparator import Ordering, compare


# =============================================================================
# SIGNED OPERATIONS
# =============================================================================


def add(a: BigNum, b: BigNum) -> BigNum:
    """
    Сложение a + b.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое

    Returns:
        Новое значение a + b

    Examples:
        >>> str(add(from_integer(-7), from_integer(10)))
        '3'
        >>> str(add(from_integer(-7), from_integer(-8)))
        '-15'
    """
    if a.sign != b.sign:
        with ReleasePool() as pool:
            if a.sign:
                # (-|a|) + b = b - |a|
                return subtract(b, pool.track(negate(a)))
            # a + (-|b|) = a - |b|
            return subtract(a, pool.track(negate(b)))

    return _add_magnitudes(a, b, negative=a.sign)


def subtract(a: BigNum, b: BigNum) -> BigNum:
    """
    Вычитание a - b.

    Диспетчеризация знаков:
    - оба < 0:        a - b = |b| - |a|
    - a < 0 <= b:     a - b = -(|a| + b)
    - a >= 0 > b:     a - b = a + |b|
    - 0 <= a < b:     a - b = -(b - a)
    - 0 <= b <= a:    поразрядное вычитание с заёмом

    Args:
        a: Уменьшаемое
        b: Вычитаемое

    Returns:
        Новое значение a - b

    Examples:
        >>> str(subtract(from_integer(-5), from_integer(-3)))
        '-2'
        >>> str(subtract(from_integer(3), from_integer(10)))
        '-7'
    """
    if a.sign and b.sign:
        with ReleasePool() as pool:
            abs_a = pool.track(negate(a))
            abs_b = pool.track(negate(b))
            return subtract(abs_b, abs_a)

    if a.sign:
        with ReleasePool() as pool:
            abs_a = pool.track(negate(a))
            total = pool.track(add(abs_a, b))
            return negate(total)

    if b.sign:
        with ReleasePool() as pool:
            return add(a, pool.track(negate(b)))

    if compare(a, b) == Ordering.LESS:
        with ReleasePool() as pool:
            difference = pool.track(subtract(b, a))
            return negate(difference)

    return _subtract_magnitudes(a, b)


# =============================================================================
# UNSIGNED DIGIT ARITHMETIC
# =============================================================================


def _add_magnitudes(a: BigNum, b: BigNum, negative: bool) -> BigNum:
    """
    Поразрядное сложение |a| + |b| по max(length)+1 позициям с переносом.

    Цифры собираются локально; хранилище резервируется только под
    нормализованную длину (разряд переноса, лишь если перенос случился).
    """
    a_digits = a.digits
    b_digits = b.digits
    positions = max(len(a_digits), len(b_digits)) + 1

    out = [0] * positions
    carry = 0
    for i in range(positions):
        total = carry
        if i < len(a_digits):
            total += a_digits[i]
        if i < len(b_digits):
            total += b_digits[i]
        carry = total // BASE
        out[i] = total % BASE

    return from_digits(out, negative=negative, config=a.config)


def _subtract_magnitudes(a: BigNum, b: BigNum) -> BigNum:
    """Поразрядное вычитание |a| - |b| (требуется |a| >= |b|) с заёмом."""
    a_digits = a.digits
    b_digits = b.digits
    positions = max(len(a_digits), len(b_digits)) + 1

    out = [0] * positions
    borrow = 0
    for i in range(positions):
        diff = -borrow
        if i < len(a_digits):
            diff += a_digits[i]
        if i < len(b_digits):
            diff -= b_digits[i]
        borrow = 1 if diff < 0 else 0
        out[i] = diff + BASE if diff < 0 else diff

    return from_digits(out, config=a.config)
