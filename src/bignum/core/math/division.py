"""
Divisive Core — деление с остатком

Две стратегии (BigNumConfig.division_strategy):
- LONG: длинное деление; очередная цифра частного оценивается по двум
  старшим цифрам остатка и старшей цифре выровненного делителя, затем
  уточняется вычитанием делителя не более guess раз.
  Промежуточные значения не превышают делимого, поэтому деление
  укладывается в фиксированный блок StorageKind.FIXED
- RESTORING: поразрядное восстанавливающее деление (медленное)

Обе стратегии работают над модулями и дают одинаковый результат:
- знак частного = XOR знаков операндов (ноль неотрицателен)
- остаток всегда неотрицателен: |x| = |q| * |y| + r, 0 <= r < |y|

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. y == 0 → DivisionByZero (восстановимая ошибка)
2. Временные значения каждой итерации освобождаются на той же итерации
3. Операнды не модифицируются
"""

import logging
from typing import Optional

from bignum.core.config import DivisionStrategy
from bignum.core.domain.errors import DivisionByZero
from bignum.core.domain.lifecycle import ReleasePool
from bignum.core.domain.storage import BASE
from bignum.core.domain.value import BigNum, from_digits, from_integer, negate
from bignum.core.math.additive import add, subtract
from bignum.core.math.comparator import Ordering, compare
from bignum.core.math.scaling import copy, shift, unshift

logger = logging.getLogger(__name__)


# =============================================================================
# PUBLIC API
# =============================================================================


def divide(
    x: BigNum, y: BigNum, strategy: Optional[DivisionStrategy] = None
) -> BigNum:
    """
    Целочисленное деление x / y (усечение к нулю).

    Args:
        x: Делимое
        y: Делитель (не ноль)
        strategy: Алгоритм (default: x.config.division_strategy)

    Returns:
        Новое значение — частное

    Raises:
        DivisionByZero: Если y == 0

    Examples:
        >>> str(divide(from_integer(-17), from_integer(5)))
        '-3'
    """
    quotient, remainder = divide_with_remainder(x, y, strategy=strategy)
    remainder.release()
    return quotient


def divide_with_remainder(
    x: BigNum, y: BigNum, strategy: Optional[DivisionStrategy] = None
) -> tuple[BigNum, BigNum]:
    """
    Деление с остатком.

    Args:
        x: Делимое
        y: Делитель (не ноль)
        strategy: Алгоритм (default: x.config.division_strategy)

    Returns:
        (quotient, remainder), где remainder = |x| - |q| * |y| >= 0

    Raises:
        DivisionByZero: Если y == 0

    Examples:
        >>> q, r = divide_with_remainder(from_integer(17), from_integer(5))
        >>> (str(q), str(r))
        ('3', '2')
    """
    if y.is_zero:
        raise DivisionByZero(f"Division of {x} by zero")

    if strategy is None:
        strategy = x.config.division_strategy
    logger.debug(
        "Dividing %d-digit by %d-digit value (strategy=%s)",
        x.length,
        y.length,
        strategy.value,
    )

    with ReleasePool() as pool:
        n = pool.track(_magnitude(x))
        d = pool.track(_magnitude(y))

        if strategy == DivisionStrategy.RESTORING:
            quotient, remainder = _restoring_divide(n, d)
        else:
            quotient, remainder = _long_divide(n, d)

    quotient.set_sign(x.sign != y.sign)
    return quotient, remainder


# =============================================================================
# LONG DIVISION
# =============================================================================


def _long_divide(n: BigNum, d: BigNum) -> tuple[BigNum, BigNum]:
    """Длинное деление модулей n / d (оба >= 0, d > 0)."""
    order = compare(n, d)
    if order == Ordering.LESS:
        return from_integer(0, n.config), copy(n)
    if order == Ordering.EQUAL:
        return from_integer(1, n.config), from_integer(0, n.config)

    zeros = n.length - d.length

    # Выравнивание старшей цифры делителя со старшей цифрой делимого
    divisor = shift(d, zeros)
    if compare(divisor, n) == Ordering.GREATER:
        shrunk = unshift(divisor, 1)
        divisor.release()
        divisor = shrunk
        zeros -= 1

    remainder = copy(n)
    quotient_digits = []

    for _ in range(zeros + 1):
        with ReleasePool() as pool:
            guess = _estimate_digit(remainder, divisor)

            # Двухцифровая оценка может превышать истинную цифру: вычитаем
            # делитель не более guess раз, пока остаток >= делителя.
            # Остаток только убывает, пробное произведение не строится.
            digit = 0
            while digit < guess and compare(remainder, divisor) != Ordering.LESS:
                pool.track(remainder)
                remainder = subtract(remainder, divisor)
                digit += 1

            quotient_digits.append(digit)

            pool.track(divisor)
            divisor = unshift(divisor, 1)

    divisor.release()
    quotient = from_digits(quotient_digits[::-1], config=n.config)
    return quotient, remainder


def _estimate_digit(remainder: BigNum, divisor: BigNum) -> int:
    """
    Оценка сверху очередной цифры частного.

    (две старшие цифры остатка) // (старшая цифра делителя), не более BASE-1.
    """
    top = remainder.digit(remainder.length - 1)
    second = remainder.digit(remainder.length - 2) if remainder.length > 1 else 0
    return min((top * BASE + second) // divisor.digit(divisor.length - 1), BASE - 1)


# =============================================================================
# RESTORING DIVISION
# =============================================================================


def _restoring_divide(n: BigNum, d: BigNum) -> tuple[BigNum, BigNum]:
    """Поразрядное деление: снос очередной цифры и вычитание d, пока r >= d."""
    remainder = from_integer(0, n.config)
    n_digits = n.digits
    quotient_digits = [0] * len(n_digits)

    for i in range(len(n_digits) - 1, -1, -1):
        with ReleasePool() as pool:
            pool.track(remainder)
            widened = pool.track(shift(remainder, 1))
            brought_down = pool.track(from_integer(n_digits[i], n.config))
            remainder = add(widened, brought_down)

            while compare(remainder, d) != Ordering.LESS:
                quotient_digits[i] += 1
                pool.track(remainder)
                remainder = subtract(remainder, d)

    quotient = from_digits(quotient_digits, config=n.config)
    return quotient, remainder


def _magnitude(value: BigNum) -> BigNum:
    """Неотрицательная глубокая копия |value|."""
    if value.sign:
        return negate(value)
    return copy(value)
