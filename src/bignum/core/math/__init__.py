"""
Core math modules для decimal-bignum

Арифметические примитивы над BigNum: сравнение, сложение/вычитание,
умножение Karatsuba, деление с остатком и структурные утилиты.
"""

# Scaling & Partition Helpers
from bignum.core.math.scaling import copy, pad, shift, split, unshift

# Comparator
from bignum.core.math.comparator import Ordering, compare

# Additive Core
from bignum.core.math.additive import add, subtract

# Multiplicative Core
from bignum.core.math.karatsuba import multiply, multiply_by_digit

# Divisive Core
from bignum.core.math.division import divide, divide_with_remainder

__all__ = [
    # Scaling & Partition Helpers
    "copy",
    "pad",
    "shift",
    "unshift",
    "split",
    # Comparator
    "Ordering",
    "compare",
    # Additive Core
    "add",
    "subtract",
    # Multiplicative Core
    "multiply",
    "multiply_by_digit",
    # Divisive Core
    "divide",
    "divide_with_remainder",
]
