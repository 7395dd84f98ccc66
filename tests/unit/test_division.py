"""
Тесты для Divisive Core

Проверяет:
1. Деление с остатком: |x| = |q| * |y| + r, 0 <= r < |y|
2. Знак частного = XOR знаков, ноль неотрицателен
3. Граничные случаи |x| < |y|, |x| == |y|
4. DivisionByZero — восстановимая ошибка
5. Совпадение стратегий LONG и RESTORING
6. Освобождение временных значений каждой итерации
7. Работа в фиксированном блоке StorageKind.FIXED на его границе
"""

import random

import pytest

from bignum import (
    BigNum,
    BigNumConfig,
    DivisionByZero,
    DivisionStrategy,
    StorageKind,
    add,
    divide,
    divide_with_remainder,
    from_integer,
    from_string,
    multiply,
    subtract,
)

STRATEGIES = [DivisionStrategy.LONG, DivisionStrategy.RESTORING]


class TestDivideWithRemainder:
    """Тесты для divide_with_remainder"""

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_basic(self, strategy: DivisionStrategy) -> None:
        q, r = divide_with_remainder(from_integer(17), from_integer(5), strategy=strategy)
        assert str(q) == "3"
        assert str(r) == "2"

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_smaller_dividend(self, strategy: DivisionStrategy) -> None:
        q, r = divide_with_remainder(from_integer(4), from_integer(9), strategy=strategy)
        assert q.is_zero
        assert int(r) == 4

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_equal_magnitudes(self, strategy: DivisionStrategy) -> None:
        q, r = divide_with_remainder(from_integer(-987), from_integer(987), strategy=strategy)
        assert int(q) == -1
        assert r.is_zero

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_zero_dividend(self, strategy: DivisionStrategy) -> None:
        q, r = divide_with_remainder(from_integer(0), from_integer(-3), strategy=strategy)
        assert q.is_zero
        assert q.sign is False
        assert r.is_zero

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_divisor_one(self, strategy: DivisionStrategy) -> None:
        value = from_string("123456789012345678901234567890")
        q, r = divide_with_remainder(value, from_integer(1), strategy=strategy)
        assert q == value
        assert r.is_zero

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_aligned_divisor_larger_than_dividend(self, strategy: DivisionStrategy) -> None:
        """Выровненный делитель 900 > 100 требует сдвига на разряд назад"""
        q, r = divide_with_remainder(from_integer(100), from_integer(9), strategy=strategy)
        assert int(q) == 11
        assert int(r) == 1

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_zero_digits_inside_quotient(self, strategy: DivisionStrategy) -> None:
        q, r = divide_with_remainder(from_integer(1000007), from_integer(7), strategy=strategy)
        assert int(q) == 142858
        assert int(r) == 1

    @pytest.mark.parametrize(
        "x, y",
        [(17, -5), (-17, 5), (-17, -5), (17, 5)],
    )
    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_sign_is_xor_and_remainder_non_negative(
        self, x: int, y: int, strategy: DivisionStrategy
    ) -> None:
        q, r = divide_with_remainder(from_integer(x), from_integer(y), strategy=strategy)
        assert int(q) == (-3 if (x < 0) != (y < 0) else 3)
        assert int(r) == 2

    def test_operands_unchanged(self) -> None:
        x = from_integer(-1000)
        y = from_integer(7)
        divide_with_remainder(x, y)
        assert int(x) == -1000
        assert int(y) == 7


class TestIdentity:
    """Свойство деления на случайных операндах"""

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_non_negative_dividend(self, strategy: DivisionStrategy) -> None:
        rng = random.Random(2024)
        for _ in range(30):
            x = from_integer(rng.randint(0, 10**40))
            y = from_integer(rng.choice([1, -1]) * rng.randint(1, 10**15))
            q, r = divide_with_remainder(x, y, strategy=strategy)
            assert add(multiply(q, y), r) == x
            assert 0 <= int(r) < abs(int(y))

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_negative_dividend_uses_magnitudes(self, strategy: DivisionStrategy) -> None:
        rng = random.Random(77)
        for _ in range(30):
            a = rng.randint(1, 10**30)
            b = rng.randint(1, 10**12)
            q, r = divide_with_remainder(from_integer(-a), from_integer(b), strategy=strategy)
            assert abs(int(q)) * b + int(r) == a
            assert 0 <= int(r) < b
            assert int(q) == -(a // b)

    def test_strategies_agree(self) -> None:
        rng = random.Random(5)
        for _ in range(25):
            x = from_integer(rng.randint(-(10**25), 10**25))
            y = from_integer(rng.randint(1, 10**9) * rng.choice([1, -1]))
            q_long, r_long = divide_with_remainder(x, y, strategy=DivisionStrategy.LONG)
            q_slow, r_slow = divide_with_remainder(x, y, strategy=DivisionStrategy.RESTORING)
            assert q_long == q_slow
            assert r_long == r_slow


class TestDivide:
    """Тесты для divide"""

    def test_truncates_toward_zero(self) -> None:
        assert str(divide(from_integer(-17), from_integer(5))) == "-3"

    def test_large_values(self) -> None:
        product = from_string("121932631112635269")
        assert str(divide(product, from_string("987654321"))) == "123456789"

    def test_strategy_from_config(self) -> None:
        config = BigNumConfig(division_strategy=DivisionStrategy.RESTORING)
        x = from_integer(12345, config)
        assert int(divide(x, from_integer(12))) == 1028


class TestDivisionByZero:
    """Деление на ноль — восстановимая ошибка"""

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_raises(self, strategy: DivisionStrategy) -> None:
        with pytest.raises(DivisionByZero):
            divide_with_remainder(from_integer(5), from_integer(0), strategy=strategy)

    def test_is_zero_division_error(self) -> None:
        with pytest.raises(ZeroDivisionError):
            divide(from_integer(5), from_string("-0"))

    def test_process_continues(self) -> None:
        with pytest.raises(DivisionByZero):
            divide(from_integer(1), from_integer(0))
        assert int(divide(from_integer(10), from_integer(2))) == 5


class TestTemporaries:
    """После деления живы только частное и остаток"""

    @pytest.mark.parametrize("strategy", STRATEGIES)
    @pytest.mark.parametrize(
        "x, y", [(999999, 7), (-123456789012345, 98765), (5, 9), (77, -77)]
    )
    def test_only_results_live(
        self, monkeypatch, strategy: DivisionStrategy, x: int, y: int
    ) -> None:
        dividend = from_integer(x)
        divisor = from_integer(y)

        created = []
        original_init = BigNum.__init__

        def recording_init(self, *args, **kwargs):
            original_init(self, *args, **kwargs)
            created.append(self)

        monkeypatch.setattr(BigNum, "__init__", recording_init)

        q, r = divide_with_remainder(dividend, divisor, strategy=strategy)

        live = [value for value in created if not value.released]
        assert len(live) == 2
        assert any(value is q for value in live)
        assert any(value is r for value in live)
        assert not dividend.released
        assert not divisor.released

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_divide_releases_remainder(self, monkeypatch, strategy: DivisionStrategy) -> None:
        dividend = from_integer(1000007)
        divisor = from_integer(7)

        created = []
        original_init = BigNum.__init__

        def recording_init(self, *args, **kwargs):
            original_init(self, *args, **kwargs)
            created.append(self)

        monkeypatch.setattr(BigNum, "__init__", recording_init)

        quotient = divide(dividend, divisor, strategy=strategy)

        live = [value for value in created if not value.released]
        assert len(live) == 1
        assert live[0] is quotient


class TestFixedBlock:
    """Операнды и результаты, занимающие блок целиком"""

    def test_add_at_block_size(self) -> None:
        config = BigNumConfig(storage_kind=StorageKind.FIXED, fixed_capacity=3)
        result = add(from_integer(100, config), from_integer(1, config))
        assert int(result) == 101
        assert result.capacity == 3

    def test_subtract_at_block_size(self) -> None:
        config = BigNumConfig(storage_kind=StorageKind.FIXED, fixed_capacity=3)
        assert int(subtract(from_integer(100, config), from_integer(1, config))) == 99
        assert int(subtract(from_integer(-999, config), from_integer(-1, config))) == -998
        assert int(add(from_integer(-999, config), from_integer(999, config))) == 0

    def test_carry_past_block_fails(self) -> None:
        config = BigNumConfig(storage_kind=StorageKind.FIXED, fixed_capacity=3)
        with pytest.raises(MemoryError):
            add(from_integer(999, config), from_integer(1, config))

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_divide_at_block_size(self, strategy: DivisionStrategy) -> None:
        config = BigNumConfig(storage_kind=StorageKind.FIXED, fixed_capacity=6)
        q, r = divide_with_remainder(
            from_integer(999999, config), from_integer(7, config), strategy=strategy
        )
        assert int(q) == 142857
        assert int(r) == 0

    @pytest.mark.parametrize("strategy", STRATEGIES)
    @pytest.mark.parametrize(
        "x, y", [(999999, 123), (999999, 199999), (987654, -19), (-999999, 999998)]
    )
    def test_divide_varied_divisors(self, strategy: DivisionStrategy, x: int, y: int) -> None:
        config = BigNumConfig(storage_kind=StorageKind.FIXED, fixed_capacity=6)
        q, r = divide_with_remainder(
            from_integer(x, config), from_integer(y, config), strategy=strategy
        )
        assert abs(int(q)) * abs(y) + int(r) == abs(x)
        assert 0 <= int(r) < abs(y)
