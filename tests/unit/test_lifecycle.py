"""
Тесты для Lifecycle

Проверяет:
1. release / release_all
2. Повторное освобождение → ReleasedValueError
3. ReleasePool освобождает значения при выходе, в том числе при исключении
"""

import pytest

from bignum import (
    BigNum,
    ReleasedValueError,
    ReleasePool,
    from_integer,
    release,
    release_all,
)


class TestRelease:
    """Тесты для release"""

    def test_marks_released(self) -> None:
        value = from_integer(42)
        release(value)
        assert value.released

    def test_double_release_raises(self) -> None:
        value = from_integer(42)
        release(value)
        with pytest.raises(ReleasedValueError):
            release(value)

    def test_read_after_release_raises(self) -> None:
        value = from_integer(42)
        release(value)
        with pytest.raises(ReleasedValueError):
            str(value)

    def test_context_manager(self) -> None:
        with from_integer(7) as value:
            assert int(value) == 7
        assert value.released


class TestReleaseAll:
    """Тесты для release_all"""

    def test_releases_each(self) -> None:
        values = [from_integer(n) for n in (1, 22, 333)]
        assert release_all(values) == 3
        assert all(v.released for v in values)

    def test_empty(self) -> None:
        assert release_all([]) == 0

    def test_duplicate_entry_raises(self) -> None:
        value = from_integer(5)
        with pytest.raises(ReleasedValueError):
            release_all([value, value])


class TestReleasePool:
    """Тесты для ReleasePool"""

    def test_track_returns_value(self) -> None:
        pool = ReleasePool()
        value = from_integer(3)
        assert pool.track(value) is value
        assert len(pool) == 1
        pool.close()

    def test_releases_on_exit(self) -> None:
        with ReleasePool() as pool:
            a = pool.track(from_integer(1))
            b = pool.track(from_integer(2))
        assert a.released
        assert b.released
        assert len(pool) == 0

    def test_releases_on_exception(self) -> None:
        tracked: list[BigNum] = []
        with pytest.raises(RuntimeError, match="boom"):
            with ReleasePool() as pool:
                tracked.append(pool.track(from_integer(9)))
                raise RuntimeError("boom")
        assert tracked[0].released

    def test_untracked_value_survives(self) -> None:
        with ReleasePool() as pool:
            pool.track(from_integer(1))
            kept = from_integer(2)
        assert not kept.released
        assert int(kept) == 2

    def test_close_returns_count(self) -> None:
        pool = ReleasePool()
        pool.track(from_integer(1))
        pool.track(from_integer(2))
        assert pool.close() == 2
        assert pool.close() == 0


class TestPartialFailure:
    """Ошибка на одном значении не оставляет остальные неосвобождёнными"""

    def test_release_all_continues_after_error(self) -> None:
        first = from_integer(1)
        later = from_integer(2)
        with pytest.raises(ReleasedValueError):
            release_all([first, first, later])
        assert later.released

    def test_pool_close_releases_rest(self) -> None:
        pool = ReleasePool()
        value = pool.track(from_integer(1))
        pool.track(value)
        other = pool.track(from_integer(2))
        with pytest.raises(ReleasedValueError):
            pool.close()
        assert other.released
        assert len(pool) == 0

    def test_block_exception_not_masked(self) -> None:
        tracked: list[BigNum] = []
        with pytest.raises(KeyError):
            with ReleasePool() as pool:
                value = pool.track(from_integer(1))
                pool.track(value)
                tracked.append(pool.track(from_integer(2)))
                raise KeyError("lookup")
        assert tracked[0].released
