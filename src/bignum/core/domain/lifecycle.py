"""
Lifecycle — явное освобождение значений

- release(value): освобождение одного значения
- release_all(values): освобождение упорядоченной коллекции
- ReleasePool: scoped-освобождение временных значений

ReleasePool освобождает все отслеживаемые значения при выходе из блока,
в том числе при исключении. Значение, возвращаемое наружу, в пул не
добавляется.
"""

import logging
from typing import Iterable, List, Optional

from bignum.core.domain.errors import ReleasedValueError
from bignum.core.domain.value import BigNum

logger = logging.getLogger(__name__)


def release(value: BigNum) -> None:
    """
    Освобождение значения.

    Raises:
        ReleasedValueError: Если значение уже освобождено
    """
    value.release()


def release_all(values: Iterable[BigNum]) -> int:
    """
    Освобождение коллекции значений в заданном порядке.

    Ошибка на одном значении не прерывает освобождение остальных:
    первая ReleasedValueError поднимается после обхода всей коллекции.

    Args:
        values: Значения, каждое освобождается ровно один раз

    Returns:
        Количество освобождённых значений

    Raises:
        ReleasedValueError: Если какое-либо значение уже освобождено
    """
    count = 0
    first_error: Optional[ReleasedValueError] = None
    for value in values:
        try:
            value.release()
        except ReleasedValueError as exc:
            if first_error is None:
                first_error = exc
            continue
        count += 1

    if first_error is not None:
        raise first_error
    return count


class ReleasePool:
    """
    Пул временных значений с освобождением при выходе из контекста.

    Examples:
        >>> with ReleasePool() as pool:
        ...     tmp = pool.track(from_integer(5))
        ...     result = add(tmp, tmp)
        >>> tmp.released
        True
    """

    def __init__(self):
        self._owned: List[BigNum] = []

    def track(self, value: BigNum) -> BigNum:
        """Регистрация временного значения; возвращает его же"""
        self._owned.append(value)
        return value

    def __len__(self) -> int:
        return len(self._owned)

    def close(self) -> int:
        """
        Освобождение всех отслеживаемых значений (в порядке регистрации).

        Returns:
            Количество освобождённых значений

        Raises:
            ReleasedValueError: Если какое-либо значение уже освобождено
                (остальные значения всё равно освобождаются)
        """
        owned, self._owned = self._owned, []
        return release_all(owned)

    def __enter__(self) -> "ReleasePool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
            return

        # Исходное исключение блока имеет приоритет
        try:
            self.close()
        except ReleasedValueError:
            logger.warning(
                "Double release while unwinding from %s", exc_type.__name__, exc_info=True
            )
