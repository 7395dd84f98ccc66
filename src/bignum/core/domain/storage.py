"""
Digit Storage — хранилище десятичных цифр

Две стратегии хранения за одним контрактом DigitStorage:
- DYNAMIC: буфер точно под запрошенную capacity, растёт через grow()
- FIXED: inline-блок фиксированного размера, выделяемый целиком сразу

Стратегия выбирается при создании значения (BigNumConfig.storage_kind),
а не глобальным переключателем.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая цифра хранится как код в [0, BASE-1]
2. Новое хранилище всегда заполнено нулями
3. Два живых хранилища никогда не разделяют один буфер
4. После release() любое чтение/запись → ReleasedValueError
"""

from abc import ABC, abstractmethod
from typing import Final, Iterable

from bignum.core.config import FIXED_CAPACITY_DEFAULT, StorageKind
from bignum.core.domain.errors import AllocationFailure, ReleasedValueError

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления (фиксировано)
BASE: Final[int] = 10


# =============================================================================
# КОНТРАКТ ХРАНИЛИЩА
# =============================================================================


class DigitStorage(ABC):
    """
    Контракт хранилища цифр.

    Хранилище владеет своим буфером единолично. Копирование между
    хранилищами выполняется только поэлементно (deep copy).
    """

    def __init__(self, capacity: int):
        self._capacity = capacity
        self._buffer: bytearray | None = None

    @property
    def capacity(self) -> int:
        """Зарезервированная ёмкость (в цифрах)"""
        return self._capacity

    @property
    def released(self) -> bool:
        return self._buffer is None

    def _live_buffer(self) -> bytearray:
        if self._buffer is None:
            raise ReleasedValueError("Digit storage has already been released")
        return self._buffer

    def __getitem__(self, index: int) -> int:
        buffer = self._live_buffer()
        if not 0 <= index < self._capacity:
            raise IndexError(f"digit index {index} out of capacity {self._capacity}")
        return buffer[index]

    def __setitem__(self, index: int, digit: int) -> None:
        buffer = self._live_buffer()
        if not 0 <= index < self._capacity:
            raise IndexError(f"digit index {index} out of capacity {self._capacity}")
        buffer[index] = digit

    def read(self, count: int) -> tuple[int, ...]:
        """
        Чтение первых count цифр (little-endian).

        Args:
            count: Количество цифр (0 <= count <= capacity)

        Returns:
            Кортеж цифр, индекс 0 — младшая цифра
        """
        buffer = self._live_buffer()
        if not 0 <= count <= self._capacity:
            raise IndexError(f"cannot read {count} digits from capacity {self._capacity}")
        return tuple(buffer[:count])

    def write(self, start: int, digits: Iterable[int]) -> None:
        """
        Запись последовательности цифр начиная с позиции start.

        Args:
            start: Позиция первой записываемой цифры
            digits: Цифры в порядке little-endian

        Raises:
            IndexError: Если запись выходит за пределы capacity
        """
        buffer = self._live_buffer()
        chunk = bytes(digits)
        end = start + len(chunk)
        if start < 0 or end > self._capacity:
            raise IndexError(
                f"cannot write {len(chunk)} digits at {start} into capacity {self._capacity}"
            )
        buffer[start:end] = chunk

    def release(self) -> None:
        """
        Освобождение буфера.

        Raises:
            ReleasedValueError: При повторном освобождении
        """
        if self._buffer is None:
            raise ReleasedValueError("Digit storage has already been released")
        self._buffer = None
        self._capacity = 0

    @abstractmethod
    def grow(self, new_capacity: int) -> None:
        """Увеличение capacity с сохранением содержимого (новые позиции = 0)"""

    @property
    @abstractmethod
    def kind(self) -> StorageKind:
        """Стратегия хранения"""


class DynamicDigitStorage(DigitStorage):
    """Буфер точно под запрошенную ёмкость; растёт по требованию."""

    def __init__(self, capacity: int):
        super().__init__(capacity)
        self._buffer = _zero_buffer(capacity)

    @property
    def kind(self) -> StorageKind:
        return StorageKind.DYNAMIC

    def grow(self, new_capacity: int) -> None:
        buffer = self._live_buffer()
        if new_capacity <= self._capacity:
            return
        buffer.extend(_zero_buffer(new_capacity - self._capacity))
        self._capacity = new_capacity


class FixedDigitStorage(DigitStorage):
    """
    Inline-блок фиксированного размера.

    Блок выделяется целиком при создании; capacity отражает запрошенный
    размер, но не может превысить размер блока.
    """

    def __init__(self, capacity: int, block_size: int = FIXED_CAPACITY_DEFAULT):
        if capacity > block_size:
            raise AllocationFailure(
                f"Requested {capacity} digits exceed fixed block of {block_size} digits"
            )
        super().__init__(capacity)
        self._block_size = block_size
        self._buffer = _zero_buffer(block_size)

    @property
    def kind(self) -> StorageKind:
        return StorageKind.FIXED

    @property
    def block_size(self) -> int:
        return self._block_size

    def grow(self, new_capacity: int) -> None:
        self._live_buffer()
        if new_capacity <= self._capacity:
            return
        if new_capacity > self._block_size:
            raise AllocationFailure(
                f"Cannot grow to {new_capacity} digits: fixed block holds {self._block_size}"
            )
        self._capacity = new_capacity


# =============================================================================
# ФАБРИКА
# =============================================================================


def allocate_storage(
    capacity: int,
    kind: StorageKind = StorageKind.DYNAMIC,
    fixed_capacity: int = FIXED_CAPACITY_DEFAULT,
) -> DigitStorage:
    """
    Выделение нового заполненного нулями хранилища.

    Args:
        capacity: Требуемая ёмкость в цифрах (> 0)
        kind: Стратегия хранения
        fixed_capacity: Размер inline-блока для StorageKind.FIXED

    Returns:
        Новое хранилище, принадлежащее только вызывающему

    Raises:
        ValueError: Если capacity <= 0
        AllocationFailure: Если хранилище не может быть получено
    """
    if capacity <= 0:
        raise ValueError(f"capacity must be positive, got {capacity}")

    if kind == StorageKind.FIXED:
        return FixedDigitStorage(capacity, block_size=fixed_capacity)
    return DynamicDigitStorage(capacity)


def _zero_buffer(size: int) -> bytearray:
    try:
        return bytearray(size)
    except MemoryError as e:
        raise AllocationFailure(f"Cannot allocate {size} digits") from e
