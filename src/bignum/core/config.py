"""Конфигурация decimal-bignum.

Конфигурация неизменяема (frozen) и передаётся явно в конструкторы
значений. Результаты арифметики наследуют конфигурацию первого операнда.
Глобального изменяемого состояния нет.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

# Размер фиксированного inline-блока по умолчанию (в цифрах)
FIXED_CAPACITY_DEFAULT: Final[int] = 4096


class StorageKind(str, Enum):
    """Стратегия хранения цифр.

    - DYNAMIC: буфер точно под запрошенную ёмкость, растёт по требованию
    - FIXED: inline-блок фиксированного размера, выделяется целиком
    """
    DYNAMIC = "dynamic"
    FIXED = "fixed"


class DivisionStrategy(str, Enum):
    """Алгоритм деления.

    - LONG: деление с оценкой очередной цифры частного по старшим цифрам
    - RESTORING: поразрядное восстанавливающее деление (медленное)
    """
    LONG = "long"
    RESTORING = "restoring"


@dataclass(frozen=True)
class BigNumConfig:
    """Конфигурация значений и алгоритмов.

    Attributes:
        storage_kind: стратегия хранения цифр (DYNAMIC/FIXED)
        fixed_capacity: размер inline-блока для FIXED (в цифрах)
        division_strategy: алгоритм деления по умолчанию
    """
    storage_kind: StorageKind = StorageKind.DYNAMIC
    fixed_capacity: int = FIXED_CAPACITY_DEFAULT
    division_strategy: DivisionStrategy = DivisionStrategy.LONG

    def __post_init__(self):
        if not isinstance(self.storage_kind, StorageKind):
            raise ValueError(f"storage_kind must be a StorageKind, got {self.storage_kind!r}")
        if not isinstance(self.division_strategy, DivisionStrategy):
            raise ValueError(
                f"division_strategy must be a DivisionStrategy, got {self.division_strategy!r}"
            )
        if self.fixed_capacity < 1:
            raise ValueError(f"fixed_capacity must be >= 1, got {self.fixed_capacity}")


DEFAULT_CONFIG = BigNumConfig()
