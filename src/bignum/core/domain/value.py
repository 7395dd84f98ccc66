"""
BigNum — знако-модульное представление десятичного целого

Единственная сущность библиотеки: знак + little-endian последовательность
десятичных цифр в собственном хранилище (DigitStorage).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 1 <= length <= capacity
2. Ноль — одна цифра 0, sign=False (отрицательного нуля нет)
3. После каждой порождающей операции старшие нули срезаны (>= 1 цифра)
4. Каждая порождающая операция возвращает НОВОЕ значение; операнды не меняются
5. Два живых значения никогда не разделяют хранилище (negate = deep copy)
6. Освобождённое значение нельзя читать и нельзя освободить повторно
"""

from typing import Final, Optional

from bignum.core.config import DEFAULT_CONFIG, BigNumConfig
from bignum.core.domain.errors import ReleasedValueError
from bignum.core.domain.storage import BASE, DigitStorage, allocate_storage

# Начальная ёмкость для from_integer (растёт по мере накопления цифр)
INTEGER_CHUNK_DIGITS: Final[int] = 20


# =============================================================================
# VALUE
# =============================================================================


class BigNum:
    """
    Десятичное целое произвольной точности.

    Значение единолично владеет своим хранилищем. Низкоуровневые методы
    записи (put_digit, set_length, set_sign, trim) предназначены только для
    заполнения только что зарезервированного значения внутри библиотеки.
    """

    def __init__(self, storage: DigitStorage, config: BigNumConfig = DEFAULT_CONFIG):
        self._storage = storage
        self._config = config
        self._length = 1
        self._negative = False

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def sign(self) -> bool:
        """True означает отрицательное значение"""
        self.ensure_live()
        return self._negative

    @property
    def length(self) -> int:
        """Количество используемых цифр (>= 1)"""
        self.ensure_live()
        return self._length

    @property
    def capacity(self) -> int:
        """Размер зарезервированного хранилища (>= length)"""
        self.ensure_live()
        return self._storage.capacity

    @property
    def digits(self) -> tuple[int, ...]:
        """Используемые цифры, little-endian (индекс 0 — младшая цифра)"""
        self.ensure_live()
        return self._storage.read(self._length)

    @property
    def config(self) -> BigNumConfig:
        return self._config

    @property
    def released(self) -> bool:
        return self._storage.released

    @property
    def is_zero(self) -> bool:
        self.ensure_live()
        return self._length == 1 and self._storage[0] == 0

    def ensure_live(self) -> None:
        """
        Проверка, что значение не освобождено.

        Raises:
            ReleasedValueError: Если значение уже освобождено
        """
        if self._storage.released:
            raise ReleasedValueError("BigNum has already been released")

    def digit(self, index: int) -> int:
        """
        Цифра в позиции index (0 — младшая).

        Raises:
            IndexError: Если index вне [0, length)
        """
        self.ensure_live()
        if not 0 <= index < self._length:
            raise IndexError(f"digit index {index} out of length {self._length}")
        return self._storage[index]

    # -------------------------------------------------------------------------
    # Низкоуровневая запись (только для свежих значений)
    # -------------------------------------------------------------------------

    def put_digit(self, index: int, digit: int) -> None:
        if not 0 <= digit < BASE:
            raise ValueError(f"digit must be in [0, {BASE - 1}], got {digit}")
        self._storage[index] = digit

    def put_digits(self, start: int, digits: tuple[int, ...] | list[int]) -> None:
        self._storage.write(start, digits)

    def set_length(self, length: int) -> None:
        self.ensure_live()
        if not 1 <= length <= self._storage.capacity:
            raise ValueError(
                f"length must be in [1, {self._storage.capacity}], got {length}"
            )
        self._length = length

    def set_sign(self, negative: bool) -> None:
        self.ensure_live()
        self._negative = bool(negative) and not self.is_zero

    def reserve_more(self, capacity: int) -> None:
        """Увеличение ёмкости на месте (для построения значения)"""
        self._storage.grow(capacity)

    def trim(self) -> "BigNum":
        """
        Срез старших нулевых цифр (остаётся >= 1 цифры).

        Ноль после среза всегда неотрицателен.
        """
        self.ensure_live()
        while self._length > 1 and self._storage[self._length - 1] == 0:
            self._length -= 1
        if self.is_zero:
            self._negative = False
        return self

    # -------------------------------------------------------------------------
    # Владение
    # -------------------------------------------------------------------------

    def release(self) -> None:
        """
        Освобождение хранилища.

        Raises:
            ReleasedValueError: При повторном освобождении
        """
        self._storage.release()
        self._length = 0
        self._negative = False

    def negated(self) -> "BigNum":
        """Глубокая копия с инвертированным знаком (ноль остаётся неотрицательным)"""
        return negate(self)

    def __enter__(self) -> "BigNum":
        self.ensure_live()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.released:
            self.release()

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigNum":
        return negate(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigNum):
            return NotImplemented
        return self._canonical() == other._canonical()

    __hash__ = None  # type: ignore[assignment]

    def _canonical(self) -> tuple[bool, tuple[int, ...]]:
        digits = self.digits
        n = len(digits)
        while n > 1 and digits[n - 1] == 0:
            n -= 1
        magnitude = digits[:n]
        return (self._negative and magnitude != (0,), magnitude)

    def __int__(self) -> int:
        result = 0
        for d in reversed(self.digits):
            result = result * BASE + d
        return -result if self._negative else result

    def __str__(self) -> str:
        from bignum.core.domain.text import to_string

        return to_string(self)

    def __repr__(self) -> str:
        if self.released:
            return "BigNum(<released>)"
        return f"BigNum('{self}')"


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def reserve(capacity: int, config: Optional[BigNumConfig] = None) -> BigNum:
    """
    Резервирование значения с заполненным нулями хранилищем.

    Результат находится в нулевом состоянии: length=1, digit 0, sign=False.

    Args:
        capacity: Ёмкость в цифрах (> 0)
        config: Конфигурация (default: DEFAULT_CONFIG)

    Returns:
        Новое значение (ноль) с запрошенной ёмкостью

    Raises:
        ValueError: Если capacity <= 0
        AllocationFailure: Если хранилище не может быть получено

    Examples:
        >>> v = reserve(8)
        >>> (v.length, v.capacity, v.sign)
        (1, 8, False)
    """
    config = config or DEFAULT_CONFIG
    storage = allocate_storage(
        capacity, kind=config.storage_kind, fixed_capacity=config.fixed_capacity
    )
    return BigNum(storage, config=config)


def from_integer(number: int, config: Optional[BigNumConfig] = None) -> BigNum:
    """
    Построение значения из целого числа Python.

    Повторное деление |n| на BASE, остатки записываются начиная с младшей цифры.

    Args:
        number: Целое число (любого размера)
        config: Конфигурация (default: DEFAULT_CONFIG)

    Returns:
        Новое значение

    Raises:
        TypeError: Если number не int (bool отвергается)

    Examples:
        >>> from_integer(-7).digits
        (7,)
        >>> from_integer(120).digits
        (0, 2, 1)
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"number must be an int, got {type(number).__name__}")

    config = config or DEFAULT_CONFIG
    result = reserve(min(INTEGER_CHUNK_DIGITS, config.fixed_capacity), config)
    magnitude = -number if number < 0 else number

    count = 0
    while magnitude:
        if count == result.capacity:
            result.reserve_more(count + 1)
        magnitude, digit = divmod(magnitude, BASE)
        result.put_digit(count, digit)
        count += 1

    # number = 0 → одна цифра 0
    result.set_length(max(count, 1))
    result.set_sign(number < 0)
    return result


def from_digits(
    digits: tuple[int, ...] | list[int],
    negative: bool = False,
    config: Optional[BigNumConfig] = None,
) -> BigNum:
    """
    Построение значения из little-endian последовательности цифр.

    Args:
        digits: Цифры в [0, BASE-1], индекс 0 — младшая
        negative: Знак
        config: Конфигурация

    Returns:
        Новое нормализованное значение

    Raises:
        ValueError: Если digits пусто или содержит цифру вне [0, BASE-1]
    """
    if not digits:
        raise ValueError("digits must not be empty")
    for d in digits:
        if not 0 <= d < BASE:
            raise ValueError(f"digit must be in [0, {BASE - 1}], got {d}")

    # Ёмкость резервируется уже под нормализованную длину
    length = len(digits)
    while length > 1 and digits[length - 1] == 0:
        length -= 1

    result = reserve(length, config)
    result.put_digits(0, digits[:length])
    result.set_length(length)
    result.set_sign(negative)
    return result


def negate(value: BigNum) -> BigNum:
    """
    Инверсия знака через глубокую копию.

    Никогда не создаёт второго владельца хранилища исходного значения.
    Ноль остаётся неотрицательным.

    Examples:
        >>> str(negate(from_integer(5)))
        '-5'
    """
    result = reserve(value.capacity, value.config)
    result.put_digits(0, value.digits)
    result.set_length(value.length)
    result.set_sign(not value.sign)
    return result
