"""
Keymap — фиксированная таблица подстановки байтов

Каждая клавиша рядов клавиатуры заменяется соседней клавишей слева.
Табуляция, перевод строки и пробел отображаются сами в себя.
Все остальные ASCII-коды и все байты >= 128 отображаются в 0.
"""

from typing import BinaryIO, Final

# Размер таблицы (ASCII)
TABLE_SIZE: Final[int] = 128

# Значение для неотображаемых байтов
DEFAULT_ENTRY: Final[int] = 0

# Размер чанка при потоковой обработке
STREAM_CHUNK_SIZE: Final[int] = 64 * 1024

KEYBOARD_ROWS: Final[tuple[str, ...]] = (
    "`1234567890-=",
    "QWERTYUIOP[]\\",
    "ASDFGHJKL;'",
    "ZXCVBNM,./",
)

PASSTHROUGH: Final[str] = "\t\n "


def _build_keymap() -> bytes:
    table = bytearray(TABLE_SIZE)
    for row in KEYBOARD_ROWS:
        for left, key in zip(row, row[1:]):
            table[ord(key)] = ord(left)
    for ch in PASSTHROUGH:
        table[ord(ch)] = ord(ch)
    return bytes(table)


KEYMAP: Final[bytes] = _build_keymap()

# Полная 256-байтовая таблица для bytes.translate (байты >= 128 → 0)
_TRANSLATION: Final[bytes] = KEYMAP + bytes([DEFAULT_ENTRY]) * (256 - TABLE_SIZE)


def remap_byte(byte: int) -> int:
    """
    Подстановка одного байта.

    Args:
        byte: Байт в [0, 255]

    Returns:
        Запись таблицы (0 для неотображаемых и не-ASCII байтов)

    Raises:
        ValueError: Если byte вне [0, 255]

    Examples:
        >>> chr(remap_byte(ord("S")))
        'A'
        >>> remap_byte(ord("a"))
        0
    """
    if not 0 <= byte <= 255:
        raise ValueError(f"byte must be in [0, 255], got {byte}")
    if byte >= TABLE_SIZE:
        return DEFAULT_ENTRY
    return KEYMAP[byte]


def remap_bytes(data: bytes) -> bytes:
    """
    Подстановка всех байтов блока.

    Examples:
        >>> remap_bytes(b"O S, GOMR YPFSU/")
        b'I AM FINE TODAY.'
    """
    return bytes(data).translate(_TRANSLATION)


def remap_stream(
    source: BinaryIO, sink: BinaryIO, chunk_size: int = STREAM_CHUNK_SIZE
) -> int:
    """
    Потоковая подстановка до конца входного потока.

    Args:
        source: Бинарный входной поток
        sink: Бинарный выходной поток
        chunk_size: Размер читаемого блока (> 0)

    Returns:
        Количество записанных байтов
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    written = 0
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            break
        sink.write(remap_bytes(chunk))
        written += len(chunk)
    sink.flush()
    return written
