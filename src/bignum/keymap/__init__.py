"""
Keymap — потоковый подстановщик байтов по фиксированной таблице.

Внешний инструмент: не разделяет кода и данных с арифметическим ядром.
"""

from .table import KEYMAP, TABLE_SIZE, remap_byte, remap_bytes, remap_stream

__all__ = [
    "KEYMAP",
    "TABLE_SIZE",
    "remap_byte",
    "remap_bytes",
    "remap_stream",
]
