"""
Errors — таксономия ошибок decimal-bignum

Все ошибки ядра наследуются от BigNumError и одновременно от
соответствующего builtin-исключения, чтобы вызывающий код мог
перехватывать любое из них.

- ParseError: некорректный текстовый ввод
- DivisionByZero: делитель равен нулю
- AllocationFailure: невозможно получить хранилище цифр
- ReleasedValueError: обращение к освобождённому значению
"""


class BigNumError(Exception):
    """Базовая ошибка decimal-bignum."""

    pass


class ParseError(BigNumError, ValueError):
    """
    Некорректный текстовый ввод.

    Возникает при нецифровом символе после знака или при отсутствии цифр.
    Никогда не приводится молча к какому-либо значению.

    Attributes:
        text: Исходная строка
        position: Индекс первого некорректного символа
    """

    def __init__(self, text: str, position: int, reason: str):
        self.text = text
        self.position = position
        self.reason = reason
        super().__init__(f"Cannot parse {text!r} at position {position}: {reason}")


class DivisionByZero(BigNumError, ZeroDivisionError):
    """Делитель равен нулю (восстановимая ошибка, не abort процесса)."""

    pass


class AllocationFailure(BigNumError, MemoryError):
    """
    Невозможно получить хранилище цифр.

    Возникает при превышении фиксированного inline-блока
    или при MemoryError хост-рантайма.
    """

    pass


class ReleasedValueError(BigNumError, RuntimeError):
    """Чтение или повторное освобождение уже освобождённого значения."""

    pass
