"""
Errors — ошибки типов на входе в библиотеку

Единственный вид ошибки данных: InvalidTypeError. Выбрасывается синхронно
в точке входа (конструктор CoercedInteger, encode_seed), до создания
какого-либо экземпляра.
"""

from typing import Any


class InvalidTypeError(TypeError):
    """
    Значение не прошло runtime-проверку типа.

    Attributes:
        expected: Ожидаемый вид значения (например, 'int')
        received: Фактический тип полученного значения
        value: Само значение (для отладки)
    """

    def __init__(self, expected: str, value: Any):
        self.expected = expected
        self.received = type(value).__name__
        self.value = value
        super().__init__(
            f"Expected {expected}, but received {self.received}. Value: {value}"
        )


def ensure_int(value: Any) -> int:
    """
    Проверка, что value является целым произвольной точности.

    bool отклоняется: в Python это подкласс int, но не число.

    Raises:
        InvalidTypeError: Для float, str, None, bool и прочих типов
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidTypeError("int", value)
    return value


def ensure_text(value: Any) -> str:
    """
    Проверка, что value является строкой.

    Raises:
        InvalidTypeError: Для bytes, None, чисел и прочих типов
    """
    if not isinstance(value, str):
        raise InvalidTypeError("str", value)
    return value
