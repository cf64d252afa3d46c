"""
Исключения sqrtkit.

Все ошибки библиотеки наследуются от SqrtError (и ValueError), поэтому
вызывающий код может ловить их как обычные ошибки значения.
"""

import math
from typing import Optional


class SqrtError(ValueError):
    """Базовое исключение square-root операций."""

    pass


class InvalidInput(SqrtError):
    """
    Недопустимый вход square-root операции.

    Возникает при отрицательном входе (включая -inf) и при NaN, если
    NaN-политика REJECT.

    Attributes:
        value: Исходное недопустимое значение
        index: Позиция значения во входной последовательности (только для batch)
    """

    def __init__(self, value: float, index: Optional[int] = None):
        self.value = value
        self.index = index

        if math.isnan(value):
            message = "Cannot calculate the square root of NaN"
        else:
            message = f"Cannot calculate the square root of a negative number: {value}"

        if index is not None:
            message = f"{message} (index {index})"

        super().__init__(message)

    def __reduce__(self):
        # Pickle-совместимость (ProcessPoolExecutor передаёт исключения между процессами)
        return (self.__class__, (self.value, self.index))
