"""
Square Root — Validated Single-Value Square Root

Модуль обеспечивает вычисление квадратного корня одного значения:
- Валидация входа (тип, знак, NaN-политика)
- Вычисление через платформенный примитив math.sqrt (без итеративных алгоритмов)
- Вариант с явным значением ошибки (SqrtOutcome) вместо exception

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. x < 0 (включая -inf) → InvalidInput(x)
2. NaN → InvalidInput(nan) при NaNPolicy.REJECT, NaN при NaNPolicy.PROPAGATE
3. sqrt(+inf) == +inf, sqrt(-0.0) == -0.0
4. Функции чистые: без побочных эффектов и состояния
"""

import math
from numbers import Real
from typing import Optional

from sqrtkit.core.config import DEFAULT_CONFIG, NaNPolicy, SqrtConfig
from sqrtkit.core.domain.outcome import SqrtOutcome
from sqrtkit.core.errors import InvalidInput
from sqrtkit.core.math.numerical_safeguards import is_nan, is_negative_input


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_sqrt_input(
    value: float,
    config: SqrtConfig = DEFAULT_CONFIG,
    index: Optional[int] = None,
) -> float:
    """
    Валидация входа square-root операции.

    Args:
        value: Проверяемое значение (float или int)
        config: Конфигурация (NaN-политика)
        index: Позиция в batch (для сообщения об ошибке)

    Returns:
        Значение, приведённое к float

    Raises:
        TypeError: Если value не является вещественным числом (bool тоже отклоняется)
            или не представимо как float (int вне диапазона)
        InvalidInput: Если value < 0 или NaN при NaNPolicy.REJECT
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(
            f"square root input must be a real number, got {type(value).__name__}"
        )

    try:
        x = float(value)
    except OverflowError as exc:
        raise TypeError(
            f"square root input must be a real number representable as float, "
            f"got {type(value).__name__} out of range"
        ) from exc

    if is_nan(x):
        if config.nan_policy is NaNPolicy.REJECT:
            raise InvalidInput(x, index=index)
        return x

    if is_negative_input(x):
        raise InvalidInput(x, index=index)

    return x


# =============================================================================
# SQUARE ROOT
# =============================================================================


def square_root(value: float, config: SqrtConfig = DEFAULT_CONFIG) -> float:
    """
    Квадратный корень одного значения.

    Args:
        value: Неотрицательное число
        config: Конфигурация (NaN-политика)

    Returns:
        math.sqrt(value)

    Raises:
        InvalidInput: Если value < 0 (или NaN при NaNPolicy.REJECT)
        TypeError: Если value не число

    Examples:
        >>> square_root(144.0)
        12.0
        >>> square_root(0.0)
        0.0
        >>> square_root(float('inf'))
        inf
    """
    x = validate_sqrt_input(value, config)
    return math.sqrt(x)


def try_square_root(
    value: float,
    config: SqrtConfig = DEFAULT_CONFIG,
    index: Optional[int] = None,
) -> SqrtOutcome:
    """
    Квадратный корень с явным значением ошибки вместо exception.

    InvalidInput превращается в неуспешный SqrtOutcome. TypeError
    пробрасывается: это ошибка вызывающего кода, а не данных.

    Args:
        value: Исходное значение
        config: Конфигурация
        index: Позиция элемента в batch (None для одиночного вызова)

    Returns:
        SqrtOutcome с value или error

    Examples:
        >>> try_square_root(4.0).value
        2.0
        >>> try_square_root(-1.0).ok
        False
    """
    try:
        x = validate_sqrt_input(value, config, index=index)
    except InvalidInput as exc:
        return SqrtOutcome(index=index, input=float(value), error=str(exc))

    return SqrtOutcome(index=index, input=x, value=math.sqrt(x))
