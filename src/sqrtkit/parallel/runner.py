"""
Async & Parallel Square Root

Асинхронные и параллельные обёртки над square_root:
- square_root_async: одно значение, вычисление на executor
- square_roots_parallel: fan-out batch с fail-fast семантикой
- square_roots_parallel_detailed: fan-out batch со сбором ошибок (SqrtOutcome)
- square_roots_parallel_sync: синхронный batch на ThreadPoolExecutor

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат batch в порядке входа, len(output) == len(input)
2. Fail-fast: валидация всех элементов ДО fan-out, ошибка по наименьшему индексу
3. Executor передаётся явно (None = default executor текущего event loop)
4. Общего изменяемого состояния между задачами нет, блокировки не нужны
"""

import asyncio
import logging
import math
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import List, Optional, Sequence

from sqrtkit.core.config import DEFAULT_CONFIG, SqrtConfig
from sqrtkit.core.domain.outcome import SqrtOutcome
from sqrtkit.core.math.square_root import try_square_root, validate_sqrt_input

logger = logging.getLogger(__name__)


def _validate_all(values: Sequence[float], config: SqrtConfig) -> List[float]:
    """Валидация batch в порядке входа; первый недопустимый элемент → InvalidInput."""
    return [
        validate_sqrt_input(value, config, index=i) for i, value in enumerate(values)
    ]


def _executor_name(executor: Optional[Executor]) -> str:
    return type(executor).__name__ if executor is not None else "default executor"


# =============================================================================
# ASYNC SINGLE VALUE
# =============================================================================


async def square_root_async(
    value: float,
    *,
    executor: Optional[Executor] = None,
    config: SqrtConfig = DEFAULT_CONFIG,
) -> float:
    """
    Квадратный корень одного значения через event loop.

    Валидация выполняется сразу (до планирования), а вычисление
    на executor через loop.run_in_executor.

    Args:
        value: Неотрицательное число
        executor: Executor для вычисления (None = default executor loop)
        config: Конфигурация

    Returns:
        math.sqrt(value)

    Raises:
        InvalidInput: Если value < 0 (или NaN при NaNPolicy.REJECT)
    """
    x = validate_sqrt_input(value, config)
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(executor, math.sqrt, x)


# =============================================================================
# ASYNC BATCH
# =============================================================================


async def square_roots_parallel(
    values: Sequence[float],
    *,
    executor: Optional[Executor] = None,
    config: SqrtConfig = DEFAULT_CONFIG,
) -> List[float]:
    """
    Квадратные корни списка значений, fail-fast.

    Все элементы валидируются до запуска задач; при недопустимом элементе
    ни одна задача не планируется. Валидные значения распределяются по
    независимым задачам и собираются asyncio.gather (порядок сохраняется).

    Args:
        values: Последовательность неотрицательных чисел
        executor: Executor для вычислений (None = default executor loop)
        config: Конфигурация

    Returns:
        Корни в порядке входа

    Raises:
        InvalidInput: Первый (по индексу) недопустимый элемент, с index
    """
    checked = _validate_all(values, config)
    if not checked:
        return []

    logger.debug(
        "Dispatching %d square roots on %s",
        len(checked),
        _executor_name(executor),
    )

    loop = asyncio.get_running_loop()
    tasks = [loop.run_in_executor(executor, math.sqrt, x) for x in checked]
    return list(await asyncio.gather(*tasks))


async def square_roots_parallel_detailed(
    values: Sequence[float],
    *,
    executor: Optional[Executor] = None,
    config: SqrtConfig = DEFAULT_CONFIG,
) -> List[SqrtOutcome]:
    """
    Квадратные корни списка значений со сбором ошибок по элементам.

    InvalidInput не пробрасывается: каждый элемент получает SqrtOutcome.

    Args:
        values: Последовательность чисел
        executor: Executor для вычислений
        config: Конфигурация

    Returns:
        SqrtOutcome для каждого элемента, в порядке входа
    """
    if len(values) == 0:
        return []

    loop = asyncio.get_running_loop()
    tasks = [
        loop.run_in_executor(executor, try_square_root, value, config, i)
        for i, value in enumerate(values)
    ]
    outcomes = list(await asyncio.gather(*tasks))

    failed = sum(1 for o in outcomes if not o.ok)
    if failed:
        logger.debug("Batch of %d collected %d invalid inputs", len(outcomes), failed)

    return outcomes


# =============================================================================
# SYNC BATCH
# =============================================================================


def square_roots_parallel_sync(
    values: Sequence[float],
    *,
    executor: Optional[Executor] = None,
    config: SqrtConfig = DEFAULT_CONFIG,
) -> List[float]:
    """
    Синхронный batch без event loop, fail-fast.

    Если executor не передан, создаётся ThreadPoolExecutor(config.max_workers)
    на время вызова. Executor.map сохраняет порядок входа.

    Args:
        values: Последовательность неотрицательных чисел
        executor: Executor для вычислений (владеет вызывающий код)
        config: Конфигурация

    Returns:
        Корни в порядке входа

    Raises:
        InvalidInput: Первый (по индексу) недопустимый элемент, с index
    """
    checked = _validate_all(values, config)
    if not checked:
        return []

    logger.debug(
        "Dispatching %d square roots on %s",
        len(checked),
        _executor_name(executor) if executor is not None else "call-scoped ThreadPoolExecutor",
    )

    if executor is not None:
        return list(executor.map(math.sqrt, checked))

    with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
        return list(pool.map(math.sqrt, checked))
