"""
sqrtkit — синхронный, асинхронный и параллельный квадратный корень.

Все операции валидируют вход (отрицательные значения → InvalidInput)
и вычисляют корень через math.sqrt.
"""

from sqrtkit.core.config import DEFAULT_CONFIG, NaNPolicy, SqrtConfig
from sqrtkit.core.domain import BatchReport, SqrtOutcome, summarize_outcomes
from sqrtkit.core.errors import InvalidInput, SqrtError
from sqrtkit.core.math import (
    square_root,
    try_square_root,
    validate_sqrt_input,
    verify_square_root,
)
from sqrtkit.parallel import (
    square_root_async,
    square_roots_parallel,
    square_roots_parallel_detailed,
    square_roots_from_payload,
    square_roots_parallel_sync,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "DEFAULT_CONFIG",
    "NaNPolicy",
    "SqrtConfig",
    # Errors
    "InvalidInput",
    "SqrtError",
    # Results
    "BatchReport",
    "SqrtOutcome",
    "summarize_outcomes",
    # Sync
    "square_root",
    "try_square_root",
    "validate_sqrt_input",
    "verify_square_root",
    # Async / parallel
    "square_root_async",
    "square_roots_parallel",
    "square_roots_parallel_detailed",
    "square_roots_parallel_sync",
    "square_roots_from_payload",
]
