"""Async and parallel square-root entry points."""

from .runner import (
    square_root_async,
    square_roots_parallel,
    square_roots_parallel_detailed,
    square_roots_parallel_sync,
)
from .payload import square_roots_from_payload

__all__ = [
    "square_root_async",
    "square_roots_parallel",
    "square_roots_parallel_detailed",
    "square_roots_parallel_sync",
    "square_roots_from_payload",
]
