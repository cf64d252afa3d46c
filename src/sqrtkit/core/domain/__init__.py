"""
Domain models and value objects.

Contains the per-element batch result (SqrtOutcome) and its summary (BatchReport).
"""

from sqrtkit.core.domain.outcome import BatchReport, SqrtOutcome, summarize_outcomes

__all__ = [
    "BatchReport",
    "SqrtOutcome",
    "summarize_outcomes",
]
