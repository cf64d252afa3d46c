"""JSON payload entry point for the error-collecting batch.

Вход и выход проверяются контрактами sqrt_batch_input / sqrt_batch_report.
"""

import logging
from concurrent.futures import Executor
from typing import Any, Dict, Optional

from sqrtkit.contracts import validate_batch_input, validate_batch_report
from sqrtkit.core.config import NaNPolicy, SqrtConfig
from sqrtkit.core.domain.outcome import summarize_outcomes
from sqrtkit.parallel.runner import square_roots_parallel_detailed

logger = logging.getLogger(__name__)


async def square_roots_from_payload(
    payload: Dict[str, Any],
    *,
    executor: Optional[Executor] = None,
    max_workers: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Batch по JSON payload: {"values": [...], "nan_policy": "reject"|"propagate"}.

    nan_policy из payload (default: reject) определяет SqrtConfig.
    Недопустимые элементы попадают в отчёт, а не в exception.

    Args:
        payload: Payload по контракту sqrt_batch_input
        executor: Executor для вычислений (None = default executor loop)
        max_workers: Передаётся в SqrtConfig

    Returns:
        BatchReport.to_payload(), проверенный контрактом sqrt_batch_report

    Raises:
        jsonschema.ValidationError: Если payload не соответствует контракту
    """
    validate_batch_input(payload)

    config = SqrtConfig(
        nan_policy=NaNPolicy(payload.get("nan_policy", NaNPolicy.REJECT.value)),
        max_workers=max_workers,
    )
    outcomes = await square_roots_parallel_detailed(
        payload["values"], executor=executor, config=config
    )

    report = summarize_outcomes(outcomes).to_payload()
    validate_batch_report(report)

    logger.debug(
        "Payload batch done: %d total, %d failed", report["total"], report["failed"]
    )
    return report
