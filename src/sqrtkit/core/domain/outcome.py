"""
SqrtOutcome / BatchReport — Результаты batch-вычислений

Immutable Pydantic модели для режима сбора ошибок (error-collecting batch):
каждый элемент входа получает свой SqrtOutcome: значение или ошибку.
BatchReport агрегирует outcomes и сериализуется в payload,
соответствующий контракту sqrt_batch_report.
"""

import math
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, Field, model_validator

from sqrtkit.core.errors import InvalidInput


# =============================================================================
# SQRT OUTCOME
# =============================================================================


class SqrtOutcome(BaseModel):
    """
    Результат вычисления корня для одного элемента.

    Ровно одно из полей value/error заполнено. value может быть NaN
    (при NaNPolicy.PROPAGATE), это успешный результат.
    """

    index: Optional[int] = Field(
        None, ge=0, description="Позиция элемента во входной последовательности (None вне batch)"
    )
    input: float = Field(..., description="Исходное значение")
    value: Optional[float] = Field(None, description="Квадратный корень (если успех)")
    error: Optional[str] = Field(None, description="Сообщение об ошибке (если неуспех)")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_exclusive(self) -> "SqrtOutcome":
        """Ровно одно из value/error."""
        if (self.value is None) == (self.error is None):
            raise ValueError("exactly one of value/error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        """
        Значение корня или повторный raise исходной ошибки.

        Raises:
            InvalidInput: Если элемент был недопустим
        """
        if self.error is not None:
            raise InvalidInput(self.input, index=self.index)
        return self.value  # type: ignore[return-value]


# =============================================================================
# BATCH REPORT
# =============================================================================


class BatchReport(BaseModel):
    """Сводка batch-вычисления в режиме сбора ошибок."""

    total: int = Field(..., ge=0, description="Количество элементов")
    succeeded: int = Field(..., ge=0, description="Успешно вычислено")
    failed: int = Field(..., ge=0, description="Недопустимых элементов")
    outcomes: tuple[SqrtOutcome, ...] = Field(
        default=(), description="Outcomes в порядке входа"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_counts(self) -> "BatchReport":
        """Счётчики согласованы с outcomes."""
        if self.succeeded + self.failed != self.total:
            raise ValueError(
                f"succeeded ({self.succeeded}) + failed ({self.failed}) "
                f"!= total ({self.total})"
            )
        if len(self.outcomes) != self.total:
            raise ValueError(
                f"len(outcomes) ({len(self.outcomes)}) != total ({self.total})"
            )

        actual_failed = sum(1 for o in self.outcomes if not o.ok)
        if actual_failed != self.failed:
            raise ValueError(
                f"failed ({self.failed}) != failed outcomes ({actual_failed})"
            )

        for position, outcome in enumerate(self.outcomes):
            if outcome.index != position:
                raise ValueError(
                    f"outcomes[{position}].index is {outcome.index}, expected {position}"
                )
        return self

    @property
    def all_ok(self) -> bool:
        return self.failed == 0

    def values(self) -> List[Optional[float]]:
        """Значения в порядке входа (None для недопустимых элементов)."""
        return [o.value for o in self.outcomes]

    def errors(self) -> List[SqrtOutcome]:
        """Только неуспешные outcomes."""
        return [o for o in self.outcomes if not o.ok]

    def to_payload(self) -> Dict[str, Any]:
        """
        JSON-совместимый dict по контракту sqrt_batch_report.

        Non-finite input/value кодируются строками "inf"/"-inf"/"nan"
        (RFC 8259 не допускает Infinity/NaN), поэтому payload проходит
        json.dumps(..., allow_nan=False).

        Returns:
            Payload с полями total/succeeded/failed/outcomes
        """
        payload = self.model_dump(exclude={"outcomes"})
        # jsonschema считает массивом только list, не tuple
        payload["outcomes"] = [
            {
                "index": o.index,
                "input": encode_float(o.input),
                "value": None if o.value is None else encode_float(o.value),
                "error": o.error,
            }
            for o in self.outcomes
        ]
        return payload


def encode_float(value: float) -> Union[float, str]:
    """
    JSON-кодирование float: конечные значения как есть, иначе строка.

    Examples:
        >>> encode_float(2.0)
        2.0
        >>> encode_float(float('inf'))
        'inf'
        >>> encode_float(float('nan'))
        'nan'
    """
    if math.isfinite(value):
        return value
    if math.isnan(value):
        return "nan"
    return "inf" if value > 0 else "-inf"


def summarize_outcomes(outcomes: Sequence[SqrtOutcome]) -> BatchReport:
    """
    Построение BatchReport из списка outcomes.

    Args:
        outcomes: Outcomes в порядке входа

    Returns:
        BatchReport со счётчиками
    """
    failed = sum(1 for o in outcomes if not o.ok)
    return BatchReport(
        total=len(outcomes),
        succeeded=len(outcomes) - failed,
        failed=failed,
        outcomes=tuple(outcomes),
    )
