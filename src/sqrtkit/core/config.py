"""Конфигурация square-root операций.

Конфигурация передаётся явно в каждую операцию (глобального состояния нет).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class NaNPolicy(str, Enum):
    """Обработка NaN на входе.

    REJECT: NaN считается недопустимым входом (InvalidInput)
    PROPAGATE: NaN проходит насквозь, результат NaN
    """
    REJECT = "reject"
    PROPAGATE = "propagate"


@dataclass(frozen=True)
class SqrtConfig:
    """Параметры вычисления.

    nan_policy: обработка NaN (default: REJECT)
    max_workers: размер ThreadPoolExecutor, создаваемого синхронным batch,
    если executor не передан (None = значение по умолчанию concurrent.futures)
    """
    nan_policy: NaNPolicy = NaNPolicy.REJECT
    max_workers: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.nan_policy, NaNPolicy):
            # Допускаем строковые значения ("reject"/"propagate")
            object.__setattr__(self, "nan_policy", NaNPolicy(self.nan_policy))

        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")


DEFAULT_CONFIG = SqrtConfig()
