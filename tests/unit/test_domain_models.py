"""
Тесты для доменных моделей и конфигурации

Проверяет:
- SqrtOutcome: инвариант value/error, immutability, unwrap
- BatchReport: счётчики, values/errors, payload
- SqrtConfig: валидация, значения по умолчанию
- InvalidInput: атрибуты, сообщения, pickle
"""

import math
import pickle

import pytest
from pydantic import ValidationError

from sqrtkit.core.config import DEFAULT_CONFIG, NaNPolicy, SqrtConfig
from sqrtkit.core.domain import BatchReport, SqrtOutcome, summarize_outcomes
from sqrtkit.core.errors import InvalidInput
from sqrtkit.core.math.square_root import try_square_root


# =============================================================================
# SQRT OUTCOME
# =============================================================================


class TestSqrtOutcome:
    """Тесты SqrtOutcome"""

    def test_success(self):
        """Успешный outcome"""
        outcome = SqrtOutcome(index=0, input=9.0, value=3.0)
        assert outcome.ok
        assert outcome.unwrap() == 3.0

    def test_failure(self):
        """Неуспешный outcome"""
        outcome = SqrtOutcome(index=4, input=-1.0, error="bad")
        assert not outcome.ok
        with pytest.raises(InvalidInput) as exc_info:
            outcome.unwrap()
        assert exc_info.value.index == 4

    def test_both_set_rejected(self):
        """value и error одновременно запрещены"""
        with pytest.raises(ValidationError, match="exactly one of value/error"):
            SqrtOutcome(index=0, input=4.0, value=2.0, error="bad")

    def test_neither_set_rejected(self):
        """Пустой outcome запрещён"""
        with pytest.raises(ValidationError, match="exactly one of value/error"):
            SqrtOutcome(index=0, input=4.0)

    def test_negative_index_rejected(self):
        """index >= 0"""
        with pytest.raises(ValidationError):
            SqrtOutcome(index=-1, input=4.0, value=2.0)

    def test_immutable(self):
        """frozen модель"""
        outcome = SqrtOutcome(index=0, input=4.0, value=2.0)
        with pytest.raises(ValidationError):
            outcome.value = 3.0

    def test_index_optional(self):
        """index None вне batch"""
        outcome = SqrtOutcome(input=4.0, value=2.0)
        assert outcome.index is None

    def test_nan_value_allowed(self):
        """NaN — допустимое значение (NaNPolicy.PROPAGATE)"""
        outcome = SqrtOutcome(index=0, input=math.nan, value=math.nan)
        assert outcome.ok


# =============================================================================
# BATCH REPORT
# =============================================================================


class TestBatchReport:
    """Тесты BatchReport и summarize_outcomes"""

    @pytest.fixture
    def mixed_outcomes(self):
        return [try_square_root(x, index=i) for i, x in enumerate([4.0, -1.0, 25.0])]

    def test_counts(self, mixed_outcomes):
        """Счётчики по outcomes"""
        report = summarize_outcomes(mixed_outcomes)
        assert report.total == 3
        assert report.succeeded == 2
        assert report.failed == 1
        assert not report.all_ok

    def test_values_and_errors(self, mixed_outcomes):
        """values() в порядке входа, errors() только неуспешные"""
        report = summarize_outcomes(mixed_outcomes)
        assert report.values() == [2.0, None, 5.0]
        assert [o.index for o in report.errors()] == [1]

    def test_empty(self):
        """Пустой отчёт"""
        report = summarize_outcomes([])
        assert report.total == 0
        assert report.all_ok
        assert report.values() == []

    def test_inconsistent_counts_rejected(self):
        """succeeded + failed != total"""
        with pytest.raises(ValidationError, match="!= total"):
            BatchReport(total=2, succeeded=1, failed=0)

    def test_outcomes_length_checked(self):
        """len(outcomes) == total"""
        outcome = SqrtOutcome(index=0, input=4.0, value=2.0)
        with pytest.raises(ValidationError, match="len\\(outcomes\\)"):
            BatchReport(total=2, succeeded=2, failed=0, outcomes=(outcome,))

    def test_failed_count_must_match_outcomes(self):
        """Неуспешный outcome, посчитанный как успех, отклоняется"""
        failure = try_square_root(-1.0, index=0)
        with pytest.raises(ValidationError, match="failed outcomes"):
            BatchReport(total=1, succeeded=1, failed=0, outcomes=(failure,))

    def test_succeeded_count_must_match_outcomes(self):
        """Успешный outcome, посчитанный как неуспех, отклоняется"""
        success = try_square_root(4.0, index=0)
        with pytest.raises(ValidationError, match="failed outcomes"):
            BatchReport(total=1, succeeded=0, failed=1, outcomes=(success,))

    def test_indices_must_follow_positions(self):
        """outcomes[i].index == i"""
        swapped = (try_square_root(4.0, index=1), try_square_root(9.0, index=0))
        with pytest.raises(ValidationError, match=r"outcomes\[0\]\.index is 1"):
            BatchReport(total=2, succeeded=2, failed=0, outcomes=swapped)

    def test_outcome_without_index_rejected(self):
        """Одиночный outcome (index None) не входит в отчёт"""
        with pytest.raises(ValidationError, match="index is None"):
            BatchReport(
                total=1, succeeded=1, failed=0, outcomes=(try_square_root(4.0),)
            )

    def test_all_ok_consistent_with_errors(self, mixed_outcomes):
        """all_ok и errors() согласованы"""
        report = summarize_outcomes(mixed_outcomes)
        assert report.all_ok == (report.errors() == [])

    def test_payload_is_plain(self, mixed_outcomes):
        """to_payload() — dict со списком dict"""
        payload = summarize_outcomes(mixed_outcomes).to_payload()
        assert payload["total"] == 3
        assert isinstance(payload["outcomes"], list)
        assert payload["outcomes"][1]["value"] is None
        assert payload["outcomes"][0] == {
            "index": 0,
            "input": 4.0,
            "value": 2.0,
            "error": None,
        }


# =============================================================================
# CONFIG
# =============================================================================


class TestSqrtConfig:
    """Тесты SqrtConfig"""

    def test_defaults(self):
        """NaN отклоняется по умолчанию"""
        assert DEFAULT_CONFIG.nan_policy is NaNPolicy.REJECT
        assert DEFAULT_CONFIG.max_workers is None

    def test_string_policy_coerced(self):
        """Строковая политика приводится к NaNPolicy"""
        config = SqrtConfig(nan_policy="propagate")
        assert config.nan_policy is NaNPolicy.PROPAGATE

    def test_unknown_policy_rejected(self):
        """Неизвестная политика → ValueError"""
        with pytest.raises(ValueError):
            SqrtConfig(nan_policy="ignore")

    @pytest.mark.parametrize("workers", [0, -1])
    def test_invalid_max_workers(self, workers):
        """max_workers >= 1"""
        with pytest.raises(ValueError, match="max_workers must be >= 1"):
            SqrtConfig(max_workers=workers)

    def test_frozen(self):
        """Immutable dataclass"""
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.max_workers = 4


# =============================================================================
# ERRORS
# =============================================================================


class TestInvalidInput:
    """Тесты InvalidInput"""

    def test_attributes(self):
        """value и index сохраняются"""
        error = InvalidInput(-2.5, index=7)
        assert error.value == -2.5
        assert error.index == 7
        assert str(error) == (
            "Cannot calculate the square root of a negative number: -2.5 (index 7)"
        )

    def test_nan_message(self):
        """Отдельное сообщение для NaN"""
        assert str(InvalidInput(math.nan)) == "Cannot calculate the square root of NaN"

    def test_pickle_roundtrip(self):
        """Исключение переживает pickle (ProcessPoolExecutor)"""
        restored = pickle.loads(pickle.dumps(InvalidInput(-3.0, index=2)))
        assert isinstance(restored, InvalidInput)
        assert restored.value == -3.0
        assert restored.index == 2
        assert str(restored) == str(InvalidInput(-3.0, index=2))
