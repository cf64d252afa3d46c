"""
Contract Validation Module

Валидация JSON payloads batch-операций по JSON Schema контрактам.
"""

from .validators import (
    BATCH_INPUT_SCHEMA,
    BATCH_REPORT_SCHEMA,
    contract_validator,
    is_valid_batch_input,
    iter_batch_input_errors,
    load_schema,
    validate_batch_input,
    validate_batch_report,
)

__all__ = [
    # Schema names
    "BATCH_INPUT_SCHEMA",
    "BATCH_REPORT_SCHEMA",
    # Loading
    "load_schema",
    "contract_validator",
    # Batch contracts
    "validate_batch_input",
    "is_valid_batch_input",
    "iter_batch_input_errors",
    "validate_batch_report",
]
