"""
JSON Schema Contract Validators

Контракты batch-операций для JSON-клиентов (jsonschema, Draft 2020-12):
- sqrt_batch_input — {"values": [...], "nan_policy": "reject"|"propagate"},
  вход square_roots_from_payload
- sqrt_batch_report — BatchReport.to_payload(), выход square_roots_from_payload

Схемы — package data (contracts/schema/), читаются через importlib.resources.
Контракт проверяет только форму payload; знак значений проверяет
square-root операция.
"""

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

BATCH_INPUT_SCHEMA = "sqrt_batch_input"
BATCH_REPORT_SCHEMA = "sqrt_batch_report"


# =============================================================================
# SCHEMAS
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация схемы (кэшируется).

    Args:
        schema_name: Имя схемы без расширения

    Raises:
        FileNotFoundError: Если схема не входит в пакет
        ValueError: Если схема невалидна
    """
    resource = resources.files(__package__).joinpath("schema").joinpath(f"{schema_name}.json")
    if not resource.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_name}.json")

    schema = json.loads(resource.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

    return schema


@lru_cache(maxsize=None)
def contract_validator(schema_name: str) -> Draft202012Validator:
    """Validator для схемы (один экземпляр на схему)."""
    return Draft202012Validator(load_schema(schema_name))


# =============================================================================
# BATCH CONTRACTS
# =============================================================================


def validate_batch_input(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если payload не соответствует sqrt_batch_input
    """
    contract_validator(BATCH_INPUT_SCHEMA).validate(data)


def is_valid_batch_input(data: Dict[str, Any]) -> bool:
    return contract_validator(BATCH_INPUT_SCHEMA).is_valid(data)


def iter_batch_input_errors(data: Dict[str, Any]) -> Iterator[ValidationError]:
    """Все нарушения sqrt_batch_input, по одному на поле/элемент."""
    return contract_validator(BATCH_INPUT_SCHEMA).iter_errors(data)


def validate_batch_report(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если payload не соответствует sqrt_batch_report
    """
    contract_validator(BATCH_REPORT_SCHEMA).validate(data)
