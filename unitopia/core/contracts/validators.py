"""
Wire-format contracts (JSON Schema, Draft 2020-12)

Для каждого измерения в schema/ лежит JSON Schema объекта
{"dimension", "unit", "value"[, "updatedAt"]}. Схемы публикуются для
внешних потребителей формата; измерение схемы определяется её
properties.dimension.const, а не именем файла.

Контракт проверяет только форму объекта. Разбор в величину
выполняется парсером (parser.py) со своей таксономией ошибок.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, List, Mapping

from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


@lru_cache(maxsize=None)
def _contract_validators() -> Dict[str, Draft202012Validator]:
    validators: Dict[str, Draft202012Validator] = {}
    for path in sorted(SCHEMA_DIR.glob("*.json")):
        schema = json.loads(path.read_text(encoding="utf-8"))
        validators[schema["properties"]["dimension"]["const"]] = Draft202012Validator(schema)
    return validators


def _validator_for(data: Any) -> Draft202012Validator:
    dimension = data.get("dimension") if isinstance(data, Mapping) else None
    validator = _contract_validators().get(dimension) if isinstance(dimension, str) else None
    if validator is None:
        raise ValidationError(f"Unknown quantity dimension: {dimension!r}")
    return validator


def contract_schema(dimension: str) -> Mapping[str, Any]:
    """
    JSON Schema контракта измерения.

    Raises:
        KeyError: Если для измерения нет контракта
    """
    return _contract_validators()[dimension].schema


def validate_quantity_contract(data: Mapping[str, Any]) -> None:
    """
    Валидация wire-формата величины любого измерения.

    Контракт выбирается по полю dimension.

    Raises:
        ValidationError: Если dimension отсутствует/неизвестен
            или данные не соответствуют схеме измерения
    """
    _validator_for(data).validate(data)


def contract_errors(data: Mapping[str, Any]) -> List[str]:
    """Все нарушения контракта (пустой список — данные валидны)."""
    try:
        validator = _validator_for(data)
    except ValidationError as e:
        return [e.message]
    return [error.message for error in validator.iter_errors(data)]
