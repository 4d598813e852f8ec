"""
Tests for wire-format JSON Schema contracts

- Валидность самих схем (meta-validation)
- Согласованность enum единиц в схемах с моделями
- Валидация правильных данных
- Детекция нарушений required полей, типов, enum и const
- Интеграция с Pydantic моделями (to_dict проходит контракт)
"""

import json

import pytest
from jsonschema import Draft202012Validator, ValidationError

from unitopia.core.contracts import (
    SCHEMA_DIR,
    contract_errors,
    contract_schema,
    validate_quantity_contract,
)
from unitopia.core.domain import QUANTITY_TYPES, Length, Mass, Money, Time


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_length():
    """Валидный Length для тестирования."""
    return {"dimension": "Length", "unit": "Foot", "value": 15}


@pytest.fixture
def valid_money():
    """Валидный Money для тестирования."""
    return {"dimension": "Money", "unit": "USD", "value": 100, "updatedAt": 1715731200000}


# =============================================================================
# TESTS - SCHEMAS
# =============================================================================


@pytest.mark.parametrize("path", sorted(SCHEMA_DIR.glob("*.json")), ids=lambda p: p.stem)
def test_shipped_schemas_are_valid(path):
    """Каждый файл в schema/ — валидная JSON Schema Draft 2020-12."""
    Draft202012Validator.check_schema(json.loads(path.read_text(encoding="utf-8")))


def test_every_dimension_has_contract():
    """Контракт есть у каждого измерения и только у них."""
    for dimension in QUANTITY_TYPES:
        assert contract_schema(dimension)["properties"]["dimension"]["const"] == dimension
    assert len(list(SCHEMA_DIR.glob("*.json"))) == len(QUANTITY_TYPES)


def test_schema_units_match_models():
    """Enum единиц в схеме совпадает с UNITS модели (включая порядок)."""
    for dimension, cls in QUANTITY_TYPES.items():
        assert tuple(contract_schema(dimension)["properties"]["unit"]["enum"]) == cls.UNITS


def test_contract_schema_unknown_dimension():
    with pytest.raises(KeyError):
        contract_schema("Volume")


# =============================================================================
# TESTS - LENGTH / MASS / TIME VALIDATION
# =============================================================================


def test_length_accepts_valid_data(valid_length):
    validate_quantity_contract(valid_length)  # Не должно выбросить исключение
    assert contract_errors(valid_length) == []


def test_length_rejects_missing_required_field(valid_length):
    """Валидация отклоняет данные без обязательных полей."""
    data = valid_length.copy()
    del data["unit"]

    with pytest.raises(ValidationError) as exc_info:
        validate_quantity_contract(data)
    assert "'unit' is a required property" in str(exc_info.value)


def test_length_rejects_unit_of_other_dimension(valid_length):
    """Единица другого измерения не проходит enum."""
    data = valid_length.copy()
    data["unit"] = "Pound"

    assert len(contract_errors(data)) == 1


@pytest.mark.parametrize("value", ["15", None, True])
def test_length_rejects_non_numeric_value(valid_length, value):
    """value должно быть числом (bool числом не считается)."""
    data = valid_length.copy()
    data["value"] = value

    with pytest.raises(ValidationError):
        validate_quantity_contract(data)


def test_contract_errors_reports_all_violations():
    """contract_errors возвращает все нарушения."""
    assert len(contract_errors({"dimension": "Length"})) == 2


def test_mass_and_time_contracts():
    validate_quantity_contract({"dimension": "Mass", "unit": "Short Ton", "value": 1.5})
    validate_quantity_contract({"dimension": "Time", "unit": "Quarter", "value": 2})

    assert contract_errors({"dimension": "Mass", "unit": "Stone", "value": 1})
    assert contract_errors({"dimension": "Time", "unit": "Fortnight", "value": 1})


# =============================================================================
# TESTS - MONEY VALIDATION
# =============================================================================


def test_money_accepts_valid_data(valid_money):
    validate_quantity_contract(valid_money)


def test_money_updated_at_is_optional(valid_money):
    """updatedAt необязателен."""
    data = valid_money.copy()
    del data["updatedAt"]

    validate_quantity_contract(data)


def test_money_accepts_numeric_string_updated_at(valid_money):
    data = valid_money.copy()
    data["updatedAt"] = "1715731200000"

    assert contract_errors(data) == []


@pytest.mark.parametrize("updated_at", ["abc", "", None, True])
def test_money_rejects_invalid_updated_at(valid_money, updated_at):
    data = valid_money.copy()
    data["updatedAt"] = updated_at

    with pytest.raises(ValidationError):
        validate_quantity_contract(data)


def test_money_rejects_unsupported_currency(valid_money):
    data = valid_money.copy()
    data["unit"] = "XYZ"

    assert contract_errors(data)


# =============================================================================
# TESTS - DISPATCH BY DIMENSION
# =============================================================================


def test_contract_selected_by_dimension(valid_length):
    data = valid_length.copy()
    data["unit"] = "Hour"

    with pytest.raises(ValidationError):
        validate_quantity_contract(data)


@pytest.mark.parametrize("data", [{"unit": "Meter", "value": 1}, {"dimension": "Volume"}, []])
def test_unknown_dimension(data):
    """Неизвестное или отсутствующее измерение — ValidationError."""
    with pytest.raises(ValidationError, match="Unknown quantity dimension"):
        validate_quantity_contract(data)
    assert len(contract_errors(data)) == 1


# =============================================================================
# TESTS - PYDANTIC MODEL INTEGRATION
# =============================================================================


@pytest.mark.parametrize(
    "quantity",
    [
        Length.nautical_miles(3),
        Mass.long_tons(2),
        Time.quarters(1),
        Money.btc(0.25, 1715731200000),
    ],
    ids=["length", "mass", "time", "money"],
)
def test_model_generates_valid_json(quantity):
    """Проверка, что to_dict модели проходит контракт своего измерения."""
    validate_quantity_contract(quantity.to_dict())
    validate_quantity_contract(json.loads(quantity.to_json()))
