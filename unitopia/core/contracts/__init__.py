"""
Contract Validation and Parsing Module

Разбор величин из JSON (таксономия ошибок и предупреждений)
и валидация wire-формата по JSON Schema контрактам.
"""

from .errors import (
    ERR_INVALID_JSON,
    ERR_MISSING_DIMENSION_FIELD,
    ERR_UNIT_MISSING_OR_INVALID,
    ERR_UNRECOGNIZED_DIMENSION,
    ERR_UPDATED_AT_INVALID,
    ERR_VALUE_NON_NUMERIC,
    WARN_UPDATED_AT_MISSING,
    ParseFailure,
    ParseResult,
    ParseSuccess,
    ParseWarning,
    QuantityParseError,
    dimension_mismatch_error,
    unsupported_unit_error,
)
from .parser import load_json_object, parse_quantity, try_parse_quantity
from .validators import (
    SCHEMA_DIR,
    contract_errors,
    contract_schema,
    validate_quantity_contract,
)

__all__ = [
    # Errors
    "ERR_INVALID_JSON",
    "ERR_VALUE_NON_NUMERIC",
    "ERR_UNIT_MISSING_OR_INVALID",
    "ERR_UPDATED_AT_INVALID",
    "ERR_MISSING_DIMENSION_FIELD",
    "ERR_UNRECOGNIZED_DIMENSION",
    "WARN_UPDATED_AT_MISSING",
    "unsupported_unit_error",
    "dimension_mismatch_error",
    "ParseWarning",
    "ParseFailure",
    "ParseSuccess",
    "ParseResult",
    "QuantityParseError",
    # Parser
    "load_json_object",
    "parse_quantity",
    "try_parse_quantity",
    # Validators
    "SCHEMA_DIR",
    "contract_schema",
    "contract_errors",
    "validate_quantity_contract",
]
