"""
unitopia — типобезопасные величины (длина, масса, время, деньги)

Представление, конверсия и (де)сериализация JSON величин в разнородных
единицах без смешивания измерений.

Пример:
    >>> from unitopia import Mass, parse_quantity_json
    >>> Mass.convert(Mass.pounds(16), "Ounce").value
    256.0
    >>> parse_quantity_json({"dimension": "Time", "unit": "Hour", "value": 10}).unit.value
    'Hour'
"""

from unitopia.core.contracts import (
    ParseFailure,
    ParseResult,
    ParseSuccess,
    ParseWarning,
    QuantityParseError,
    validate_quantity_contract,
)
from unitopia.core.domain import (
    CRYPTO_MONEY_UNITS,
    LENGTH_DIMENSION,
    LENGTH_UNITS,
    MASS_DIMENSION,
    MASS_UNITS,
    MONEY_DIMENSION,
    MONEY_UNITS,
    QUANTITY_TYPES,
    TIME_DIMENSION,
    TIME_UNITS,
    Length,
    LengthUnit,
    Mass,
    MassUnit,
    Money,
    MoneyUnit,
    Quantity,
    Time,
    TimeUnit,
    parse_quantity_json,
    try_parse_quantity_json,
)
from unitopia.core.math import (
    LENGTH_CONVERSION_FACTORS,
    MASS_CONVERSION_FACTORS,
    TIME_CONVERSION_FACTORS,
    generate_length_conversion_factors,
    generate_mass_conversion_factors,
    generate_time_conversion_factors,
)

__version__ = "0.1.0"

__all__ = [
    # Quantities
    "Length",
    "LengthUnit",
    "LENGTH_DIMENSION",
    "LENGTH_UNITS",
    "Mass",
    "MassUnit",
    "MASS_DIMENSION",
    "MASS_UNITS",
    "Time",
    "TimeUnit",
    "TIME_DIMENSION",
    "TIME_UNITS",
    "Money",
    "MoneyUnit",
    "MONEY_DIMENSION",
    "MONEY_UNITS",
    "CRYPTO_MONEY_UNITS",
    "Quantity",
    "QUANTITY_TYPES",
    # Conversion tables
    "LENGTH_CONVERSION_FACTORS",
    "MASS_CONVERSION_FACTORS",
    "TIME_CONVERSION_FACTORS",
    "generate_length_conversion_factors",
    "generate_mass_conversion_factors",
    "generate_time_conversion_factors",
    # Parsing
    "parse_quantity_json",
    "try_parse_quantity_json",
    "validate_quantity_contract",
    "ParseResult",
    "ParseSuccess",
    "ParseFailure",
    "ParseWarning",
    "QuantityParseError",
]
