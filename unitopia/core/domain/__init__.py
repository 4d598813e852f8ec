"""
Domain models and value objects.

Величины Length, Mass, Time, Money и диспетчер разбора по измерению.
"""

from unitopia.core.domain.quantity import (
    ConvertibleQuantity,
    DimensionDescriptor,
    ExtraFieldRule,
    QuantityModel,
)
from unitopia.core.domain.length import (
    LENGTH_DESCRIPTOR,
    LENGTH_DIMENSION,
    LENGTH_UNITS,
    Length,
    LengthUnit,
)
from unitopia.core.domain.mass import (
    MASS_DESCRIPTOR,
    MASS_DIMENSION,
    MASS_UNITS,
    Mass,
    MassUnit,
)
from unitopia.core.domain.time import (
    TIME_DESCRIPTOR,
    TIME_DIMENSION,
    TIME_UNITS,
    Time,
    TimeUnit,
)
from unitopia.core.domain.money import (
    CRYPTO_MONEY_UNITS,
    MONEY_DESCRIPTOR,
    MONEY_DIMENSION,
    MONEY_UNITS,
    Money,
    MoneyUnit,
    Timestamp,
    coerce_timestamp,
    current_timestamp_ms,
)
from unitopia.core.domain.dispatch import (
    QUANTITY_TYPES,
    Quantity,
    parse_quantity_json,
    try_parse_quantity_json,
)

__all__ = [
    # Base
    "QuantityModel",
    "ConvertibleQuantity",
    "DimensionDescriptor",
    "ExtraFieldRule",
    # Length
    "Length",
    "LengthUnit",
    "LENGTH_DESCRIPTOR",
    "LENGTH_DIMENSION",
    "LENGTH_UNITS",
    # Mass
    "Mass",
    "MassUnit",
    "MASS_DESCRIPTOR",
    "MASS_DIMENSION",
    "MASS_UNITS",
    # Time
    "Time",
    "TimeUnit",
    "TIME_DESCRIPTOR",
    "TIME_DIMENSION",
    "TIME_UNITS",
    # Money
    "Money",
    "MoneyUnit",
    "CRYPTO_MONEY_UNITS",
    "MONEY_DESCRIPTOR",
    "MONEY_DIMENSION",
    "MONEY_UNITS",
    "Timestamp",
    "coerce_timestamp",
    "current_timestamp_ms",
    # Dispatcher
    "Quantity",
    "QUANTITY_TYPES",
    "parse_quantity_json",
    "try_parse_quantity_json",
]
