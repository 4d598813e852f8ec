"""
Core math modules для unitopia

Таблицы конверсии единиц и числовые проверки.
"""

# Numerical Safeguards
from unitopia.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_finite_number,
    to_float,
    is_numeric,
    is_valid_float,
)

# Conversion Factors
from unitopia.core.math.conversion_factors import (
    DAYS_IN_YEAR,
    LENGTH_CONVERSION_FACTORS,
    MASS_CONVERSION_FACTORS,
    TIME_CONVERSION_FACTORS,
    WEEKS_IN_MONTH,
    ConversionTable,
    build_conversion_table,
    convert_value,
    generate_length_conversion_factors,
    generate_mass_conversion_factors,
    generate_time_conversion_factors,
)

__all__ = [
    # Numerical Safeguards
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "is_close",
    "is_finite_number",
    "is_numeric",
    "is_valid_float",
    "to_float",
    # Conversion Factors
    "ConversionTable",
    "DAYS_IN_YEAR",
    "WEEKS_IN_MONTH",
    "LENGTH_CONVERSION_FACTORS",
    "MASS_CONVERSION_FACTORS",
    "TIME_CONVERSION_FACTORS",
    "build_conversion_table",
    "convert_value",
    "generate_length_conversion_factors",
    "generate_mass_conversion_factors",
    "generate_time_conversion_factors",
]
