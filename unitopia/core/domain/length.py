"""
Length — величина длины

Метрические единицы, международная морская миля и британские/американские
единицы (международный фут). Таблица конверсии — LENGTH_CONVERSION_FACTORS.
"""

from enum import Enum
from typing import ClassVar, Final, Literal, Tuple

from pydantic import Field

from unitopia.core.contracts.errors import unsupported_unit_error
from unitopia.core.domain.quantity import ConvertibleQuantity, DimensionDescriptor
from unitopia.core.math.conversion_factors import LENGTH_CONVERSION_FACTORS


# =============================================================================
# ENUMS
# =============================================================================


class LengthUnit(str, Enum):
    """Единица длины"""

    KILOMETER = "Kilometer"
    METER = "Meter"
    CENTIMETER = "Centimeter"
    MILLIMETER = "Millimeter"
    NAUTICAL_MILE = "Nautical Mile"  # международная
    MILE = "Mile"
    YARD = "Yard"
    FOOT = "Foot"
    INCH = "Inch"


LENGTH_DIMENSION: Final = "Length"

LENGTH_DESCRIPTOR: Final[DimensionDescriptor] = DimensionDescriptor(
    dimension=LENGTH_DIMENSION,
    unit_enum=LengthUnit,
    unsupported_unit_error=unsupported_unit_error(LENGTH_DIMENSION),
    conversion_factors=LENGTH_CONVERSION_FACTORS,
)

LENGTH_UNITS: Final[Tuple[str, ...]] = LENGTH_DESCRIPTOR.units


# =============================================================================
# LENGTH MODEL
# =============================================================================


class Length(ConvertibleQuantity):
    """
    Величина длины.

    Examples:
        >>> Length.convert(Length.kilometers(1), "Meter").value
        1000.0
    """

    DESCRIPTOR: ClassVar[DimensionDescriptor] = LENGTH_DESCRIPTOR
    DIMENSION: ClassVar[str] = LENGTH_DIMENSION
    UNITS: ClassVar[Tuple[str, ...]] = LENGTH_UNITS

    dimension: Literal["Length"] = Field(default=LENGTH_DIMENSION, description="Тег измерения")
    unit: LengthUnit = Field(..., description="Единица длины")

    @classmethod
    def kilometers(cls, value: float) -> "Length":
        return cls(value, LengthUnit.KILOMETER)

    @classmethod
    def meters(cls, value: float) -> "Length":
        return cls(value, LengthUnit.METER)

    @classmethod
    def centimeters(cls, value: float) -> "Length":
        return cls(value, LengthUnit.CENTIMETER)

    @classmethod
    def millimeters(cls, value: float) -> "Length":
        return cls(value, LengthUnit.MILLIMETER)

    @classmethod
    def nautical_miles(cls, value: float) -> "Length":
        return cls(value, LengthUnit.NAUTICAL_MILE)

    @classmethod
    def miles(cls, value: float) -> "Length":
        return cls(value, LengthUnit.MILE)

    @classmethod
    def yards(cls, value: float) -> "Length":
        return cls(value, LengthUnit.YARD)

    @classmethod
    def feet(cls, value: float) -> "Length":
        return cls(value, LengthUnit.FOOT)

    @classmethod
    def inches(cls, value: float) -> "Length":
        return cls(value, LengthUnit.INCH)
