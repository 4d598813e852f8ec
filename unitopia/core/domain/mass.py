"""
Mass — величина массы

Метрические единицы и единицы avoirdupois (фунт, унция, короткая и
длинная тонны). Таблица конверсии — MASS_CONVERSION_FACTORS.
"""

from enum import Enum
from typing import ClassVar, Final, Literal, Tuple

from pydantic import Field

from unitopia.core.contracts.errors import unsupported_unit_error
from unitopia.core.domain.quantity import ConvertibleQuantity, DimensionDescriptor
from unitopia.core.math.conversion_factors import MASS_CONVERSION_FACTORS


# =============================================================================
# ENUMS
# =============================================================================


class MassUnit(str, Enum):
    """Единица массы"""

    KILOGRAM = "Kilogram"
    GRAM = "Gram"
    MILLIGRAM = "Milligram"
    SHORT_TON = "Short Ton"  # 2000 lb
    LONG_TON = "Long Ton"  # 2240 lb
    TONNE = "Tonne"
    POUND = "Pound"
    OUNCE = "Ounce"


MASS_DIMENSION: Final = "Mass"

MASS_DESCRIPTOR: Final[DimensionDescriptor] = DimensionDescriptor(
    dimension=MASS_DIMENSION,
    unit_enum=MassUnit,
    unsupported_unit_error=unsupported_unit_error(MASS_DIMENSION),
    conversion_factors=MASS_CONVERSION_FACTORS,
)

MASS_UNITS: Final[Tuple[str, ...]] = MASS_DESCRIPTOR.units


# =============================================================================
# MASS MODEL
# =============================================================================


class Mass(ConvertibleQuantity):
    """
    Величина массы.

    Examples:
        >>> round(Mass.convert(Mass.kilograms(1), "Pound").value, 10)
        2.2046226218
    """

    DESCRIPTOR: ClassVar[DimensionDescriptor] = MASS_DESCRIPTOR
    DIMENSION: ClassVar[str] = MASS_DIMENSION
    UNITS: ClassVar[Tuple[str, ...]] = MASS_UNITS

    dimension: Literal["Mass"] = Field(default=MASS_DIMENSION, description="Тег измерения")
    unit: MassUnit = Field(..., description="Единица массы")

    @classmethod
    def kilograms(cls, value: float) -> "Mass":
        return cls(value, MassUnit.KILOGRAM)

    @classmethod
    def grams(cls, value: float) -> "Mass":
        return cls(value, MassUnit.GRAM)

    @classmethod
    def milligrams(cls, value: float) -> "Mass":
        return cls(value, MassUnit.MILLIGRAM)

    @classmethod
    def short_tons(cls, value: float) -> "Mass":
        return cls(value, MassUnit.SHORT_TON)

    @classmethod
    def long_tons(cls, value: float) -> "Mass":
        return cls(value, MassUnit.LONG_TON)

    @classmethod
    def tonnes(cls, value: float) -> "Mass":
        return cls(value, MassUnit.TONNE)

    @classmethod
    def pounds(cls, value: float) -> "Mass":
        return cls(value, MassUnit.POUND)

    @classmethod
    def ounces(cls, value: float) -> "Mass":
        return cls(value, MassUnit.OUNCE)
