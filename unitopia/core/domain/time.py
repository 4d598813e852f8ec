"""
Time — величина времени

Week/Day/Hour/Minute/Second конвертируются точно. Year/Quarter/Month
выводятся из средних констант григорианского календаря
(365.2425 дня в году, 6957/1600 недели в месяце), поэтому конверсии
через них приближённые. Таблица конверсии — TIME_CONVERSION_FACTORS.
"""

from enum import Enum
from typing import ClassVar, Final, Literal, Tuple

from pydantic import Field

from unitopia.core.contracts.errors import unsupported_unit_error
from unitopia.core.domain.quantity import ConvertibleQuantity, DimensionDescriptor
from unitopia.core.math.conversion_factors import TIME_CONVERSION_FACTORS


# =============================================================================
# ENUMS
# =============================================================================


class TimeUnit(str, Enum):
    """Единица времени"""

    YEAR = "Year"
    QUARTER = "Quarter"
    MONTH = "Month"
    WEEK = "Week"
    DAY = "Day"
    HOUR = "Hour"
    MINUTE = "Minute"
    SECOND = "Second"


TIME_DIMENSION: Final = "Time"

TIME_DESCRIPTOR: Final[DimensionDescriptor] = DimensionDescriptor(
    dimension=TIME_DIMENSION,
    unit_enum=TimeUnit,
    unsupported_unit_error=unsupported_unit_error(TIME_DIMENSION),
    conversion_factors=TIME_CONVERSION_FACTORS,
)

TIME_UNITS: Final[Tuple[str, ...]] = TIME_DESCRIPTOR.units


# =============================================================================
# TIME MODEL
# =============================================================================


class Time(ConvertibleQuantity):
    """Величина времени."""

    DESCRIPTOR: ClassVar[DimensionDescriptor] = TIME_DESCRIPTOR
    DIMENSION: ClassVar[str] = TIME_DIMENSION
    UNITS: ClassVar[Tuple[str, ...]] = TIME_UNITS

    dimension: Literal["Time"] = Field(default=TIME_DIMENSION, description="Тег измерения")
    unit: TimeUnit = Field(..., description="Единица времени")

    @classmethod
    def years(cls, value: float) -> "Time":
        return cls(value, TimeUnit.YEAR)

    @classmethod
    def quarters(cls, value: float) -> "Time":
        return cls(value, TimeUnit.QUARTER)

    @classmethod
    def months(cls, value: float) -> "Time":
        return cls(value, TimeUnit.MONTH)

    @classmethod
    def weeks(cls, value: float) -> "Time":
        return cls(value, TimeUnit.WEEK)

    @classmethod
    def days(cls, value: float) -> "Time":
        return cls(value, TimeUnit.DAY)

    @classmethod
    def hours(cls, value: float) -> "Time":
        return cls(value, TimeUnit.HOUR)

    @classmethod
    def minutes(cls, value: float) -> "Time":
        return cls(value, TimeUnit.MINUTE)

    @classmethod
    def seconds(cls, value: float) -> "Time":
        return cls(value, TimeUnit.SECOND)
