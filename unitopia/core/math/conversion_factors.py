"""
Conversion Factors — таблицы коэффициентов конверсии единиц

Для каждого измерения (Length, Mass, Time) строится полная квадратная
таблица from_unit → to_unit → множитель, включая диагональ (1.0).

Таблица вычисляется один раз при импорте модуля и далее только читается:
строки и сама таблица обёрнуты в MappingProxyType, поэтому таблицы
безопасно разделяются между любым числом читателей без блокировок.

Каждая единица задаётся размером в базовой единице измерения, который
выводится из канонических констант (международный фут, фунт avoirdupois,
средний григорианский год). Ячейка таблицы = size[from] / size[to].
Ячейки не выводятся композицией цепочки конверсий, поэтому round-trip
конверсия близка к исходному значению, но не обязана совпадать побитово.

Пример:
    >>> hours = 2
    >>> hours * TIME_CONVERSION_FACTORS["Hour"]["Minute"]
    120.0
"""

from types import MappingProxyType
from typing import Dict, Final, Mapping

# Таблица: from_unit → to_unit → множитель
ConversionTable = Mapping[str, Mapping[str, float]]


# =============================================================================
# КАНОНИЧЕСКИЕ КОНСТАНТЫ: LENGTH (базовая единица: метр)
# =============================================================================

METERS_PER_KILOMETER: Final[float] = 1000.0
CENTIMETERS_PER_METER: Final[float] = 100.0
MILLIMETERS_PER_METER: Final[float] = 1000.0

# Международная морская миля
METERS_PER_NAUTICAL_MILE: Final[float] = 1852.0

# Международный фут (1959)
METERS_PER_FOOT: Final[float] = 0.3048
FEET_PER_MILE: Final[float] = 5280.0
FEET_PER_YARD: Final[float] = 3.0
INCHES_PER_FOOT: Final[float] = 12.0


# =============================================================================
# КАНОНИЧЕСКИЕ КОНСТАНТЫ: MASS (базовая единица: килограмм)
# =============================================================================

GRAMS_PER_KILOGRAM: Final[float] = 1000.0
MILLIGRAMS_PER_GRAM: Final[float] = 1000.0
KILOGRAMS_PER_TONNE: Final[float] = 1000.0

# Фунт avoirdupois (международное определение)
KILOGRAMS_PER_POUND: Final[float] = 0.45359237
OUNCES_PER_POUND: Final[float] = 16.0
POUNDS_PER_SHORT_TON: Final[float] = 2000.0
POUNDS_PER_LONG_TON: Final[float] = 2240.0


# =============================================================================
# КАНОНИЧЕСКИЕ КОНСТАНТЫ: TIME (базовая единица: секунда)
# =============================================================================

SECONDS_PER_MINUTE: Final[float] = 60.0
MINUTES_PER_HOUR: Final[float] = 60.0
HOURS_PER_DAY: Final[float] = 24.0
DAYS_PER_WEEK: Final[float] = 7.0

# Среднее число дней в году григорианского календаря
DAYS_IN_YEAR: Final[float] = 365.2425

# Среднее число недель в месяце григорианского календаря (= DAYS_IN_YEAR / 12 / 7)
WEEKS_IN_MONTH: Final[float] = 6957 / 1600

MONTHS_PER_QUARTER: Final[float] = 3.0


# =============================================================================
# ПОСТРОЕНИЕ ТАБЛИЦ
# =============================================================================


def build_conversion_table(unit_sizes: Mapping[str, float]) -> ConversionTable:
    """
    Построение полной таблицы конверсии по размерам единиц.

    Args:
        unit_sizes: Размер каждой единицы в базовой единице измерения
            (порядок ключей задаёт порядок строк и столбцов)

    Returns:
        Read-only таблица from_unit → to_unit → множитель.
        Диагональные элементы равны 1.0 точно.

    Raises:
        ValueError: Если размер единицы не положительный
    """
    for unit, size in unit_sizes.items():
        if not size > 0:
            raise ValueError(f"Unit size must be positive: {unit}={size}")

    table: Dict[str, Mapping[str, float]] = {}
    for from_unit, from_size in unit_sizes.items():
        row: Dict[str, float] = {}
        for to_unit, to_size in unit_sizes.items():
            row[to_unit] = 1.0 if from_unit == to_unit else from_size / to_size
        table[from_unit] = MappingProxyType(row)
    return MappingProxyType(table)


def generate_length_conversion_factors() -> ConversionTable:
    """
    Полная таблица конверсии между любыми двумя единицами длины.

    Внешний ключ — исходная единица, внутренний — целевая.

    Examples:
        >>> table = generate_length_conversion_factors()
        >>> 1000 * table["Meter"]["Kilometer"]
        1.0
    """
    foot = METERS_PER_FOOT
    return build_conversion_table(
        {
            "Kilometer": METERS_PER_KILOMETER,
            "Meter": 1.0,
            "Centimeter": 1.0 / CENTIMETERS_PER_METER,
            "Millimeter": 1.0 / MILLIMETERS_PER_METER,
            "Nautical Mile": METERS_PER_NAUTICAL_MILE,
            "Mile": foot * FEET_PER_MILE,
            "Yard": foot * FEET_PER_YARD,
            "Foot": foot,
            "Inch": foot / INCHES_PER_FOOT,
        }
    )


def generate_mass_conversion_factors() -> ConversionTable:
    """
    Полная таблица конверсии между любыми двумя единицами массы.

    Examples:
        >>> table = generate_mass_conversion_factors()
        >>> 16 * table["Ounce"]["Pound"]
        1.0
    """
    pound = KILOGRAMS_PER_POUND
    return build_conversion_table(
        {
            "Kilogram": 1.0,
            "Gram": 1.0 / GRAMS_PER_KILOGRAM,
            "Milligram": 1.0 / GRAMS_PER_KILOGRAM / MILLIGRAMS_PER_GRAM,
            "Short Ton": pound * POUNDS_PER_SHORT_TON,
            "Long Ton": pound * POUNDS_PER_LONG_TON,
            "Tonne": KILOGRAMS_PER_TONNE,
            "Pound": pound,
            "Ounce": pound / OUNCES_PER_POUND,
        }
    )


def generate_time_conversion_factors() -> ConversionTable:
    """
    Полная таблица конверсии между любыми двумя единицами времени.

    Year/Quarter/Month выводятся из средних констант григорианского
    календаря, а не из календарной арифметики: конверсии через эти
    единицы приближённые.

    Examples:
        >>> table = generate_time_conversion_factors()
        >>> table["Week"]["Second"]
        604800.0
    """
    minute = SECONDS_PER_MINUTE
    hour = minute * MINUTES_PER_HOUR
    day = hour * HOURS_PER_DAY
    week = day * DAYS_PER_WEEK
    month = week * WEEKS_IN_MONTH
    return build_conversion_table(
        {
            "Year": day * DAYS_IN_YEAR,
            "Quarter": month * MONTHS_PER_QUARTER,
            "Month": month,
            "Week": week,
            "Day": day,
            "Hour": hour,
            "Minute": minute,
            "Second": 1.0,
        }
    )


# =============================================================================
# ТАБЛИЦЫ (вычисляются один раз при импорте)
# =============================================================================

LENGTH_CONVERSION_FACTORS: Final[ConversionTable] = generate_length_conversion_factors()
MASS_CONVERSION_FACTORS: Final[ConversionTable] = generate_mass_conversion_factors()
TIME_CONVERSION_FACTORS: Final[ConversionTable] = generate_time_conversion_factors()


def convert_value(value: float, from_unit: str, to_unit: str, table: ConversionTable) -> float:
    """
    Пересчёт числового значения по таблице факторов.

    Args:
        value: Значение в исходной единице
        from_unit: Исходная единица
        to_unit: Целевая единица
        table: Таблица конверсии измерения

    Returns:
        Значение в целевой единице

    Raises:
        KeyError: Если единица отсутствует в таблице
    """
    return value * table[from_unit][to_unit]
