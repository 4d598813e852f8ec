"""
Quantity — базовая модель физической/финансовой величины

Величина = {dimension, value, unit}. Каждое измерение (Length, Mass, Time,
Money) — подкласс QuantityModel, описанный декларативным дескриптором
DimensionDescriptor: тег измерения, enum единиц, вид ошибки неподдерживаемой
единицы, таблица конверсии и правила дополнительных полей.

Immutable Pydantic модели (frozen=True). Прямой конструктор доверяет
вызывающему коду: проверка входных данных — задача парсера.
Равенство — по типу и всем полям, без неявной нормализации единиц.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, List, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel, Field

from unitopia.core.contracts.errors import ParseResult
from unitopia.core.contracts.parser import WarningsCallback, parse_quantity, try_parse_quantity
from unitopia.core.math.conversion_factors import ConversionTable, convert_value

Q = TypeVar("Q", bound="QuantityModel")
C = TypeVar("C", bound="ConvertibleQuantity")


# =============================================================================
# DESCRIPTORS
# =============================================================================


@dataclass(frozen=True)
class ExtraFieldRule:
    """
    Правило дополнительного поля wire-формата (например, Money.updatedAt).

    Если поле присутствует — значение приводится coerce; если coerce бросает
    TypeError или ValueError, разбор завершается ошибкой error. Если поле
    отсутствует — подставляется default_factory() и, если задан
    missing_warning, выдаётся предупреждение с подставленным значением
    под ключом default_detail_key.
    """

    wire_name: str
    attr_name: str
    coerce: Callable[[Any], Any]
    error: str
    default_factory: Callable[[], Any]
    missing_warning: Optional[str] = None
    default_detail_key: str = "default"


@dataclass(frozen=True)
class DimensionDescriptor:
    """Декларативное описание измерения."""

    dimension: str
    unit_enum: Type[Enum]
    unsupported_unit_error: str
    conversion_factors: Optional[ConversionTable] = None
    extra_fields: Tuple[ExtraFieldRule, ...] = ()

    @property
    def units(self) -> Tuple[str, ...]:
        """Замкнутое упорядоченное множество единиц (строковые значения enum)."""
        return tuple(unit.value for unit in self.unit_enum)


# =============================================================================
# BASE MODELS
# =============================================================================


class QuantityModel(BaseModel):
    """
    Базовая модель величины.

    Подклассы объявляют поля dimension (Literal-константа) и unit (enum),
    а также DESCRIPTOR, DIMENSION, UNITS.
    """

    DESCRIPTOR: ClassVar[DimensionDescriptor]
    DIMENSION: ClassVar[str]
    UNITS: ClassVar[Tuple[str, ...]]

    value: float = Field(..., description="Числовое значение (NaN/Inf не отклоняются)")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, value: float, unit: Any, **data: Any) -> None:
        super().__init__(value=value, unit=unit, **data)

    def __str__(self) -> str:
        return f"{self.value} {self.unit.value}"

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls: Type[Q], data: Any, on_warnings: Optional[WarningsCallback] = None) -> Q:
        """
        Разбор величины из JSON-объекта или JSON-текста.

        Args:
            data: dict или str/bytes с JSON-объектом
            on_warnings: Необязательный callback для некритичных предупреждений
                (вызывается один раз со всем списком)

        Returns:
            Величина данного измерения

        Raises:
            QuantityParseError: Если разбор не удался
        """
        return parse_quantity(cls, data, on_warnings)

    @classmethod
    def try_parse(cls: Type[Q], data: Any) -> ParseResult[Q]:
        """
        Разбор величины без исключений.

        Returns:
            ParseSuccess(quantity, warnings) или ParseFailure(error, details)
        """
        return try_parse_quantity(cls, data)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Wire-формат: {"dimension": ..., "value": ..., "unit": ...[, "updatedAt": ...]}."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


class ConvertibleQuantity(QuantityModel):
    """
    Величина с таблицей конверсии (Length, Mass, Time).

    Конверсия — O(1) поиск множителя в предвычисленной таблице.
    """

    @classmethod
    def convert(cls: Type[C], quantity: C, to_unit: Any) -> C:
        """
        Пересчёт величины в указанную единицу.

        convert(x, x.unit) == x точно (диагональ таблицы = 1.0),
        нулевое значение остаётся нулём в любой единице.

        Args:
            quantity: Исходная величина этого же измерения
            to_unit: Целевая единица (enum или строка)

        Returns:
            Новая величина в целевой единице
        """
        target = cls.DESCRIPTOR.unit_enum(to_unit)
        value = convert_value(
            quantity.value,
            quantity.unit.value,
            target.value,
            cls.DESCRIPTOR.conversion_factors,
        )
        return cls(value, target)

    @classmethod
    def normalize(cls: Type[C], quantities: Sequence[C], to_unit: Any) -> List[C]:
        """
        Приведение последовательности величин к одной единице.

        Порядок и количество сохраняются, агрегации и дедупликации нет.
        """
        return [cls.convert(quantity, to_unit) for quantity in quantities]
