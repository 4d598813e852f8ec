"""
Quantity Dispatcher — разбор величины неизвестного заранее измерения

Единственный компонент, знающий обо всех измерениях: по полю dimension
выбирает парсер нужного измерения. Новое измерение регистрируется
в QUANTITY_TYPES и больше нигде.
"""

from typing import Any, Dict, Final, Optional, Type, Union

import structlog

from unitopia.core.contracts.errors import (
    ERR_INVALID_JSON,
    ERR_MISSING_DIMENSION_FIELD,
    ERR_UNRECOGNIZED_DIMENSION,
    ParseFailure,
    ParseResult,
    QuantityParseError,
)
from unitopia.core.contracts.parser import WarningsCallback, load_json_object
from unitopia.core.domain.length import Length
from unitopia.core.domain.mass import Mass
from unitopia.core.domain.money import Money
from unitopia.core.domain.quantity import QuantityModel
from unitopia.core.domain.time import Time

logger = structlog.get_logger(__name__)

# Величина любого измерения (tagged union по полю dimension)
Quantity = Union[Length, Mass, Time, Money]

QUANTITY_TYPES: Final[Dict[str, Type[QuantityModel]]] = {
    cls.DIMENSION: cls for cls in (Length, Mass, Time, Money)
}

DIMENSION_FIELD: Final = "dimension"


def _route(data: Any) -> Union[Type[QuantityModel], ParseFailure]:
    obj = load_json_object(data)
    if obj is None:
        return ParseFailure(ERR_INVALID_JSON, {"data": data})
    if DIMENSION_FIELD not in obj:
        return ParseFailure(ERR_MISSING_DIMENSION_FIELD, {"field": DIMENSION_FIELD})

    dimension = obj[DIMENSION_FIELD]
    quantity_cls = QUANTITY_TYPES.get(dimension) if isinstance(dimension, str) else None
    if quantity_cls is None:
        return ParseFailure(ERR_UNRECOGNIZED_DIMENSION, {DIMENSION_FIELD: dimension})

    logger.debug("Dispatching quantity", dimension=dimension)
    return quantity_cls


def try_parse_quantity_json(data: Any) -> ParseResult[Quantity]:
    """
    Разбор величины любого измерения без исключений.

    Args:
        data: JSON-объект или JSON-текст с полем dimension

    Returns:
        Результат try_parse выбранного измерения, либо ParseFailure
        с видом 'invalid JSON', 'missing dimension field' или
        'unrecognized dimension'
    """
    route = _route(data)
    if isinstance(route, ParseFailure):
        return route
    return route.try_parse(data)


def parse_quantity_json(data: Any, on_warnings: Optional[WarningsCallback] = None) -> Quantity:
    """
    Разбор величины любого измерения.

    Args:
        data: JSON-объект или JSON-текст с полем dimension
        on_warnings: Передаётся в parse выбранного измерения

    Returns:
        Length, Mass, Time или Money

    Raises:
        QuantityParseError: Нет поля dimension, неизвестное измерение
            или ошибка парсера измерения
    """
    route = _route(data)
    if isinstance(route, ParseFailure):
        if route.error == ERR_MISSING_DIMENSION_FIELD:
            raise QuantityParseError(route, f"{route.error}: {DIMENSION_FIELD!r}")
        if route.error == ERR_UNRECOGNIZED_DIMENSION:
            raise QuantityParseError(route, f"{route.error}: {route.details[DIMENSION_FIELD]!r}")
        raise QuantityParseError(route)
    return route.parse(data, on_warnings)
