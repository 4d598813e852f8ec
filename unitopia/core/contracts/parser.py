"""
Quantity Parser — разбор и валидация величин из JSON

Общий конвейер для всех измерений, параметризуемый дескриптором измерения
(DimensionDescriptor): тег измерения, множество единиц, вид ошибки
неподдерживаемой единицы, правила дополнительных полей.

Вход — строка/bytes с JSON или уже разобранный объект (Mapping).
try_parse_quantity никогда не бросает исключений и возвращает ParseResult;
parse_quantity — тонкая обёртка, бросающая QuantityParseError.

Тег измерения проверяется последним, уже после построения кандидата:
сначала форма данных, затем идентичность.
"""

import json
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Optional, Type, TypeVar

import structlog

from unitopia.core.contracts.errors import (
    ERR_INVALID_JSON,
    ERR_UNIT_MISSING_OR_INVALID,
    ERR_VALUE_NON_NUMERIC,
    ParseFailure,
    ParseResult,
    ParseSuccess,
    ParseWarning,
    QuantityParseError,
    dimension_mismatch_error,
)
from unitopia.core.math.numerical_safeguards import is_numeric, to_float

if TYPE_CHECKING:
    from unitopia.core.domain.quantity import DimensionDescriptor, QuantityModel

logger = structlog.get_logger(__name__)

Q = TypeVar("Q", bound="QuantityModel")

WarningsCallback = Callable[[List[ParseWarning]], None]


def load_json_object(data: Any) -> Optional[Mapping[str, Any]]:
    """
    Приведение входа к JSON-объекту.

    Args:
        data: JSON-текст (str/bytes) или уже разобранный объект

    Returns:
        Mapping, либо None если текст не является валидным JSON
        или результат не является JSON-объектом
    """
    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except (ValueError, RecursionError):
            # RecursionError: слишком глубокая вложенность массивов/объектов
            return None
    if not isinstance(data, Mapping):
        return None
    return data


def _reject(descriptor: "DimensionDescriptor", failure: ParseFailure) -> ParseFailure:
    logger.debug(
        "Quantity rejected",
        dimension=descriptor.dimension,
        error=failure.error,
    )
    return failure


def try_parse_quantity(quantity_cls: Type[Q], data: Any) -> ParseResult[Q]:
    """
    Разбор величины без исключений.

    Args:
        quantity_cls: Класс величины (Length, Mass, Time, Money)
        data: JSON-текст или объект вида
            {"dimension": ..., "unit": ..., "value": ...[, доп. поля]}

    Returns:
        ParseSuccess(quantity, warnings) или ParseFailure(error, details)
    """
    descriptor = quantity_cls.DESCRIPTOR

    obj = load_json_object(data)
    if obj is None:
        return _reject(descriptor, ParseFailure(ERR_INVALID_JSON, {"data": data}))

    value = obj.get("value")
    if not is_numeric(value):
        return _reject(descriptor, ParseFailure(ERR_VALUE_NON_NUMERIC, {"value": value}))
    value = to_float(value)

    unit = obj.get("unit")
    if not isinstance(unit, str):
        return _reject(descriptor, ParseFailure(ERR_UNIT_MISSING_OR_INVALID, {"unit": unit}))

    if unit not in descriptor.units:
        return _reject(descriptor, ParseFailure(descriptor.unsupported_unit_error, {"unit": unit}))

    extra: Dict[str, Any] = {}
    warnings: List[ParseWarning] = []
    for rule in descriptor.extra_fields:
        if rule.wire_name in obj:
            raw = obj[rule.wire_name]
            try:
                extra[rule.attr_name] = rule.coerce(raw)
            except (TypeError, ValueError):
                return _reject(descriptor, ParseFailure(rule.error, {rule.wire_name: raw}))
        else:
            default = rule.default_factory()
            extra[rule.attr_name] = default
            if rule.missing_warning is not None:
                warnings.append(
                    ParseWarning(rule.missing_warning, {rule.default_detail_key: default})
                )

    quantity = quantity_cls(value, unit, **extra)

    dimension = obj.get("dimension")
    if dimension != descriptor.dimension:
        return _reject(
            descriptor,
            ParseFailure(dimension_mismatch_error(descriptor.dimension), {"dimension": dimension}),
        )

    if warnings:
        logger.info(
            "Quantity parsed with warnings",
            dimension=descriptor.dimension,
            warnings=[w.warning for w in warnings],
        )
    return ParseSuccess(quantity, tuple(warnings))


def parse_quantity(
    quantity_cls: Type[Q],
    data: Any,
    on_warnings: Optional[WarningsCallback] = None,
) -> Q:
    """
    Разбор величины с исключением при ошибке.

    Args:
        quantity_cls: Класс величины
        data: JSON-текст или объект
        on_warnings: Вызывается один раз со списком предупреждений,
            если разбор успешен и предупреждения есть

    Returns:
        Разобранная величина

    Raises:
        QuantityParseError: Сообщение совпадает с видом ошибки из try_parse_quantity
    """
    result = try_parse_quantity(quantity_cls, data)
    if isinstance(result, ParseFailure):
        raise QuantityParseError(result)
    if on_warnings is not None and result.warnings:
        on_warnings(list(result.warnings))
    return result.quantity

