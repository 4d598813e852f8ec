"""
Parse Errors — таксономия ошибок и предупреждений парсинга величин

Ошибки парсинга — это данные: try_parse возвращает ParseFailure и никогда
не бросает исключение. Единственное место, где ошибка превращается в
исключение, — parse(), который бросает QuantityParseError с тем же текстом.

Порядок проверок (первая неудача прерывает разбор):
1. invalid JSON
2. data.value is non-numeric
3. data.unit is missing or invalid
4. unsupported <dimension> unit
5. дополнительные поля измерения (Money: data.updatedAt is non-numeric or invalid)
6. data.dimension is not <Dimension>
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Mapping, Optional, Tuple, TypeVar, Union

Q = TypeVar("Q")


# =============================================================================
# ERROR KINDS
# =============================================================================

ERR_INVALID_JSON = "invalid JSON"
ERR_VALUE_NON_NUMERIC = "data.value is non-numeric"
ERR_UNIT_MISSING_OR_INVALID = "data.unit is missing or invalid"
ERR_UPDATED_AT_INVALID = "data.updatedAt is non-numeric or invalid"

# Уровень диспетчера
ERR_MISSING_DIMENSION_FIELD = "missing dimension field"
ERR_UNRECOGNIZED_DIMENSION = "unrecognized dimension"

# Предупреждения
WARN_UPDATED_AT_MISSING = "data.updatedAt is missing; using current timestamp"


def unsupported_unit_error(dimension: str) -> str:
    """Вид ошибки для единицы вне множества измерения ('unsupported length unit')."""
    return f"unsupported {dimension.lower()} unit"


def dimension_mismatch_error(dimension: str) -> str:
    """Вид ошибки для несовпадающего тега измерения ('data.dimension is not Length')."""
    return f"data.dimension is not {dimension}"


# =============================================================================
# RESULT TYPES
# =============================================================================


@dataclass(frozen=True)
class ParseWarning:
    """Некритичная диагностика, сопровождающая успешный разбор."""

    warning: str
    details: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ParseFailure:
    """
    Неудачный разбор.

    Attributes:
        error: Машиночитаемый вид ошибки (одна из констант ERR_* выше
            или unsupported/dimension-mismatch вид конкретного измерения)
        details: Контекст ошибки — исходное значение проблемного поля
            ('value', 'unit', 'updatedAt', 'dimension' или 'data')
    """

    error: str
    details: Mapping[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class ParseSuccess(Generic[Q]):
    """
    Успешный разбор.

    Attributes:
        quantity: Разобранная величина
        warnings: Некритичные предупреждения (пусто для всех измерений, кроме Money)
    """

    quantity: Q
    warnings: Tuple[ParseWarning, ...] = ()

    @property
    def ok(self) -> bool:
        return True


ParseResult = Union[ParseSuccess[Q], ParseFailure]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class QuantityParseError(ValueError):
    """
    Ошибка parse().

    str(exc) совпадает с failure.error для парсеров измерений.
    Диспетчер добавляет к виду ошибки имя поля или значение тега.
    """

    def __init__(self, failure: ParseFailure, message: Optional[str] = None):
        super().__init__(message if message is not None else failure.error)
        self.failure = failure

    @property
    def kind(self) -> str:
        return self.failure.error
