"""
Money — денежная величина

Валюты ISO 4217 и набор криптовалют. Термин "money unit" вместо
"currency" выбран для единообразия с другими измерениями.

Денежная величина зависит от времени, поэтому несёт метку updatedAt
(Unix epoch, миллисекунды). Изменение value никогда не обновляет updatedAt.

Конверсии между валютами нет: курсы требуют внешнего сервиса.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar, Final, Literal, Optional, Tuple, Union

from pydantic import Field

from unitopia.core.contracts.errors import ERR_UPDATED_AT_INVALID, WARN_UPDATED_AT_MISSING
from unitopia.core.domain.quantity import DimensionDescriptor, ExtraFieldRule, QuantityModel
from unitopia.core.math.numerical_safeguards import is_finite_number


# Момент времени: Unix epoch, миллисекунды
Timestamp = Union[int, float]


def current_timestamp_ms() -> int:
    """Текущее время UTC в миллисекундах."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def coerce_timestamp(raw: Any) -> Timestamp:
    """
    Приведение wire-значения updatedAt к числу.

    Принимается конечное JSON-число или строка с конечным числом
    ("1715731200000"). null, bool, NaN/Inf и прочие значения отклоняются.

    Raises:
        ValueError: Если значение не приводится к конечному числу
    """
    if isinstance(raw, str):
        try:
            raw = int(raw)
        except ValueError:
            raw = float(raw)
    if not is_finite_number(raw):
        raise ValueError(f"updatedAt must be a finite number: {raw!r}")
    return raw


# =============================================================================
# ENUMS
# =============================================================================


class MoneyUnit(str, Enum):
    """Валюта (единица денег)"""

    AUD = "AUD"
    BRL = "BRL"
    CAD = "CAD"
    CHF = "CHF"
    CNY = "CNY"
    CZK = "CZK"
    DKK = "DKK"
    EUR = "EUR"
    GBP = "GBP"
    HKD = "HKD"
    HUF = "HUF"
    ILS = "ILS"
    JPY = "JPY"
    MXN = "MXN"
    MYR = "MYR"
    NOK = "NOK"
    NZD = "NZD"
    PHP = "PHP"
    PLN = "PLN"
    SGD = "SGD"
    SEK = "SEK"
    TWD = "TWD"
    THB = "THB"
    TRY = "TRY"
    USD = "USD"
    # Криптовалюты
    BTC = "BTC"
    BCH = "BCH"
    ETH = "ETH"
    XNO = "XNO"
    USDT = "USDT"


CRYPTO_MONEY_UNITS: Final[Tuple[str, ...]] = ("BTC", "BCH", "ETH", "XNO", "USDT")

MONEY_DIMENSION: Final = "Money"

UPDATED_AT_RULE: Final[ExtraFieldRule] = ExtraFieldRule(
    wire_name="updatedAt",
    attr_name="updated_at",
    coerce=coerce_timestamp,
    error=ERR_UPDATED_AT_INVALID,
    default_factory=current_timestamp_ms,
    missing_warning=WARN_UPDATED_AT_MISSING,
    default_detail_key="currentTimestamp",
)

MONEY_DESCRIPTOR: Final[DimensionDescriptor] = DimensionDescriptor(
    dimension=MONEY_DIMENSION,
    unit_enum=MoneyUnit,
    unsupported_unit_error="unsupported currency (money unit)",
    extra_fields=(UPDATED_AT_RULE,),
)

MONEY_UNITS: Final[Tuple[str, ...]] = MONEY_DESCRIPTOR.units


# =============================================================================
# MONEY MODEL
# =============================================================================


class Money(QuantityModel):
    """
    Денежная величина.

    Равенство учитывает updated_at: одна и та же сумма в разные моменты
    времени — разные величины.
    """

    DESCRIPTOR: ClassVar[DimensionDescriptor] = MONEY_DESCRIPTOR
    DIMENSION: ClassVar[str] = MONEY_DIMENSION
    UNITS: ClassVar[Tuple[str, ...]] = MONEY_UNITS

    dimension: Literal["Money"] = Field(default=MONEY_DIMENSION, description="Тег измерения")
    unit: MoneyUnit = Field(..., description="Валюта")
    updated_at: Timestamp = Field(
        ...,
        alias="updatedAt",
        description="Момент актуальности значения (UTC, миллисекунды)",
    )

    def __init__(
        self,
        value: float,
        unit: Any,
        updated_at: Optional[Timestamp] = None,
        **data: Any,
    ) -> None:
        if updated_at is None:
            updated_at = current_timestamp_ms()
        super().__init__(value, unit, updatedAt=updated_at, **data)

    @classmethod
    def usd(cls, value: float, updated_at: Optional[Timestamp] = None) -> "Money":
        return cls(value, MoneyUnit.USD, updated_at)

    @classmethod
    def eur(cls, value: float, updated_at: Optional[Timestamp] = None) -> "Money":
        return cls(value, MoneyUnit.EUR, updated_at)

    @classmethod
    def cad(cls, value: float, updated_at: Optional[Timestamp] = None) -> "Money":
        return cls(value, MoneyUnit.CAD, updated_at)

    @classmethod
    def gbp(cls, value: float, updated_at: Optional[Timestamp] = None) -> "Money":
        return cls(value, MoneyUnit.GBP, updated_at)

    @classmethod
    def cny(cls, value: float, updated_at: Optional[Timestamp] = None) -> "Money":
        return cls(value, MoneyUnit.CNY, updated_at)

    @classmethod
    def jpy(cls, value: float, updated_at: Optional[Timestamp] = None) -> "Money":
        return cls(value, MoneyUnit.JPY, updated_at)

    @classmethod
    def chf(cls, value: float, updated_at: Optional[Timestamp] = None) -> "Money":
        return cls(value, MoneyUnit.CHF, updated_at)

    @classmethod
    def hkd(cls, value: float, updated_at: Optional[Timestamp] = None) -> "Money":
        return cls(value, MoneyUnit.HKD, updated_at)

    @classmethod
    def mxn(cls, value: float, updated_at: Optional[Timestamp] = None) -> "Money":
        return cls(value, MoneyUnit.MXN, updated_at)

    @classmethod
    def btc(cls, value: float, updated_at: Optional[Timestamp] = None) -> "Money":
        return cls(value, MoneyUnit.BTC, updated_at)

    @classmethod
    def eth(cls, value: float, updated_at: Optional[Timestamp] = None) -> "Money":
        return cls(value, MoneyUnit.ETH, updated_at)
