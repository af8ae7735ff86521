"""Data Transfer Objects for Gamma API responses.

GammaMarketDTO is the schema of one raw market record. Validation is strict on
primitive types (no string-to-bool or number-to-string coercion) and tolerant
of the three wire encodings of the array-like fields. ``validate_market`` and
``validate_page`` never raise; they return a tagged outcome.
"""
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from polymarket_data.providers.polymarket.wire import (EncodedString,
                                                       EncodedStringError,
                                                       WireField, WireList,
                                                       classify, parse_encoded)

# Array of plain values, array of records, or a JSON-encoded string.
WireValue = list[str | int | float | None] | list[dict[str, Any]] | str


class GammaMarketDTO(BaseModel):
    """DTO for one market from Gamma's ``/markets`` endpoints.

    Extra API keys are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", strict=True)

    # Core identifiers
    id: str
    slug: str
    question: str

    # Descriptive metadata
    description: str | None = None
    category: str | None = None

    # Lifecycle flags and dates (ISO-8601 strings)
    start_date: str | None = Field(default=None, alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")
    active: bool
    closed: bool | None = None
    resolved: bool | None = None
    archived: bool | None = None
    accepting_orders: bool | None = Field(default=None, alias="acceptingOrders")
    new: bool | None = None

    # Liquidity and volume
    liquidity: str | None = None
    volume: str | None = None
    volume_24hr: float | None = Field(default=None, alias="volume24hr")
    volume_1wk: float | None = Field(default=None, alias="volume1wk")
    volume_1mo: float | None = Field(default=None, alias="volume1mo")
    volume_1yr: float | None = Field(default=None, alias="volume1yr")

    # Price and order parameters
    order_min_size: float | None = Field(default=None, alias="orderMinSize")
    order_price_min_tick_size: float | None = Field(
        default=None, alias="orderPriceMinTickSize"
    )
    one_hour_price_change: float | None = Field(default=None, alias="oneHourPriceChange")
    one_day_price_change: float | None = Field(default=None, alias="oneDayPriceChange")
    one_week_price_change: float | None = Field(default=None, alias="oneWeekPriceChange")
    one_month_price_change: float | None = Field(
        default=None, alias="oneMonthPriceChange"
    )
    last_trade_price: float | None = Field(default=None, alias="lastTradePrice")
    best_bid: float | None = Field(default=None, alias="bestBid")
    best_ask: float | None = Field(default=None, alias="bestAsk")

    # Outcomes and tokens (raw; see wire.py)
    outcomes: WireValue | None = None
    outcome_prices: WireValue | None = Field(default=None, alias="outcomePrices")
    clob_token_ids: WireValue | None = Field(default=None, alias="clobTokenIds")

    @property
    def outcomes_wire(self) -> WireList | None:
        return classify(self.outcomes)

    @property
    def outcome_prices_wire(self) -> WireList | None:
        return classify(self.outcome_prices)

    @property
    def clob_token_ids_wire(self) -> WireList | None:
        return classify(self.clob_token_ids)

    def wire_fields(self) -> dict[WireField, WireList | None]:
        """The three parallel fields, tagged."""
        return {
            WireField.OUTCOMES: self.outcomes_wire,
            WireField.OUTCOME_PRICES: self.outcome_prices_wire,
            WireField.CLOB_TOKEN_IDS: self.clob_token_ids_wire,
        }


@dataclass(frozen=True)
class RawMarketValid:
    record: GammaMarketDTO
    ok: bool = True


@dataclass(frozen=True)
class RawMarketInvalid:
    message: str
    ok: bool = False


ValidationOutcome = RawMarketValid | RawMarketInvalid


def _format_errors(exc: ValidationError) -> str:
    """One clause per failing field; failed union branches collapse into the first."""
    messages: dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "<root>"
        messages.setdefault(field, error["msg"])
    return "; ".join(f"{field}: {msg}" for field, msg in messages.items())


def _encoded_field_errors(record: GammaMarketDTO) -> list[str]:
    errors = []
    for field, variant in record.wire_fields().items():
        if isinstance(variant, EncodedString):
            try:
                parse_encoded(variant.raw)
            except EncodedStringError as exc:
                errors.append(f"{field.value}: {exc}")
    return errors


def validate_market(payload: Any, *, strict_encoded_fields: bool = False) -> ValidationOutcome:
    """Check one raw payload against the market schema.

    Args:
        payload: Any decoded JSON value.
        strict_encoded_fields: Also reject encoded-string fields that are not a
            JSON array (by default those are tolerated and dropped at normalization).

    Returns:
        RawMarketValid with the typed record, or RawMarketInvalid naming what failed.
    """
    if not isinstance(payload, dict):
        return RawMarketInvalid(f"expected a JSON object, got {type(payload).__name__}")
    try:
        record = GammaMarketDTO.model_validate(payload)
    except ValidationError as exc:
        return RawMarketInvalid(_format_errors(exc))
    if strict_encoded_fields:
        errors = _encoded_field_errors(record)
        if errors:
            return RawMarketInvalid("; ".join(errors))
    return RawMarketValid(record)


@dataclass(frozen=True)
class PageValid:
    records: tuple[GammaMarketDTO, ...]
    ok: bool = True


@dataclass(frozen=True)
class PageInvalid:
    message: str
    ok: bool = False


def validate_page(payload: Any, *, strict_encoded_fields: bool = False) -> PageValid | PageInvalid:
    """Validate a list-endpoint body: a JSON array whose every element is a market."""
    if not isinstance(payload, list):
        return PageInvalid(f"expected a JSON array, got {type(payload).__name__}")
    records = []
    for index, item in enumerate(payload):
        outcome = validate_market(item, strict_encoded_fields=strict_encoded_fields)
        if isinstance(outcome, RawMarketInvalid):
            return PageInvalid(f"[{index}] {outcome.message}")
        records.append(outcome.record)
    return PageValid(tuple(records))
