"""Pydantic schemas handed to callers. Not persisted anywhere."""
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


class Outcome(BaseModel):
    """One possible resolution of a market, aligned with its price and CLOB token."""

    model_config = ConfigDict(frozen=True)

    name: str
    price: str
    clob_token_id: str


class Market(BaseModel):
    """Canonical market built from a validated Gamma record."""

    model_config = ConfigDict(frozen=True)

    # Identity
    id: str
    slug: str
    url: str

    # Descriptive
    question: str
    description: str = ""
    category: str | None = None

    # Lifecycle
    active: bool
    closed: bool | None = None
    accepting_orders: bool | None = None
    new: bool | None = None
    resolved: bool | None = None
    archived: bool | None = None
    start_date: str | None = None
    end_date: str | None = None

    # Liquidity and volume (numeric strings, as sent upstream)
    volume: str = "0"
    liquidity: str = "0"

    # Analytics
    volume_24hr: float | None = None
    volume_1wk: float | None = None
    volume_1mo: float | None = None
    volume_1yr: float | None = None
    one_hour_price_change: float | None = None
    one_day_price_change: float | None = None
    one_week_price_change: float | None = None
    one_month_price_change: float | None = None
    last_trade_price: float | None = None
    best_bid: float | None = None
    best_ask: float | None = None
    order_min_size: float | None = None
    order_price_min_tick_size: float | None = None

    outcomes: tuple[Outcome, ...] = Field(default_factory=tuple)


class FetchErrorKind(str, Enum):
    """Why a fetch failed. Callers can branch on this instead of the message text."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    HTTP_STATUS = "http_status"
    VALIDATION = "validation"
    TRANSPORT = "transport"
    PAGINATION_LIMIT = "pagination_limit"


class FetchResult(BaseModel, Generic[T]):
    """Success-tagged result of a fetch.

    On success ``data`` is set and ``error`` is not. On failure ``error`` is a
    non-empty message; ``data`` is None, or the markets accumulated before a
    bulk fetch failed.
    """

    success: bool
    data: T | None = None
    error: str | None = None
    error_kind: FetchErrorKind | None = None

    @model_validator(mode="after")
    def _check_shape(self) -> "FetchResult[T]":
        if self.success:
            if self.data is None:
                raise ValueError("successful FetchResult requires data")
            if self.error is not None or self.error_kind is not None:
                raise ValueError("successful FetchResult must not carry an error")
        elif not self.error:
            raise ValueError("failed FetchResult requires a non-empty error")
        return self

    @classmethod
    def ok(cls, data: T) -> "FetchResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(
        cls,
        error: str,
        kind: FetchErrorKind,
        data: T | None = None,
    ) -> "FetchResult[T]":
        return cls(success=False, error=error, error_kind=kind, data=data)


__all__ = ["FetchErrorKind", "FetchResult", "Market", "Outcome"]
