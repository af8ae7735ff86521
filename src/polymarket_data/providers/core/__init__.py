"""Core provider abstractions."""
from polymarket_data.providers.core.error_mapper import FetchErrorMapper
from polymarket_data.providers.core.exceptions import (
    InvalidMarketIdError,
    InvalidResponseError,
    MarketNotFoundError,
    PaginationError,
    PaginationLimitError,
    ProviderError,
    TransportError,
    UpstreamStatusError,
)
from polymarket_data.providers.core.market_provider_abc import MarketProviderABC

__all__ = [
    "FetchErrorMapper",
    "InvalidMarketIdError",
    "InvalidResponseError",
    "MarketNotFoundError",
    "MarketProviderABC",
    "PaginationError",
    "PaginationLimitError",
    "ProviderError",
    "TransportError",
    "UpstreamStatusError",
]
