"""Polymarket market-data retrieval and normalization."""
from polymarket_data.config import GammaConfig, get_config
from polymarket_data.markets import fetch_market_by_id, fetch_markets
from polymarket_data.schemas import FetchErrorKind, FetchResult, Market, Outcome

__all__ = [
    "FetchErrorKind",
    "FetchResult",
    "GammaConfig",
    "Market",
    "Outcome",
    "fetch_market_by_id",
    "fetch_markets",
    "get_config",
]
