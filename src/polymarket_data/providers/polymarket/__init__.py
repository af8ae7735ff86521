"""Polymarket Gamma market-data provider."""
from polymarket_data.providers.polymarket.provider import GammaMarketsProvider
from polymarket_data.providers.polymarket.query import (MarketQueryParams,
                                                        build_query)

__all__ = ["GammaMarketsProvider", "MarketQueryParams", "build_query"]
