"""Market data providers.

GammaMarketsProvider implements MarketProviderABC against Polymarket's Gamma
API: one page of the market list, the whole list, or one market by ID.

Example:
    async with GammaMarketsProvider() as provider:
        market = await provider.fetch_market("12345")
        print(f"{market.question}: {[o.price for o in market.outcomes]}")
"""
from polymarket_data.providers.core import MarketProviderABC
from polymarket_data.providers.polymarket import GammaMarketsProvider

__all__ = ["GammaMarketsProvider", "MarketProviderABC"]
