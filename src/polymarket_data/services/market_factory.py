"""Factory for creating MarketService instances."""
import httpx

from polymarket_data.config import GammaConfig, get_config
from polymarket_data.providers import GammaMarketsProvider
from polymarket_data.providers.core import FetchErrorMapper
from polymarket_data.services.market_service import MarketService


def create_market_service(
    config: GammaConfig | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    api_name: str = "Gamma API",
) -> MarketService:
    """Create a MarketService over the Gamma provider.

    Args:
        config: Settings; the process-wide default when omitted.
        client: Optional pre-built HTTP client (left open on close).
        api_name: Label used in transport error messages.

    Returns:
        A configured MarketService. Use it as an async context manager to close
        the underlying HTTP client.
    """
    config = config or get_config()
    provider = GammaMarketsProvider(config, client=client)
    return MarketService(provider, FetchErrorMapper(api_name=api_name), config)
