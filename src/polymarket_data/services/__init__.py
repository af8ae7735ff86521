"""Service layer: provider orchestration and exception-to-result mapping."""
from polymarket_data.services.market_factory import create_market_service
from polymarket_data.services.market_service import MarketService

__all__ = ["MarketService", "create_market_service"]
