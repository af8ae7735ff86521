"""Market data service: provider calls wrapped into FetchResult.

MarketService owns the rule that nothing raises past the public fetch
functions. Providers raise typed errors; the injected FetchErrorMapper turns
them into failed results (keeping partial data from bulk fetches).
"""
import asyncio
import logging

import httpx

from polymarket_data.config import GammaConfig
from polymarket_data.providers.core import (FetchErrorMapper,
                                            MarketProviderABC, ProviderError)
from polymarket_data.providers.polymarket.query import MarketQueryParams
from polymarket_data.schemas import FetchResult, Market

logger = logging.getLogger(__name__)

# Exceptions from providers we map to results; all others propagate (e.g. bugs).
_PROVIDER_EXCEPTIONS: tuple[type[Exception], ...] = (
    ProviderError,
    httpx.HTTPError,
    OSError,
    asyncio.TimeoutError,
)

MarketsResult = FetchResult[list[Market]]
MarketResult = FetchResult[Market]


class MarketService:
    """Service over a market provider; every method returns a FetchResult."""

    def __init__(
        self,
        provider: MarketProviderABC,
        error_mapper: FetchErrorMapper,
        config: GammaConfig,
    ) -> None:
        """Initialize with provider, error mapping and configuration.

        Args:
            provider: The market data provider (e.g. GammaMarketsProvider).
            error_mapper: Maps provider exceptions to failed results.
            config: Supplies the default liquidity/volume thresholds.
        """
        self._provider = provider
        self._error_mapper = error_mapper
        self._config = config

    def base_params(
        self,
        *,
        liquidity_num_min: str | None = None,
        volume_num_min: str | None = None,
    ) -> MarketQueryParams:
        """Filters for the bulk listing: open, non-archived markets above the thresholds."""
        return MarketQueryParams(
            active=True,
            closed=False,
            archived=False,
            liquidity_num_min=(
                self._config.liquidity_num_min if liquidity_num_min is None else liquidity_num_min
            ),
            volume_num_min=(
                self._config.volume_num_min if volume_num_min is None else volume_num_min
            ),
        )

    async def fetch_markets(
        self,
        *,
        liquidity_num_min: str | None = None,
        volume_num_min: str | None = None,
    ) -> MarketsResult:
        """Fetch every open market above the thresholds, across all pages.

        On failure ``data`` holds the markets fetched before the failing page.
        """
        params = self.base_params(
            liquidity_num_min=liquidity_num_min, volume_num_min=volume_num_min
        )
        try:
            markets = await self._provider.fetch_all(params)
        except _PROVIDER_EXCEPTIONS as e:
            result = self._error_mapper.to_result(e, MarketsResult)
            logger.warning(
                "fetch_markets_failed kind=%s partial=%s error=%s",
                result.error_kind.value,
                len(result.data or []),
                result.error,
            )
            return result
        return MarketsResult.ok(markets)

    async def fetch_market_page(self, params: MarketQueryParams) -> MarketsResult:
        """Fetch a single page of the market list."""
        try:
            markets = await self._provider.fetch_page(params)
        except _PROVIDER_EXCEPTIONS as e:
            kind, message = self._error_mapper.to_error(e)
            return MarketsResult.fail(message, kind, data=[])
        return MarketsResult.ok(markets)

    async def fetch_market_by_id(self, market_id: str) -> MarketResult:
        """Fetch one market; a 404 yields a NOT_FOUND failure."""
        try:
            market = await self._provider.fetch_market(market_id)
        except _PROVIDER_EXCEPTIONS as e:
            result = self._error_mapper.to_result(e, MarketResult)
            logger.info(
                "fetch_market_by_id_failed market_id=%r kind=%s error=%s",
                market_id,
                result.error_kind.value,
                result.error,
            )
            return result
        return MarketResult.ok(market)

    async def close(self) -> None:
        await self._provider.close()

    async def __aenter__(self) -> "MarketService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        await self.close()
