"""Polymarket Gamma provider: market list pages, full pagination, single market."""
import logging
from urllib.parse import quote

import httpx

from polymarket_data.config import GammaConfig, get_config
from polymarket_data.providers.core import (InvalidMarketIdError,
                                            InvalidResponseError,
                                            MarketNotFoundError,
                                            MarketProviderABC, PaginationError,
                                            PaginationLimitError,
                                            ProviderError, TransportError,
                                            UpstreamStatusError)
from polymarket_data.providers.polymarket.dto import (PageInvalid,
                                                      RawMarketInvalid,
                                                      validate_market,
                                                      validate_page)
from polymarket_data.providers.polymarket.mapper import market_from_dto
from polymarket_data.providers.polymarket.query import (MarketQueryParams,
                                                        build_markets_path)
from polymarket_data.schemas import Market

logger = logging.getLogger(__name__)


class GammaMarketsProvider(MarketProviderABC):
    """Market-metadata provider backed by Polymarket's Gamma API.

    Every method issues plain GETs with no retry. Failures are raised as
    ProviderError subclasses; the service layer turns them into FetchResult.
    """

    def __init__(
        self,
        config: GammaConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the Gamma provider.

        Args:
            config: Settings (base URL, page size, page cap, timeout).
            client: Pre-built client (must carry the Gamma base_url). When given,
                the caller owns it and close() leaves it open.
        """
        self._config = config or get_config()
        self._owns_client = client is None
        self._gamma_client = client if client is not None else httpx.AsyncClient(
            base_url=self._config.gamma_api_url,
            timeout=self._config.timeout_seconds,
        )

    @property
    def config(self) -> GammaConfig:
        return self._config

    async def _get(self, path: str) -> httpx.Response:
        try:
            return await self._gamma_client.get(path)
        except httpx.HTTPError as exc:
            logger.warning("gamma_request_failed path=%s error=%r", path, exc)
            raise TransportError(str(exc) or type(exc).__name__) from exc

    async def fetch_page(self, params: MarketQueryParams) -> list[Market]:
        """Fetch one page of ``/markets`` and normalize every record.

        The whole page is rejected if any element fails validation.
        """
        path = build_markets_path(params)
        response = await self._get(path)
        if not response.is_success:
            raise UpstreamStatusError(response.status_code)

        try:
            body = response.json()
        except ValueError as exc:
            logger.warning("gamma_page_invalid path=%s reason=non_json_body", path)
            raise InvalidResponseError() from exc

        page = validate_page(body, strict_encoded_fields=self._config.strict_encoded_fields)
        if isinstance(page, PageInvalid):
            logger.warning("gamma_page_invalid path=%s reason=%s", path, page.message)
            raise InvalidResponseError()

        return [market_from_dto(record, self._config.market_url_base) for record in page.records]

    async def fetch_all(self, base_params: MarketQueryParams) -> list[Market]:
        """Walk ``/markets`` page by page until a short page comes back.

        Pages are requested sequentially: each offset is the running count of
        records actually returned, so requests cannot be issued in parallel.
        """
        page_size = self._config.page_size
        max_pages = self._config.max_pages
        markets: list[Market] = []
        offset = 0
        page_count = 0

        while True:
            if max_pages is not None and page_count >= max_pages:
                logger.warning(
                    "gamma_pagination_max_pages_reached max_pages=%s fetched=%s offset=%s",
                    max_pages,
                    len(markets),
                    offset,
                )
                raise PaginationLimitError(max_pages, markets)

            try:
                page = await self.fetch_page(base_params.page(limit=page_size, offset=offset))
            except ProviderError as exc:
                logger.warning(
                    "gamma_pagination_failed page=%s offset=%s fetched=%s error=%s",
                    page_count,
                    offset,
                    len(markets),
                    exc,
                )
                raise PaginationError(exc, markets) from exc
            page_count += 1

            markets.extend(page)
            offset += len(page)

            if len(page) < page_size:
                break

        logger.info(
            "gamma_pagination_summary pages=%s markets=%s page_size=%s",
            page_count,
            len(markets),
            page_size,
        )
        return markets

    async def fetch_market(self, market_id: str) -> Market:
        """Fetch ``/markets/{id}``.

        Args:
            market_id: Gamma market ID; surrounding whitespace is ignored.

        Returns:
            The normalized market.
        """
        if not isinstance(market_id, str) or not market_id.strip():
            raise InvalidMarketIdError()
        market_id = market_id.strip()

        response = await self._get(f"/markets/{quote(market_id, safe='')}")
        if response.status_code == 404:
            logger.info("gamma_market_not_found market_id=%s", market_id)
            raise MarketNotFoundError(market_id)
        if not response.is_success:
            raise UpstreamStatusError(response.status_code)

        try:
            body = response.json()
        except ValueError as exc:
            raise InvalidResponseError("body is not valid JSON") from exc
        outcome = validate_market(
            body,
            strict_encoded_fields=self._config.strict_encoded_fields,
        )
        if isinstance(outcome, RawMarketInvalid):
            logger.warning(
                "gamma_market_invalid market_id=%s reason=%s", market_id, outcome.message
            )
            raise InvalidResponseError(outcome.message)
        return market_from_dto(outcome.record, self._config.market_url_base)

    async def close(self) -> None:
        """Close the Gamma HTTP client if this provider created it."""
        if self._owns_client:
            await self._gamma_client.aclose()
