"""Abstract base class for market data providers."""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from polymarket_data.schemas import Market

if TYPE_CHECKING:
    from polymarket_data.providers.polymarket.query import MarketQueryParams


class MarketProviderABC(ABC):
    """Base interface for market-metadata providers.

    Implementations raise ProviderError subclasses; they never build
    FetchResult objects themselves (the service layer does that).
    """

    @abstractmethod
    async def fetch_page(self, params: "MarketQueryParams") -> list[Market]:
        """Fetch and normalize one page of the market list.

        Args:
            params: Full parameter set, including limit and offset.

        Returns:
            Normalized markets in API order (possibly empty).
        """

    @abstractmethod
    async def fetch_all(self, base_params: "MarketQueryParams") -> list[Market]:
        """Fetch every page for ``base_params`` (limit/offset are managed here).

        Raises:
            PaginationError: A page failed; carries the markets fetched so far.
            PaginationLimitError: The page cap was reached on a full page.
        """

    @abstractmethod
    async def fetch_market(self, market_id: str) -> Market:
        """Fetch one market by its Gamma ID.

        Raises:
            InvalidMarketIdError: ``market_id`` is empty or not a string.
            MarketNotFoundError: Upstream answered 404.
        """

    async def close(self) -> None:
        """Clean up resources (connections, clients).

        Override in subclasses if cleanup is needed.
        """

    async def __aenter__(self) -> "MarketProviderABC":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        """Async context manager exit - calls close()."""
        await self.close()
