"""Exceptions raised by market providers.

Providers raise these; the service layer turns them into FetchResult failures
so nothing escapes the public fetch functions.
"""
from collections.abc import Sequence

from polymarket_data.schemas import Market


class ProviderError(Exception):
    """Base class for every provider failure. ``str(exc)`` is the user-facing message."""


class InvalidMarketIdError(ProviderError):
    def __init__(self) -> None:
        super().__init__("Market ID must be a non-empty string.")


class MarketNotFoundError(ProviderError):
    def __init__(self, market_id: str) -> None:
        self.market_id = market_id
        super().__init__(f'Market with ID "{market_id}" not found.')


class UpstreamStatusError(ProviderError):
    """Upstream answered with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"API request failed with status {status_code}")


class InvalidResponseError(ProviderError):
    """2xx response whose body is not the expected shape."""

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        message = "Invalid response format"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class TransportError(ProviderError):
    """Connection-level failure (DNS, reset, timeout)."""


class PaginationError(ProviderError):
    """A page failed mid-sequence; ``markets`` holds what earlier pages returned."""

    def __init__(self, cause: ProviderError, markets: Sequence[Market]) -> None:
        self.cause = cause
        self.markets = list(markets)
        super().__init__(str(cause) or "Pagination failed")


class PaginationLimitError(ProviderError):
    """The page cap was hit while the upstream kept returning full pages."""

    def __init__(self, max_pages: int, markets: Sequence[Market]) -> None:
        self.max_pages = max_pages
        self.markets = list(markets)
        super().__init__(f"Pagination aborted after {max_pages} pages")
