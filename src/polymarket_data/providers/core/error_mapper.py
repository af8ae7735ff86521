"""Domain concept for mapping provider exceptions to FetchResult failures."""
import asyncio
from dataclasses import dataclass

import httpx

from polymarket_data.providers.core.exceptions import (
    InvalidMarketIdError, InvalidResponseError, MarketNotFoundError,
    PaginationError, PaginationLimitError, ProviderError, TransportError,
    UpstreamStatusError)
from polymarket_data.schemas import FetchErrorKind, FetchResult


@dataclass(frozen=True)
class FetchErrorMapper:
    """Maps provider/transport exceptions to (kind, message) and FetchResult.

    Inject this into services so every public fetch reports failures the same way.
    """

    api_name: str = "Gamma API"

    def to_error(self, exc: BaseException) -> tuple[FetchErrorKind, str]:
        """Map an exception to (kind, message).

        Args:
            exc: The exception raised by the provider or the HTTP client.

        Returns:
            The error kind and a non-empty, human-readable message.
        """
        if isinstance(exc, PaginationError):
            kind, _ = self.to_error(exc.cause)
            return (kind, str(exc) or "Pagination failed")
        if isinstance(exc, PaginationLimitError):
            return (FetchErrorKind.PAGINATION_LIMIT, str(exc))
        if isinstance(exc, InvalidMarketIdError):
            return (FetchErrorKind.INVALID_ARGUMENT, str(exc))
        if isinstance(exc, MarketNotFoundError):
            return (FetchErrorKind.NOT_FOUND, str(exc))
        if isinstance(exc, UpstreamStatusError):
            return (FetchErrorKind.HTTP_STATUS, str(exc))
        if isinstance(exc, InvalidResponseError):
            return (FetchErrorKind.VALIDATION, str(exc))
        if isinstance(exc, httpx.HTTPStatusError):
            return (
                FetchErrorKind.HTTP_STATUS,
                f"API request failed with status {exc.response.status_code}",
            )
        if isinstance(exc, (asyncio.TimeoutError, TimeoutError, httpx.TimeoutException)):
            return (FetchErrorKind.TRANSPORT, str(exc) or f"Request to {self.api_name} timed out")
        if isinstance(exc, (TransportError, httpx.HTTPError, OSError)):
            return (FetchErrorKind.TRANSPORT, str(exc) or f"{self.api_name} is unreachable")
        if isinstance(exc, ProviderError):
            return (FetchErrorKind.VALIDATION, str(exc) or f"{self.api_name} error")
        return (FetchErrorKind.TRANSPORT, str(exc) or "Unknown error occurred.")

    def to_result(
        self,
        exc: BaseException,
        result_type: type[FetchResult] = FetchResult,
    ) -> FetchResult:
        """Build a failed ``result_type``, keeping partial markets from bulk fetches."""
        kind, message = self.to_error(exc)
        partial = getattr(exc, "markets", None)
        return result_type.fail(message, kind, data=partial)
