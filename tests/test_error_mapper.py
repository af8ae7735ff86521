import asyncio

import httpx
import pytest

from polymarket_data.providers.core import (FetchErrorMapper,
                                            InvalidMarketIdError,
                                            InvalidResponseError,
                                            MarketNotFoundError,
                                            PaginationError,
                                            PaginationLimitError,
                                            ProviderError, TransportError,
                                            UpstreamStatusError)
from polymarket_data.schemas import FetchErrorKind, FetchResult, Market


@pytest.fixture
def mapper() -> FetchErrorMapper:
    return FetchErrorMapper()


@pytest.mark.parametrize(
    "exc, kind, message",
    [
        (InvalidMarketIdError(), FetchErrorKind.INVALID_ARGUMENT,
         "Market ID must be a non-empty string."),
        (MarketNotFoundError("42"), FetchErrorKind.NOT_FOUND, 'Market with ID "42" not found.'),
        (UpstreamStatusError(502), FetchErrorKind.HTTP_STATUS,
         "API request failed with status 502"),
        (InvalidResponseError(), FetchErrorKind.VALIDATION, "Invalid response format"),
        (InvalidResponseError("id: Field required"), FetchErrorKind.VALIDATION,
         "Invalid response format: id: Field required"),
        (TransportError("connection refused"), FetchErrorKind.TRANSPORT, "connection refused"),
        (PaginationLimitError(3, []), FetchErrorKind.PAGINATION_LIMIT,
         "Pagination aborted after 3 pages"),
    ],
)
def test_provider_errors_map_to_kind_and_message(mapper, exc, kind, message):
    assert mapper.to_error(exc) == (kind, message)


def test_pagination_error_takes_kind_of_cause(mapper):
    exc = PaginationError(UpstreamStatusError(500), [])
    assert mapper.to_error(exc) == (
        FetchErrorKind.HTTP_STATUS,
        "API request failed with status 500",
    )


def test_raw_httpx_errors(mapper):
    request = httpx.Request("GET", "https://gamma.test/markets")
    status = httpx.HTTPStatusError(
        "bad", request=request, response=httpx.Response(429, request=request)
    )
    assert mapper.to_error(status) == (
        FetchErrorKind.HTTP_STATUS,
        "API request failed with status 429",
    )
    assert mapper.to_error(httpx.ReadTimeout("", request=request)) == (
        FetchErrorKind.TRANSPORT,
        "Request to Gamma API timed out",
    )
    kind, message = mapper.to_error(asyncio.TimeoutError())
    assert kind is FetchErrorKind.TRANSPORT
    assert message == "Request to Gamma API timed out"


def test_empty_messages_fall_back_to_api_name():
    mapper = FetchErrorMapper(api_name="Test API")
    assert mapper.to_error(TransportError()) == (
        FetchErrorKind.TRANSPORT,
        "Test API is unreachable",
    )
    assert mapper.to_error(ProviderError()) == (FetchErrorKind.VALIDATION, "Test API error")


def test_to_result_keeps_partial_markets(mapper):
    exc = PaginationError(TransportError("reset"), [])
    result = mapper.to_result(exc, FetchResult[list[Market]])
    assert result.success is False
    assert result.data == []
    assert result.error == "reset"
    assert result.error_kind is FetchErrorKind.TRANSPORT


def test_to_result_without_partial(mapper):
    result = mapper.to_result(MarketNotFoundError("x"), FetchResult[Market])
    assert result.data is None
    assert result.error_kind is FetchErrorKind.NOT_FOUND
