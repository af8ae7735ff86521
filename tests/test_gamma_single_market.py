import asyncio

import httpx
import pytest
from conftest import GammaStub, raw_market

from polymarket_data.markets import fetch_market_by_id
from polymarket_data.schemas import FetchErrorKind


def _single(response: httpx.Response | Exception):
    def handler(request: httpx.Request) -> httpx.Response:
        if isinstance(response, Exception):
            raise response
        return response

    return GammaStub(handler)


def _run(stub: GammaStub, market_id, config):
    async def _go():
        async with stub.client() as client:
            return await fetch_market_by_id(market_id, config, client=client)

    return asyncio.run(_go())


def test_success_returns_normalized_market(gamma_config):
    stub = _single(httpx.Response(200, json=raw_market("516710")))

    result = _run(stub, "516710", gamma_config)

    assert result.success is True
    assert result.error is None
    assert result.data.id == "516710"
    assert [o.name for o in result.data.outcomes] == ["Yes", "No"]
    assert len(stub.requests) == 1
    assert stub.requests[0].url.path == "/markets/516710"


def test_not_found_is_reported_with_id(gamma_config):
    stub = _single(httpx.Response(404, json={"error": "not found"}))

    result = _run(stub, "abc", gamma_config)

    assert result.success is False
    assert result.data is None
    assert result.error == 'Market with ID "abc" not found.'
    assert result.error_kind is FetchErrorKind.NOT_FOUND
    assert len(stub.requests) == 1


@pytest.mark.parametrize("market_id", ["", "   ", None, 42])
def test_invalid_id_issues_no_request(gamma_config, market_id):
    stub = _single(httpx.Response(200, json=raw_market()))

    result = _run(stub, market_id, gamma_config)

    assert result.success is False
    assert result.error == "Market ID must be a non-empty string."
    assert result.error_kind is FetchErrorKind.INVALID_ARGUMENT
    assert stub.requests == []


def test_surrounding_whitespace_is_trimmed(gamma_config):
    stub = _single(httpx.Response(404))

    result = _run(stub, "  abc  ", gamma_config)

    assert stub.requests[0].url.path == "/markets/abc"
    assert result.error == 'Market with ID "abc" not found.'


def test_id_is_percent_encoded_in_path(gamma_config):
    stub = _single(httpx.Response(404))

    _run(stub, "a/b", gamma_config)

    assert stub.requests[0].url.raw_path == b"/markets/a%2Fb"


def test_server_error_status(gamma_config):
    stub = _single(httpx.Response(500, text="boom"))

    result = _run(stub, "m1", gamma_config)

    assert result.success is False
    assert result.error == "API request failed with status 500"
    assert result.error_kind is FetchErrorKind.HTTP_STATUS


def test_invalid_record_is_a_format_error(gamma_config):
    payload = raw_market("m1")
    del payload["question"]
    stub = _single(httpx.Response(200, json=payload))

    result = _run(stub, "m1", gamma_config)

    assert result.success is False
    assert result.error.startswith("Invalid response format: ")
    assert "question" in result.error
    assert result.error_kind is FetchErrorKind.VALIDATION


def test_non_json_body_is_a_format_error(gamma_config):
    stub = _single(httpx.Response(200, text="<html>"))

    result = _run(stub, "m1", gamma_config)

    assert result.success is False
    assert result.error == "Invalid response format: body is not valid JSON"


def test_array_body_is_a_format_error(gamma_config):
    stub = _single(httpx.Response(200, json=[raw_market("m1")]))

    result = _run(stub, "m1", gamma_config)

    assert result.success is False
    assert result.error.startswith("Invalid response format")


def test_transport_error_becomes_failed_result(gamma_config):
    stub = _single(httpx.ConnectError("name resolution failed"))

    result = _run(stub, "m1", gamma_config)

    assert result.success is False
    assert result.error_kind is FetchErrorKind.TRANSPORT
    assert "name resolution failed" in result.error


def test_strict_mode_rejects_unparseable_encoded_field(gamma_config):
    config = gamma_config.model_copy(update={"strict_encoded_fields": True})
    stub = _single(httpx.Response(200, json=raw_market("m1", outcomes="[Yes, No")))

    result = _run(stub, "m1", config)

    assert result.success is False
    assert result.error.startswith("Invalid response format: outcomes:")


def test_lenient_mode_accepts_unparseable_encoded_field(gamma_config):
    stub = _single(httpx.Response(200, json=raw_market("m1", outcomes="[Yes, No")))

    result = _run(stub, "m1", gamma_config)

    assert result.success is True
    assert result.data.outcomes == ()
