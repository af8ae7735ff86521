from collections.abc import Callable

import httpx
import pytest

from polymarket_data.config import GammaConfig

GAMMA_BASE = "https://gamma.test"


def raw_market(market_id: str = "m1", **overrides) -> dict:
    """A valid Gamma market record, in the JSON-string encoding Gamma usually sends."""
    record = {
        "id": market_id,
        "slug": f"market-{market_id}",
        "question": f"Question {market_id}?",
        "description": f"Description {market_id}",
        "active": True,
        "closed": False,
        "acceptingOrders": True,
        "new": False,
        "volume": "12345.6",
        "liquidity": "7890.1",
        "volume24hr": 1500,
        "bestBid": 0.64,
        "bestAsk": 0.66,
        "lastTradePrice": 0.65,
        "endDate": "2026-12-31T00:00:00Z",
        "outcomes": '["Yes", "No"]',
        "outcomePrices": '["0.65", "0.35"]',
        "clobTokenIds": '["tok-yes", "tok-no"]',
    }
    record.update(overrides)
    return record


class GammaStub:
    """Records requests and answers them with ``handler``."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def offsets(self) -> list[int]:
        return [int(r.url.params["offset"]) for r in self.requests]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self), base_url=GAMMA_BASE)


def paged_handler(page_sizes: dict[int, int | Exception | httpx.Response]):
    """Serve ``/markets`` pages keyed by offset.

    A value is either a number of records, an exception to raise, or a ready response.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        offset = int(request.url.params["offset"])
        page = page_sizes.get(offset, 0)
        if isinstance(page, Exception):
            raise page
        if isinstance(page, httpx.Response):
            return page
        body = [raw_market(f"m{offset + i}") for i in range(page)]
        return httpx.Response(200, json=body)

    return handler


@pytest.fixture
def gamma_config() -> GammaConfig:
    return GammaConfig(
        _env_file=None,
        gamma_api_url=GAMMA_BASE,
        page_size=100,
        max_pages=50,
        liquidity_num_min="5000",
        volume_num_min="5000",
    )
