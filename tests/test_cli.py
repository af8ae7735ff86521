import json

import pytest
from conftest import raw_market

from polymarket_data.cli import inspect_markets
from polymarket_data.providers.polymarket.dto import validate_market
from polymarket_data.providers.polymarket.mapper import market_from_dto
from polymarket_data.schemas import FetchErrorKind, FetchResult, Market


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(inspect_markets, "configure_logging", lambda config=None: None)


def _markets(n: int) -> list[Market]:
    return [market_from_dto(validate_market(raw_market(f"m{i}")).record) for i in range(n)]


def test_list_prints_head_and_exits_zero(monkeypatch, capsys):
    calls = []

    async def fake_fetch_markets(**kwargs):
        calls.append(kwargs)
        return FetchResult[list[Market]].ok(_markets(3))

    monkeypatch.setattr(inspect_markets, "fetch_markets", fake_fetch_markets)

    code = inspect_markets.main(["list", "--head", "1", "--liquidity-min", "100"])

    out, err = capsys.readouterr()
    assert code == 0
    assert calls == [{"liquidity_num_min": "100", "volume_num_min": None}]
    payload = json.loads(out)
    assert payload["success"] is True
    assert [m["id"] for m in payload["data"]] == ["m0"]
    assert "Fetched 3 markets (showing 1)" in err


def test_get_failure_exits_one(monkeypatch, capsys):
    async def fake_fetch_market_by_id(market_id):
        return FetchResult[Market].fail(
            f'Market with ID "{market_id}" not found.', FetchErrorKind.NOT_FOUND
        )

    monkeypatch.setattr(inspect_markets, "fetch_market_by_id", fake_fetch_market_by_id)

    code = inspect_markets.main(["get", "missing"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 1
    assert payload["error"] == 'Market with ID "missing" not found.'
    assert payload["error_kind"] == "not_found"


def test_subcommand_is_required():
    with pytest.raises(SystemExit):
        inspect_markets.main([])
