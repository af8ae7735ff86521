"""CLI to inspect what the market-data pipeline returns.

Usage:
  polymarket-markets list --head 5
  polymarket-markets list --liquidity-min 10000 --volume-min 0
  polymarket-markets get 516710
"""
import argparse
import asyncio
import json
import sys

from polymarket_data.config import get_config
from polymarket_data.logging_config import configure_logging
from polymarket_data.markets import fetch_market_by_id, fetch_markets
from polymarket_data.schemas import FetchResult


def print_json(data: object) -> None:
    print(json.dumps(data, indent=2, default=str))


def _emit(result: FetchResult, head: int | None = None) -> int:
    payload = result.model_dump(mode="json")
    if head is not None and isinstance(payload.get("data"), list):
        total = len(payload["data"])
        payload["data"] = payload["data"][:head]
        print(f"Fetched {total} markets (showing {len(payload['data'])})", file=sys.stderr)
    print_json(payload)
    return 0 if result.success else 1


def cmd_list(args: argparse.Namespace) -> int:
    result = asyncio.run(
        fetch_markets(
            liquidity_num_min=args.liquidity_min,
            volume_num_min=args.volume_min,
        )
    )
    return _emit(result, head=args.head)


def cmd_get(args: argparse.Namespace) -> int:
    result = asyncio.run(fetch_market_by_id(args.market_id))
    return _emit(result)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polymarket-markets",
        description="Fetch Polymarket markets through the Gamma API and print them as JSON.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="Fetch all open markets above the thresholds")
    p_list.add_argument("--head", type=int, default=None, help="Print only the first N markets")
    p_list.add_argument("--liquidity-min", default=None, help="Override liquidity_num_min")
    p_list.add_argument("--volume-min", default=None, help="Override volume_num_min")
    p_list.set_defaults(func=cmd_list)

    p_get = sub.add_parser("get", help="Fetch one market by Gamma ID")
    p_get.add_argument("market_id")
    p_get.set_defaults(func=cmd_get)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(get_config())
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
