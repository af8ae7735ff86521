"""Public entry points: the whole market-data surface offered to callers.

Both functions always return a FetchResult and never raise for upstream,
validation or configuration problems.
"""
import logging

import httpx
from pydantic import ValidationError

from polymarket_data.config import GammaConfig, get_config
from polymarket_data.schemas import FetchErrorKind, FetchResult, Market
from polymarket_data.services import create_market_service

logger = logging.getLogger(__name__)


def _config_error(exc: ValidationError) -> str:
    fields = dict.fromkeys(str(error["loc"][0]) for error in exc.errors() if error["loc"])
    logger.warning("gamma_config_invalid fields=%s error=%s", ",".join(fields), exc)
    return f"Invalid configuration: {', '.join(fields) or 'settings'}"


async def fetch_markets(
    config: GammaConfig | None = None,
    *,
    liquidity_num_min: str | None = None,
    volume_num_min: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> FetchResult[list[Market]]:
    """Fetch all active, open, non-archived markets above the given thresholds.

    Args:
        config: Settings; thresholds default to ``config.liquidity_num_min`` and
            ``config.volume_num_min``. Loaded from the environment when omitted.
        liquidity_num_min: Per-call override of the liquidity threshold.
        volume_num_min: Per-call override of the volume threshold.
        client: Optional pre-built HTTP client.

    Returns:
        Success with every market in API order, or failure with the error and
        whatever was fetched before it.
    """
    try:
        config = config or get_config()
    except ValidationError as exc:
        return FetchResult[list[Market]].fail(
            _config_error(exc), FetchErrorKind.INVALID_ARGUMENT
        )
    async with create_market_service(config, client=client) as service:
        return await service.fetch_markets(
            liquidity_num_min=liquidity_num_min,
            volume_num_min=volume_num_min,
        )


async def fetch_market_by_id(
    market_id: str,
    config: GammaConfig | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> FetchResult[Market]:
    """Fetch a single market by its Gamma ID."""
    try:
        config = config or get_config()
    except ValidationError as exc:
        return FetchResult[Market].fail(_config_error(exc), FetchErrorKind.INVALID_ARGUMENT)
    async with create_market_service(config, client=client) as service:
        return await service.fetch_market_by_id(market_id)
