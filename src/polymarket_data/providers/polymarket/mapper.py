"""Mapping from validated Gamma records to the canonical Market."""
import logging

from polymarket_data.config import MARKET_URL_BASE
from polymarket_data.providers.polymarket.dto import GammaMarketDTO
from polymarket_data.providers.polymarket.wire import WireField, decode
from polymarket_data.schemas import Market, Outcome

logger = logging.getLogger(__name__)


def build_outcomes(record: GammaMarketDTO) -> tuple[Outcome, ...]:
    """Zip outcomes, prices and token IDs into aligned Outcome entries.

    Empty unless all three decode to arrays of the same length. A mismatch is
    logged and otherwise ignored.

    Args:
        record: Validated Gamma market record.

    Returns:
        One Outcome per position; ``price`` falls back to "0" when empty.
    """
    wire = record.wire_fields()
    names = decode(wire[WireField.OUTCOMES], WireField.OUTCOMES, record.id)
    prices = decode(wire[WireField.OUTCOME_PRICES], WireField.OUTCOME_PRICES, record.id)
    token_ids = decode(wire[WireField.CLOB_TOKEN_IDS], WireField.CLOB_TOKEN_IDS, record.id)

    if (
        names is not None
        and prices is not None
        and token_ids is not None
        and len(names) == len(prices) == len(token_ids)
    ):
        return tuple(
            Outcome(name=name, price=price or "0", clob_token_id=token_id)
            for name, price, token_id in zip(names, prices, token_ids)
        )

    if any(variant is not None for variant in wire.values()):
        logger.warning(
            "gamma_outcome_mismatch market_id=%s outcomes=%s prices=%s token_ids=%s",
            record.id,
            _describe(names),
            _describe(prices),
            _describe(token_ids),
        )
    return ()


def _describe(values: list[str] | None) -> str:
    return "missing" if values is None else f"len={len(values)}"


def market_from_dto(record: GammaMarketDTO, url_base: str = MARKET_URL_BASE) -> Market:
    """Convert a validated record to a Market. Pure: no I/O, no clock."""
    return Market(
        id=record.id,
        slug=record.slug,
        url=f"{url_base.rstrip('/')}/{record.slug}",
        question=record.question,
        description=record.description or "",
        category=record.category,
        active=record.active,
        closed=record.closed,
        accepting_orders=record.accepting_orders,
        new=record.new,
        resolved=record.resolved,
        archived=record.archived,
        start_date=record.start_date,
        end_date=record.end_date,
        volume=record.volume or "0",
        liquidity=record.liquidity or "0",
        volume_24hr=record.volume_24hr,
        volume_1wk=record.volume_1wk,
        volume_1mo=record.volume_1mo,
        volume_1yr=record.volume_1yr,
        one_hour_price_change=record.one_hour_price_change,
        one_day_price_change=record.one_day_price_change,
        one_week_price_change=record.one_week_price_change,
        one_month_price_change=record.one_month_price_change,
        last_trade_price=record.last_trade_price,
        best_bid=record.best_bid,
        best_ask=record.best_ask,
        order_min_size=record.order_min_size,
        order_price_min_tick_size=record.order_price_min_tick_size,
        outcomes=build_outcomes(record),
    )
