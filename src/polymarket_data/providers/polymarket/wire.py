"""Decoding of Gamma's array-like market fields.

``outcomes``, ``outcomePrices`` and ``clobTokenIds`` each arrive as a list of
plain values, a list of records, or a JSON-encoded string. ``classify`` tags the
raw value once; ``decode`` turns the tag into a list of strings, or None when the
value is not array-shaped. Upstream format drift gets patched here and nowhere else.
"""
import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class WireField(str, Enum):
    """The three parallel fields, with the record keys each one reads from."""

    OUTCOMES = "outcomes"
    OUTCOME_PRICES = "outcomePrices"
    CLOB_TOKEN_IDS = "clobTokenIds"

    @property
    def record_keys(self) -> tuple[str, ...]:
        return _RECORD_KEYS[self]


_RECORD_KEYS: dict[WireField, tuple[str, ...]] = {
    WireField.OUTCOMES: ("name", "outcome", "title", "label"),
    WireField.OUTCOME_PRICES: ("price", "outcomePrice", "value"),
    WireField.CLOB_TOKEN_IDS: ("clobTokenId", "token_id", "tokenId", "id"),
}


@dataclass(frozen=True)
class ArrayOfValues:
    values: tuple[Any, ...]


@dataclass(frozen=True)
class ArrayOfRecords:
    records: tuple[Mapping[str, Any], ...]


@dataclass(frozen=True)
class EncodedString:
    raw: str


WireList = ArrayOfValues | ArrayOfRecords | EncodedString


class EncodedStringError(ValueError):
    """An encoded string that is not a JSON array."""


def classify(raw: str | Sequence[Any] | None) -> WireList | None:
    """Tag a raw field value. None stays None (field absent)."""
    if raw is None:
        return None
    if isinstance(raw, str):
        return EncodedString(raw)
    items = tuple(raw)
    if items and all(isinstance(item, Mapping) for item in items):
        return ArrayOfRecords(items)
    return ArrayOfValues(items)


def parse_encoded(raw: str) -> list[Any]:
    """Parse a JSON-encoded array.

    Raises:
        EncodedStringError: ``raw`` is not JSON, or decodes to something other than a list.
    """
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise EncodedStringError(f"not valid JSON ({exc.msg})") from exc
    if not isinstance(parsed, list):
        raise EncodedStringError(f"expected a JSON array, got {type(parsed).__name__}")
    return parsed


def stringify(item: Any, field: WireField) -> str:
    """Reduce one decoded element to the string stored on an Outcome."""
    if item is None:
        return ""
    if isinstance(item, str):
        return item
    if isinstance(item, Mapping):
        for key in field.record_keys:
            if item.get(key) is not None:
                return stringify(item[key], field)
        return ""
    if isinstance(item, bool):
        return "true" if item else "false"
    return str(item)


def decode(variant: WireList | None, field: WireField, market_id: str) -> list[str] | None:
    """Decode a tagged field to strings; None when absent or not array-shaped.

    An unparseable encoded string is treated as absent and logged, never raised.
    """
    if variant is None:
        return None
    if isinstance(variant, ArrayOfValues):
        return [stringify(item, field) for item in variant.values]
    if isinstance(variant, ArrayOfRecords):
        return [stringify(record, field) for record in variant.records]
    try:
        items = parse_encoded(variant.raw)
    except EncodedStringError as exc:
        logger.warning(
            "gamma_encoded_field_unparseable market_id=%s field=%s error=%s raw=%r",
            market_id,
            field.value,
            exc,
            variant.raw,
        )
        return None
    return [stringify(item, field) for item in items]
