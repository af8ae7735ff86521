"""Query-string building for the Gamma ``/markets`` endpoint."""
import httpx
from pydantic import BaseModel, ConfigDict

DEFAULT_LIMIT = 100
DEFAULT_OFFSET = 0


class MarketQueryParams(BaseModel):
    """Parameters accepted by ``GET /markets``. Unset fields are left out of the query."""

    model_config = ConfigDict(frozen=True)

    limit: int | None = None
    offset: int | None = None
    id: str | None = None
    slug: str | None = None
    clob_token_ids: str | None = None
    active: bool | None = None
    closed: bool | None = None
    archived: bool | None = None
    # Numeric strings, forwarded as-is.
    volume_num_min: str | None = None
    liquidity_num_min: str | None = None

    def page(self, limit: int, offset: int) -> "MarketQueryParams":
        """Copy with pagination fields set."""
        return self.model_copy(update={"limit": limit, "offset": offset})


def _flag(value: bool) -> str:
    return "true" if value else "false"


def build_query_params(params: MarketQueryParams) -> httpx.QueryParams:
    """Ordered query parameters: limit and offset first (with defaults), then set filters."""
    limit = DEFAULT_LIMIT if params.limit is None else params.limit
    offset = DEFAULT_OFFSET if params.offset is None else params.offset
    items: list[tuple[str, str]] = [("limit", str(limit)), ("offset", str(offset))]

    for key in ("id", "slug", "clob_token_ids"):
        value = getattr(params, key)
        if value:
            items.append((key, value))
    for key in ("active", "closed", "archived"):
        value = getattr(params, key)
        if value is not None:
            items.append((key, _flag(value)))
    for key in ("volume_num_min", "liquidity_num_min"):
        value = getattr(params, key)
        if value:
            items.append((key, value))

    return httpx.QueryParams(items)


def build_query(params: MarketQueryParams) -> str:
    """Serialize ``params`` to a query string (no leading ``?``)."""
    return str(build_query_params(params))


def build_markets_path(params: MarketQueryParams) -> str:
    """Relative list-endpoint path, e.g. ``/markets?limit=100&offset=0``."""
    return f"/markets?{build_query(params)}"
