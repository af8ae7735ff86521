"""Runtime configuration for the Gamma market-data client."""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

GAMMA_API_URL = "https://gamma-api.polymarket.com"
MARKET_URL_BASE = "https://polymarket.com/market"


class GammaConfig(BaseSettings):
    """Settings passed into the fetch functions.

    Values load from ``POLYMARKET_*`` environment variables or a ``.env`` file;
    tests build their own instances instead of touching the environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="POLYMARKET_",
        env_file=".env",
        extra="ignore",
    )

    gamma_api_url: str = GAMMA_API_URL
    market_url_base: str = MARKET_URL_BASE

    page_size: int = Field(default=100, ge=1)
    # None disables the cap.
    max_pages: int | None = Field(default=500, ge=1)

    liquidity_num_min: str = "5000"
    volume_num_min: str = "5000"

    timeout_seconds: float = Field(default=15.0, gt=0)
    strict_encoded_fields: bool = False

    log_level: str = "INFO"
    log_json: bool = False


@lru_cache
def get_config() -> GammaConfig:
    """Default configuration, built once per process."""
    return GammaConfig()
