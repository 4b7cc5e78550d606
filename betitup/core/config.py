# betitup/core/config.py
from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import DEFAULT_FORMAT

# ----- The Odds API static metadata -----
ODDS_API_BASE = "https://api.the-odds-api.com/v4"

# markets requested per endpoint
ODDS_MARKETS = ("moneyline", "spreads", "totals")
PICK_MARKETS = ("moneyline", "spreads")


# ----- App settings (env-driven) -----
class Settings(BaseSettings):
    # empty key is allowed; the upstream rejects the call at request time
    odds_api_key: str = ""
    odds_api_base: str = ODDS_API_BASE
    odds_regions: str = "us"
    odds_date_format: str = "iso"
    http_timeout: float = 20.0

    host: str = "0.0.0.0"
    port: int = 3000
    cors_allow_origins: List[str] = ["*"]
    log_level: str = "INFO"
    log_format: str = DEFAULT_FORMAT

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
