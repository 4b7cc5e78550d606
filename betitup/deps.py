# betitup/deps.py
from typing import Iterator

from betitup.clients.oddsapi import OddsApiClient
from betitup.core.config import get_settings


def get_odds_client() -> Iterator[OddsApiClient]:
    """
    Per-request Odds API client, closed once the response is sent.
    Tests swap it out through ``app.dependency_overrides``.
    """
    settings = get_settings()
    client = OddsApiClient(
        settings.odds_api_key,
        base_url=settings.odds_api_base,
        regions=settings.odds_regions,
        date_format=settings.odds_date_format,
        timeout=settings.http_timeout,
    )
    try:
        yield client
    finally:
        client.close()
