# betitup/clients/oddsapi.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

import httpx
from pydantic import TypeAdapter, ValidationError

from ..core.config import ODDS_API_BASE
from ..schemas.odds import Game

logger = logging.getLogger(__name__)

_GAMES = TypeAdapter(List[Game])


class OddsApiError(RuntimeError):
    pass


class OddsApiClient:
    """
    Thin wrapper over The Odds API (v4).

      odds:  GET /sports/{sport}/odds?apiKey=&regions=&markets=&dateFormat=

    Every failure (transport, non-2xx, non-JSON body, unexpected shape) is
    raised as ``OddsApiError``. No retries.
    """

    # ------------ lifecycle ------------
    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = ODDS_API_BASE,
        regions: str = "us",
        date_format: str = "iso",
        timeout: float = 20.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._api_key = api_key
        self._base = base_url.rstrip("/")
        self._regions = regions
        self._date_format = date_format
        self._http = httpx.Client(timeout=timeout, transport=transport)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "OddsApiClient":
        return self

    def __exit__(self, *_exc) -> None:
        self.close()

    # ------------ low-level helpers ------------
    def _get(self, url: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        logger.debug("GET %s", url)
        try:
            resp = self._http.get(url, params=params or {})
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("GET %s -> %s", url, e.response.status_code)
            raise OddsApiError(f"GET {url} -> {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning("GET %s failed: %s", url, e)
            raise OddsApiError(f"GET {url} failed: {e}") from e
        try:
            return resp.json()
        except ValueError as e:
            logger.warning("GET %s returned a non-JSON body", url)
            raise OddsApiError(f"GET {url} returned a non-JSON body") from e

    # ------------ odds for a sport ------------
    def odds(self, sport: str, markets: Sequence[str]) -> List[Game]:
        """Upcoming and live games for ``sport`` with the requested markets."""
        url = f"{self._base}/sports/{sport}/odds"
        params: Dict[str, Any] = {
            "apiKey": self._api_key,
            "regions": self._regions,
            "markets": ",".join(markets),
            "dateFormat": self._date_format,
        }
        payload = self._get(url, params)
        try:
            return _GAMES.validate_python(payload)
        except ValidationError as e:
            logger.warning("GET %s returned an unexpected body: %s", url, e.error_count())
            raise OddsApiError(f"GET {url} returned an unexpected body") from e
