# betitup/routers/odds.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..clients.oddsapi import OddsApiClient, OddsApiError
from ..core.config import ODDS_MARKETS
from ..deps import get_odds_client
from ..schemas.odds import ErrorResponse, OddsResponse
from ..services.odds import normalize_games

logger = logging.getLogger(__name__)

router = APIRouter(tags=["odds"])


@router.get(
    "/odds/{sport}",
    response_model=OddsResponse,
    response_model_exclude_unset=True,
    responses={500: {"model": ErrorResponse}},
    summary="Normalized odds for a sport",
    description="Moneyline, spreads and totals per bookmaker, reshaped per game.",
)
def odds(sport: str, client: OddsApiClient = Depends(get_odds_client)):
    try:
        games = client.odds(sport, ODDS_MARKETS)
    except OddsApiError as e:
        logger.warning("odds fetch failed for %s: %s", sport, e)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch odds"})
    return OddsResponse(sport=sport, games=normalize_games(games))
