# betitup/routers/picks.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..clients.oddsapi import OddsApiClient, OddsApiError
from ..core.config import PICK_MARKETS
from ..deps import get_odds_client
from ..schemas.odds import ErrorResponse, PicksResponse
from ..services.picks import generate_picks

logger = logging.getLogger(__name__)

router = APIRouter(tags=["picks"])


@router.get(
    "/generate-picks/{sport}",
    response_model=PicksResponse,
    responses={500: {"model": ErrorResponse}},
    summary="One moneyline pick per game",
    description=(
        "Uses the first bookmaker's moneyline to pick the favoured side. "
        "Confidence is High when the two prices differ by more than 50."
    ),
)
def picks(sport: str, client: OddsApiClient = Depends(get_odds_client)):
    try:
        games = client.odds(sport, PICK_MARKETS)
    except OddsApiError as e:
        logger.warning("pick generation failed for %s: %s", sport, e)
        return JSONResponse(status_code=500, content={"error": "Failed to generate picks"})
    return PicksResponse(sport=sport, picks=generate_picks(games))
