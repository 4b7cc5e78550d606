from typing import Optional

from fastapi import APIRouter, Query

from ..schemas.odds import ParlayResult
from ..services.parlay import compose_parlay

router = APIRouter(tags=["parlay"])

@router.get(
    "/compose-parlay",
    response_model=ParlayResult,
    summary="Compose a parlay for a risk tier",
    description="Up to four legs from the fixed board, filtered by tier, with a compounded payout.",
)
def parlay(
    tier: Optional[str] = Query(None, description="safe | moderate | high (anything else: no filter)"),
):
    return compose_parlay(tier)
