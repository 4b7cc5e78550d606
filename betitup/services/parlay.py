# betitup/services/parlay.py
from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..schemas.odds import ParlayLeg, ParlayResult
from .pricing import compound, round_half_up

DEFAULT_TIER = "moderate"
MAX_LEGS = 4

# Static board the composer draws from; never mutated at runtime.
PARLAY_CANDIDATES: Tuple[ParlayLeg, ...] = (
    ParlayLeg(leg="Broncos ML", odds=-150, confidence="High"),
    ParlayLeg(leg="Raiders +3.5", odds=110, confidence="Moderate"),
    ParlayLeg(leg="Wilson Over 249.5 yards", odds=125, confidence="High"),
    ParlayLeg(leg="Adams Over 5.5 receptions", odds=105, confidence="Moderate"),
    ParlayLeg(leg="USC -21.5", odds=-110, confidence="High"),
)

# tier -> odds predicate; unknown tiers are not filtered
TIER_FILTERS: Dict[str, Callable[[int], bool]] = {
    "safe": lambda odds: odds < -110,
    "moderate": lambda odds: -110 <= odds <= 110,
    "high": lambda odds: odds > 110,
}


def filter_legs(tier: str, candidates: Sequence[ParlayLeg]) -> List[ParlayLeg]:
    keep = TIER_FILTERS.get(tier)
    if keep is None:
        return list(candidates)
    return [c for c in candidates if keep(c.odds)]


def format_payout(accumulator: float) -> str:
    """
    Profit percentage of a compounded multiplier, e.g. 1.6667 -> "+67".

    The "+" is prepended unconditionally, so a multiplier below 1 renders
    as "+-<n>".
    """
    return f"+{round_half_up((accumulator - 1) * 100)}"


def compose_parlay(
    tier: Optional[str] = None,
    candidates: Sequence[ParlayLeg] = PARLAY_CANDIDATES,
) -> ParlayResult:
    tier = tier or DEFAULT_TIER
    legs = filter_legs(tier, candidates)[:MAX_LEGS]
    acc = compound(leg.odds for leg in legs)
    return ParlayResult(
        tier=tier,
        legs=[leg.leg for leg in legs],
        estimated_payout=format_payout(acc),
    )
