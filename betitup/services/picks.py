from __future__ import annotations

from typing import Any, List, Optional, Sequence

from ..schemas.odds import Game, Market, Number, Pick
from .odds import matchup_label, team_label

# moneyline gap (in American-odds points) above which a pick is "High"
CONFIDENCE_GAP = 50


def find_market(game: Game, key: str) -> Optional[Market]:
    """First market with ``key`` on the game's first bookmaker, if any."""
    if not game.bookmakers:
        return None
    for m in game.bookmakers[0].markets:
        if m.key == key:
            return m
    return None


def _as_number(x: Any) -> Optional[Number]:
    # bool is an int subclass; "+110" style strings are not prices here
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        return None
    return x


def outcome_value(market: Optional[Market], name: Optional[str], field: str) -> Optional[Number]:
    """
    Numeric ``price`` or ``point`` of the first outcome named ``name``.
    Outcomes are raw provider objects, so anything that is not a dict or
    carries a non-numeric value reads as unavailable.
    """
    if market is None or name is None:
        return None
    for o in market.outcomes:
        if isinstance(o, dict) and o.get("name") == name:
            return _as_number(o.get(field))
    return None


def pick_for_game(game: Game) -> Pick:
    home, away = game.home_team, game.away_team
    ml = find_market(game, "moneyline")
    spreads = find_market(game, "spreads")

    # missing, null and zero all collapse to 0
    home_ml = outcome_value(ml, home, "price") or 0
    away_ml = outcome_value(ml, away, "price") or 0
    spread = outcome_value(spreads, home, "point") or 0

    # strict comparison: equal prices go to the away side
    side = team_label(home, "home") if home_ml < away_ml else team_label(away, "away")
    confidence = "High" if abs(home_ml - away_ml) > CONFIDENCE_GAP else "Moderate"

    return Pick(
        matchup=matchup_label(game),
        pick=f"{side} ML",
        spread=spread,
        confidence=confidence,
    )


def generate_picks(games: Sequence[Game]) -> List[Pick]:
    return [pick_for_game(g) for g in games]
