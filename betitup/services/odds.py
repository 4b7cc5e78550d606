# betitup/services/odds.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..schemas.odds import (
    Bookmaker,
    Game,
    Market,
    NormalizedBookmaker,
    NormalizedGame,
    NormalizedMarket,
)


# -------------------------------
# Public API
# -------------------------------
def team_label(name: Optional[str], side: str) -> str:
    """Team name, or HOME/AWAY when the provider left it out."""
    return name or side.upper()


def matchup_label(game: Game) -> str:
    return f"{team_label(game.home_team, 'home')} vs {team_label(game.away_team, 'away')}"


def normalize_games(games: Sequence[Game]) -> List[NormalizedGame]:
    """
    Reshape The Odds API events into the compact per-game view:

    {
      "matchup":       "<home> vs <away>",
      "commence_time": <as received>,
      "bookmakers": [
        {"name": <title>, "markets": [{"type": <key>, "outcomes": [...]}, ...]},
        ...
      ]
    }

    Notes:
      - Order of games, bookmakers and markets is kept exactly as received.
      - Outcomes are passed through untouched (extra provider keys included).
      - Keys missing upstream stay missing; dump with ``exclude_unset=True``.
    """
    out: List[NormalizedGame] = []
    for game in games:
        row: Dict[str, Any] = {
            "matchup": matchup_label(game),
            "bookmakers": [_normalize_bookmaker(b) for b in game.bookmakers],
        }
        if "commence_time" in game.model_fields_set:
            row["commence_time"] = game.commence_time
        out.append(NormalizedGame(**row))
    return out


# -------------------------------
# Internals (helpers)
# -------------------------------
def _normalize_bookmaker(book: Bookmaker) -> NormalizedBookmaker:
    row: Dict[str, Any] = {"markets": [_normalize_market(m) for m in book.markets]}
    if "title" in book.model_fields_set:
        row["name"] = book.title
    return NormalizedBookmaker(**row)


def _normalize_market(market: Market) -> NormalizedMarket:
    row: Dict[str, Any] = {"outcomes": list(market.outcomes)}
    if "key" in market.model_fields_set:
        row["type"] = market.key
    return NormalizedMarket(**row)
