from __future__ import annotations

from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Confidence = Literal["High", "Moderate"]
Number = Union[int, float]


# ---------- upstream feed (The Odds API) ----------
class Market(BaseModel):
    key: Optional[str] = None
    # raw provider objects, passed through untouched
    outcomes: List[Any] = Field(default_factory=list)


class Bookmaker(BaseModel):
    title: Optional[str] = None
    markets: List[Market] = Field(default_factory=list)


class Game(BaseModel):
    home_team: Optional[str] = None
    away_team: Optional[str] = None
    # ISO string or unix seconds, depending on dateFormat
    commence_time: Any = None
    bookmakers: List[Bookmaker] = Field(default_factory=list)


# ---------- /odds/{sport} ----------
class NormalizedMarket(BaseModel):
    type: Optional[str] = None
    outcomes: List[Any] = Field(default_factory=list)


class NormalizedBookmaker(BaseModel):
    name: Optional[str] = None
    markets: List[NormalizedMarket] = Field(default_factory=list)


class NormalizedGame(BaseModel):
    matchup: str
    commence_time: Any = None
    bookmakers: List[NormalizedBookmaker] = Field(default_factory=list)


class OddsResponse(BaseModel):
    sport: str
    games: List[NormalizedGame]


# ---------- /generate-picks/{sport} ----------
class Pick(BaseModel):
    matchup: str
    pick: str
    spread: Number = 0
    confidence: Confidence


class PicksResponse(BaseModel):
    sport: str
    picks: List[Pick]


# ---------- /compose-parlay ----------
class ParlayLeg(BaseModel):
    model_config = ConfigDict(frozen=True)

    leg: str
    odds: int
    confidence: Confidence


class ParlayResult(BaseModel):
    tier: str
    legs: List[str]
    estimated_payout: str


class ErrorResponse(BaseModel):
    error: str
