import pytest

from betitup.deps import get_odds_client
from betitup.main import app
from betitup.schemas.odds import Game


def make_game(home="Broncos", away="Raiders", home_ml=-150, away_ml=130, home_point=-3.5):
    """Raw Odds API event with one bookmaker carrying moneyline + spreads."""
    game = {
        "id": "evt-1",
        "sport_key": "americanfootball_nfl",
        "home_team": home,
        "away_team": away,
        "commence_time": "2026-10-25T20:25:00Z",
        "bookmakers": [
            {
                "key": "draftkings",
                "title": "DraftKings",
                "markets": [
                    {
                        "key": "moneyline",
                        "outcomes": [
                            {"name": home, "price": home_ml},
                            {"name": away, "price": away_ml},
                        ],
                    },
                    {
                        "key": "spreads",
                        "outcomes": [
                            {"name": home, "price": -110, "point": home_point},
                            {"name": away, "price": -110, "point": -home_point},
                        ],
                    },
                ],
            }
        ],
    }
    return game


class FakeOddsClient:
    def __init__(self, payload=None, error=None):
        self.payload = payload or []
        self.error = error
        self.calls = []

    def odds(self, sport, markets):
        self.calls.append((sport, tuple(markets)))
        if self.error is not None:
            raise self.error
        return [Game.model_validate(g) for g in self.payload]


@pytest.fixture
def fake_client():
    """Install a FakeOddsClient as the app's upstream; returns a factory."""
    def install(payload=None, error=None):
        client = FakeOddsClient(payload, error)
        app.dependency_overrides[get_odds_client] = lambda: client
        return client

    yield install
    app.dependency_overrides.clear()
