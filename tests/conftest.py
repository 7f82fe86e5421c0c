import copy

import pytest
import requests


def make_team(team_name, wins, losses, team_id=1, abbreviation="TM"):
    return {
        "leagueRecord": {"wins": wins, "losses": losses, "pct": ".500"},
        "team": {
            "id": team_id,
            "name": f"City {team_name}",
            "teamName": team_name,
            "abbreviation": abbreviation,
        },
    }


BASE_GAME = {
    "gamePk": 634567,
    "gameDate": "2021-04-05T23:05:00Z",
    "status": {
        "abstractGameState": "Preview",
        "codedGameState": "S",
        "detailedState": "Scheduled",
        "statusCode": "S",
        "startTimeTBD": False,
        "abstractGameCode": "P",
    },
    "teams": {
        "away": make_team("Yankees", 10, 5, team_id=147, abbreviation="NYY"),
        "home": make_team("Red Sox", 7, 8, team_id=111, abbreviation="BOS"),
    },
    "venue": {"id": 3, "name": "Fenway Park"},
}


@pytest.fixture
def game_data():
    """Return a factory building raw game dicts with selected overrides."""
    def _make(status=None, linescore=None, **overrides):
        game = copy.deepcopy(BASE_GAME)
        if status:
            game["status"].update(status)
        if linescore is not None:
            game["linescore"] = linescore
        game.update(overrides)
        return game
    return _make


@pytest.fixture
def schedule_payload(game_data):
    return {
        "totalGames": 3,
        "dates": [
            {"date": "2021-04-05", "games": [game_data(gamePk=1), game_data(gamePk=2)]},
            {"date": "2021-04-06", "games": [game_data(gamePk=3)]},
        ],
    }


class DummyResponse:
    def __init__(self, data=None, status_code=200, json_error=None):
        self._data = data
        self.status_code = status_code
        self._json_error = json_error

    def json(self):
        if self._json_error:
            raise self._json_error
        return self._data

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


@pytest.fixture
def stub_http(monkeypatch):
    """Stub requests.Session.get; returns the list of recorded calls."""
    calls = []

    def _install(response=None, exc=None):
        def fake_get(self, url, params=None, timeout=None):
            calls.append({"url": url, "params": params, "timeout": timeout})
            if exc:
                raise exc
            return response
        monkeypatch.setattr(requests.Session, "get", fake_get)
        return calls
    return _install


@pytest.fixture
def dummy_response():
    return DummyResponse
