"""
Shared sample payloads for FootyCast tests.
"""

from unittest.mock import Mock

import pytest

from footycast.config import Settings


def make_team(team_id: int, name: str) -> dict:
    return {
        "id": team_id,
        "name": name,
        "shortName": name,
        "tla": name[:3].upper(),
        "crest": f"https://crests.football-data.org/{team_id}.png",
    }


def make_match(match_id: int, home: str, away: str, matchday: int) -> dict:
    return {
        "id": match_id,
        "homeTeam": make_team(match_id * 10, home),
        "awayTeam": make_team(match_id * 10 + 1, away),
        "utcDate": "2026-10-24T14:00:00Z",
        "status": "SCHEDULED",
        "matchday": matchday,
    }


def make_response(payload=None, status_code: int = 200) -> Mock:
    """Fake requests.Response whose json() returns `payload`."""
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


@pytest.fixture
def standings_payload():
    return {
        "standings": [
            {
                "type": "TOTAL",
                "table": [
                    {
                        "position": 1,
                        "team": make_team(57, "Arsenal"),
                        "playedGames": 10,
                        "won": 8,
                        "draw": 1,
                        "lost": 1,
                        "points": 25,
                        "goalsFor": 20,
                        "goalsAgainst": 5,
                        "goalDifference": 15,
                        "form": "WWWWD",
                    },
                    {
                        "position": 2,
                        "team": make_team(64, "Liverpool"),
                        "playedGames": 10,
                        "won": 7,
                        "draw": 2,
                        "lost": 1,
                        "points": 23,
                        "goalsFor": 18,
                        "goalsAgainst": 8,
                        "goalDifference": 10,
                        "form": None,
                    },
                ],
            },
            {"type": "HOME", "table": []},
        ]
    }


@pytest.fixture
def fixtures_payload():
    return {
        "matches": [
            make_match(1, "Arsenal", "Chelsea", 11),
            make_match(2, "Liverpool", "City", 11),
            make_match(3, "Arsenal", "City", 12),
        ]
    }


@pytest.fixture
def prediction_payload():
    return {
        "predictions": [
            {
                "match": "Arsenal v Chelsea",
                "potentialScore": "2-1",
                "result": {
                    "prediction": "Arsenal Win",
                    "probability": 65,
                    "analysis": "Arsenal are top of the table.",
                },
                "overUnder": {
                    "prediction": "Over 2.5 Goals",
                    "probability": 60,
                    "analysis": "Both sides score freely.",
                },
                "bothTeamsToScore": {
                    "prediction": "Yes",
                    "probability": 55,
                    "analysis": "Chelsea rarely fail to score.",
                },
            }
        ]
    }


@pytest.fixture
def settings(tmp_path):
    return Settings(
        football_api_key="football-key",
        google_api_key="google-key",
        output_path=tmp_path / "output" / "data.json",
    )
