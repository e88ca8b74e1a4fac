"""
Typed models for FootyCast.

Sports-data models mirror the football-data.org v4 payloads (camelCase on the
wire, snake_case in Python). Prediction models describe the JSON the
generative model is asked to return and are used to validate it.
"""

from __future__ import annotations

from typing import Annotated, Dict, List, Optional, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    """Immutable model that reads and writes camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Team(_WireModel):
    id: int
    name: str
    short_name: Optional[str] = None
    tla: Optional[str] = None
    crest: Optional[str] = None


class StandingEntry(_WireModel):
    """One team's row of the league table."""

    position: int
    team: Team
    played_games: int
    won: int
    draw: int
    lost: int
    points: int
    goals_for: int
    goals_against: int
    goal_difference: int
    # football-data.org returns null form for some competitions
    form: Optional[str] = None


class Match(_WireModel):
    """A scheduled fixture."""

    id: int
    home_team: Team
    away_team: Team
    utc_date: str
    status: str
    matchday: Optional[int] = None


class FormattedStanding(BaseModel):
    """Display-only projection of a `StandingEntry` for the prompt."""

    model_config = ConfigDict(frozen=True)

    position: int
    team: str
    MP: int
    W: int
    D: int
    L: int
    F: int
    A: int
    GD: int
    P: int
    form: Optional[str] = None


# Strict members: no bool or numeric-string coercion, and ints stay ints on output
Percent = Union[
    Annotated[StrictInt, Field(ge=0, le=100)],
    Annotated[StrictFloat, Field(ge=0, le=100)],
]


class _PredictionModel(_WireModel):
    """Wire model that rejects unknown keys."""

    model_config = ConfigDict(extra="forbid")


class PredictionResult(_PredictionModel):
    """A single forecast: label, probability (0-100) and rationale."""

    prediction: str
    probability: Percent
    analysis: str


class MatchPrediction(_PredictionModel):
    match: str
    potential_score: str
    result: PredictionResult
    over_under: PredictionResult
    both_teams_to_score: PredictionResult


class PredictionResponse(_PredictionModel):
    predictions: List[MatchPrediction]


def standings_frame(standings: List[FormattedStanding]) -> pd.DataFrame:
    """Tabular view of formatted standings, in league order."""
    columns = list(FormattedStanding.model_fields)
    return pd.DataFrame([s.model_dump() for s in standings], columns=columns)


def predictions_frame(response: PredictionResponse) -> pd.DataFrame:
    """
    Flatten predictions into one row per match.

    Columns: match, score, result, result_pct, over_under, over_under_pct,
    btts, btts_pct.
    """
    rows: List[Dict[str, object]] = []
    for p in response.predictions:
        rows.append(
            {
                "match": p.match,
                "score": p.potential_score,
                "result": p.result.prediction,
                "result_pct": p.result.probability,
                "over_under": p.over_under.prediction,
                "over_under_pct": p.over_under.probability,
                "btts": p.both_teams_to_score.prediction,
                "btts_pct": p.both_teams_to_score.probability,
            }
        )
    columns = [
        "match",
        "score",
        "result",
        "result_pct",
        "over_under",
        "over_under_pct",
        "btts",
        "btts_pct",
    ]
    return pd.DataFrame(rows, columns=columns)
