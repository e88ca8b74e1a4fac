# path: src/footycast/features/formatting.py
"""
Formatting utilities that turn sports-data models into prompt material.

- Standings are projected into the compact MP/W/D/L/F/A/GD/P schema.
- Fixtures are narrowed to a single matchday and rendered as
  "Home - Away" lines.
"""

from __future__ import annotations

import json
from typing import List, Sequence

from footycast.data.schema import FormattedStanding, Match, StandingEntry


def format_standings_table(standings: Sequence[StandingEntry]) -> List[FormattedStanding]:
    """
    Project league-table rows into the display schema.

    Order is preserved (it is the league ranking) and values are copied as-is;
    nothing is recomputed.

    Parameters
    ----------
    standings : Sequence[StandingEntry]
        Rows as returned by the standings endpoint.

    Returns
    -------
    List[FormattedStanding]
        One formatted row per input row.
    """
    return [
        FormattedStanding(
            position=entry.position,
            team=entry.team.name,
            MP=entry.played_games,
            W=entry.won,
            D=entry.draw,
            L=entry.lost,
            F=entry.goals_for,
            A=entry.goals_against,
            GD=entry.goal_difference,
            P=entry.points,
            form=entry.form,
        )
        for entry in standings
    ]


def standings_to_json(standings: Sequence[FormattedStanding]) -> str:
    """Serialize formatted standings as 2-space indented JSON."""
    return json.dumps([s.model_dump() for s in standings], indent=2)


def select_matchday(fixtures: Sequence[Match]) -> List[Match]:
    """Keep only fixtures that share the first fixture's matchday."""
    if not fixtures:
        return []
    matchday = fixtures[0].matchday
    return [m for m in fixtures if m.matchday == matchday]


def format_fixtures(fixtures: Sequence[Match]) -> str:
    """
    Render the first matchday of `fixtures` as newline-separated lines.

    Each line reads ``"<home name> - <away name>"``. An empty input gives an
    empty string.
    """
    return "\n".join(
        f"{m.home_team.name} - {m.away_team.name}" for m in select_matchday(fixtures)
    )
