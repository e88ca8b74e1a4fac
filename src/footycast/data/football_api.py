"""
Read client for the football-data.org v4 API.

Two calls are used per run: the competition standings and the scheduled
matches inside a date window. Any transport, HTTP or payload problem is raised
as `UpstreamDataError`; an empty fixture list is only a warning.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Tuple

import requests
from pydantic import ValidationError

from footycast.config import FOOTBALL_API_BASE, FOOTBALL_API_TIMEOUT_S
from footycast.data.schema import Match, StandingEntry
from footycast.errors import UpstreamDataError
from footycast.utils.logging_utils import get_logger

logger = get_logger(__name__)


def fixture_window(today: date, days: int) -> Tuple[str, str]:
    """Return the ISO ``(dateFrom, dateTo)`` pair covering today..today+days."""
    return today.isoformat(), (today + timedelta(days=days)).isoformat()


@dataclass
class FootballDataClient:
    api_key: str = field(repr=False)
    base_url: str = FOOTBALL_API_BASE
    timeout_s: float = FOOTBALL_API_TIMEOUT_S
    _session: requests.Session = field(default_factory=requests.Session, repr=False)

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
        headers = {"X-Auth-Token": self.api_key}
        try:
            r = self._session.get(
                url, headers=headers, params=params, timeout=self.timeout_s
            )
            r.raise_for_status()
            data = r.json()
        except requests.RequestException as exc:
            raise UpstreamDataError(f"Request to {url} failed: {exc}") from exc
        except ValueError as exc:
            raise UpstreamDataError(f"Response from {url} is not JSON.") from exc

        if not isinstance(data, dict):
            raise UpstreamDataError(f"Unexpected payload from {url}: {type(data).__name__}")
        return data

    def get_standings(self, competition: str) -> List[StandingEntry]:
        """
        Fetch the current league table of a competition.

        Returns the rows of the first table in the ``standings`` list (the
        overall table for league competitions).
        """
        logger.info("Fetching standings for %s", competition)
        data = self._get(f"competitions/{competition}/standings")

        tables = data.get("standings") or []
        first = tables[0] if isinstance(tables, list) and tables else None
        if not isinstance(first, dict) or not isinstance(first.get("table"), list):
            raise UpstreamDataError(f"No standings table returned for {competition}.")

        try:
            table = [StandingEntry.model_validate(row) for row in first["table"]]
        except ValidationError as exc:
            raise UpstreamDataError(f"Malformed standings row for {competition}: {exc}") from exc

        logger.info("Fetched %d standings rows.", len(table))
        return table

    def get_fixtures(self, competition: str, date_from: str, date_to: str) -> List[Match]:
        """Fetch scheduled matches of a competition between two ISO dates."""
        logger.info(
            "Fetching scheduled fixtures for %s from %s to %s",
            competition,
            date_from,
            date_to,
        )
        params = {"status": "SCHEDULED", "dateFrom": date_from, "dateTo": date_to}
        data = self._get(f"competitions/{competition}/matches", params=params)

        raw = data.get("matches") or []
        if not raw:
            logger.warning(
                "No scheduled fixtures for %s between %s and %s.",
                competition,
                date_from,
                date_to,
            )
            return []

        try:
            matches = [Match.model_validate(m) for m in raw]
        except ValidationError as exc:
            raise UpstreamDataError(f"Malformed match for {competition}: {exc}") from exc

        logger.info("Fetched %d scheduled fixtures.", len(matches))
        return matches
