"""
Global configuration for the FootyCast project.

This module centralizes API endpoints, generation parameters and output paths,
and defines the `Settings` object built once at startup from the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

from footycast.errors import ConfigError

# Sports-data service (football-data.org v4)
FOOTBALL_API_BASE: str = "https://api.football-data.org/v4"
DEFAULT_COMPETITION: str = "PL"  # Premier League
FIXTURE_WINDOW_DAYS: int = 10  # fixtures are fetched for today..today+N

# Generative-AI completion service
GEMINI_API_BASE: str = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL_NAME: str = "gemini-2.0-flash"
GENERATION_CONFIG = {
    "temperature": 0.7,
    "topK": 1,
    "topP": 1,
    "maxOutputTokens": 2048,
}

# HTTP timeouts in seconds
FOOTBALL_API_TIMEOUT_S: float = 20.0
GEMINI_API_TIMEOUT_S: float = 120.0

# Output artifact, relative to the working directory
OUTPUT_DIR: Path = Path("output")
OUTPUT_FILENAME: str = "data.json"

# Environment variable names
FOOTBALL_API_KEY_ENV: str = "FOOTBALL_API_KEY"
GOOGLE_API_KEY_ENV: str = "GOOGLE_API_KEY"
COMPETITION_ENV: str = "FOOTBALL_COMPETITION"
MODEL_ENV: str = "GEMINI_MODEL"

REQUIRED_ENV: List[str] = [FOOTBALL_API_KEY_ENV, GOOGLE_API_KEY_ENV]


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings for one prediction run.

    Attributes
    ----------
    football_api_key : str
        Token sent as ``X-Auth-Token`` to the sports-data service.
    google_api_key : str
        Key passed as the ``key`` query parameter to the completion API.
    competition : str
        Competition code used for both standings and fixtures.
    fixture_window_days : int
        Number of days after today included in the fixtures request.
    model_name : str
        Generative model used for the completion request.
    output_path : pathlib.Path
        Where the validated predictions are written.
    """

    football_api_key: str = field(repr=False)
    google_api_key: str = field(repr=False)
    competition: str = DEFAULT_COMPETITION
    fixture_window_days: int = FIXTURE_WINDOW_DAYS
    model_name: str = DEFAULT_MODEL_NAME
    output_path: Path = OUTPUT_DIR / OUTPUT_FILENAME
    football_timeout_s: float = FOOTBALL_API_TIMEOUT_S
    gemini_timeout_s: float = GEMINI_API_TIMEOUT_S

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        **overrides,
    ) -> "Settings":
        """
        Build settings from environment variables.

        Both API keys are required; a missing or blank key raises
        `ConfigError` listing every missing variable. Keyword overrides
        (e.g. from CLI flags) take precedence over the environment; ``None``
        values are ignored.
        """
        env = os.environ if environ is None else environ

        missing = [k for k in REQUIRED_ENV if not env.get(k, "").strip()]
        if missing:
            raise ConfigError(
                "Missing required environment variables: " + ", ".join(missing)
            )

        values = {
            "football_api_key": env[FOOTBALL_API_KEY_ENV].strip(),
            "google_api_key": env[GOOGLE_API_KEY_ENV].strip(),
            "competition": env.get(COMPETITION_ENV) or DEFAULT_COMPETITION,
            "model_name": env.get(MODEL_ENV) or DEFAULT_MODEL_NAME,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})

        if int(values.get("fixture_window_days", FIXTURE_WINDOW_DAYS)) < 0:
            raise ConfigError("fixture_window_days must be zero or positive.")
        if "output_path" in values:
            values["output_path"] = Path(values["output_path"])

        return cls(**values)
