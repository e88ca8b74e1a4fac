"""
End-to-end prediction run for FootyCast.

Usage (from project root, with the virtualenv activated):

    python -m footycast.pipeline

This will:
- Fetch the current standings and the scheduled fixtures for the next days.
- Format the table and the first upcoming matchday into a prompt.
- Ask the generative model for predictions and validate the returned JSON.
- Save the predictions to output/data.json.

FOOTBALL_API_KEY and GOOGLE_API_KEY must be set (a .env file is read too).
"""

from __future__ import annotations

import argparse
from datetime import date
from typing import List, Optional

from dotenv import load_dotenv

from footycast.config import Settings
from footycast.data.football_api import FootballDataClient, fixture_window
from footycast.data.schema import PredictionResponse, predictions_frame, standings_frame
from footycast.errors import FootycastError
from footycast.features.formatting import (
    format_fixtures,
    format_standings_table,
    standings_to_json,
)
from footycast.features.prompt_builder import generate_prompt
from footycast.models.gemini_client import GeminiClient
from footycast.models.sink import write_predictions
from footycast.utils.logging_utils import get_logger, set_verbosity

logger = get_logger(__name__)


def run_pipeline(
    settings: Settings,
    football_client: Optional[FootballDataClient] = None,
    prediction_client: Optional[GeminiClient] = None,
    today: Optional[date] = None,
    dry_run: bool = False,
) -> Optional[PredictionResponse]:
    """
    Run one prediction cycle.

    Parameters
    ----------
    settings : Settings
        Validated runtime settings.
    football_client, prediction_client
        Injected clients; built from `settings` when None.
    today : datetime.date | None
        First day of the fixture window (defaults to today).
    dry_run : bool
        Stop after building the prompt: no AI call, no file written.

    Returns
    -------
    PredictionResponse | None
        The saved predictions, or None for a dry run.
    """
    if football_client is None:
        football_client = FootballDataClient(
            api_key=settings.football_api_key,
            timeout_s=settings.football_timeout_s,
        )

    logger.info("Starting prediction run for %s...", settings.competition)
    date_from, date_to = fixture_window(today or date.today(), settings.fixture_window_days)

    standings = football_client.get_standings(settings.competition)
    fixtures = football_client.get_fixtures(settings.competition, date_from, date_to)

    formatted = format_standings_table(standings)
    logger.debug("Standings:\n%s", standings_frame(formatted).to_string(index=False))

    fixtures_text = format_fixtures(fixtures)
    n_selected = len(fixtures_text.splitlines())
    logger.info(
        "Using %d of %d fetched fixtures (first matchday only).",
        n_selected,
        len(fixtures),
    )

    prompt = generate_prompt(standings_to_json(formatted), fixtures_text)
    logger.debug("Prompt:\n%s", prompt)

    if dry_run:
        logger.info("Dry run: skipping prediction request. Prompt:\n%s", prompt)
        return None

    if prediction_client is None:
        prediction_client = GeminiClient(
            api_key=settings.google_api_key,
            model_name=settings.model_name,
            timeout_s=settings.gemini_timeout_s,
        )

    predictions = prediction_client.predict(prompt)
    write_predictions(predictions, settings.output_path)

    if predictions.predictions:
        logger.info(
            "Predictions:\n%s", predictions_frame(predictions).to_string(index=False)
        )
    return predictions


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Predict the next matchday with a generative model."
    )
    parser.add_argument(
        "--competition",
        default=None,
        help="Competition code (e.g. PL). Defaults to FOOTBALL_COMPETITION or PL.",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=None,
        help="Fixture window length in days after today. "
        "If not provided, uses the default from config.py.",
    )
    parser.add_argument(
        "--model",
        default=None,
        help="Generative model name. Defaults to GEMINI_MODEL or config.py.",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Output JSON path (default: output/data.json).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the prompt instead of requesting predictions.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    set_verbosity(args.verbose)
    load_dotenv()

    try:
        settings = Settings.from_env(
            competition=args.competition,
            fixture_window_days=args.days,
            model_name=args.model,
            output_path=args.output,
        )
        run_pipeline(settings, dry_run=args.dry_run)
    except FootycastError as exc:
        logger.error("Prediction run failed: %s", exc)
        return 1

    logger.info("Prediction run complete.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
