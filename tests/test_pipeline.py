import json
import logging
from datetime import date
from unittest.mock import Mock

import pytest
import requests

from footycast import pipeline
from footycast.data.schema import Match, PredictionResponse, StandingEntry
from footycast.errors import PredictionSchemaError, UpstreamDataError
from footycast.pipeline import main, run_pipeline


@pytest.fixture
def football_client(standings_payload, fixtures_payload):
    client = Mock()
    client.get_standings.return_value = [
        StandingEntry.model_validate(r) for r in standings_payload["standings"][0]["table"]
    ]
    client.get_fixtures.return_value = [
        Match.model_validate(m) for m in fixtures_payload["matches"]
    ]
    return client


def test_run_pipeline_end_to_end(settings, football_client, prediction_payload):
    prediction_client = Mock()
    prediction_client.predict.return_value = PredictionResponse.model_validate(
        prediction_payload
    )

    result = run_pipeline(
        settings,
        football_client=football_client,
        prediction_client=prediction_client,
        today=date(2026, 10, 17),
    )

    football_client.get_fixtures.assert_called_once_with("PL", "2026-10-17", "2026-10-27")
    prompt = prediction_client.predict.call_args[0][0]
    assert "Arsenal - Chelsea\nLiverpool - City" in prompt
    assert "Arsenal - City" not in prompt
    assert '"team": "Arsenal"' in prompt

    assert result.predictions[0].potential_score == "2-1"
    saved = json.loads(settings.output_path.read_text(encoding="utf-8"))
    assert saved == prediction_payload


def test_run_pipeline_with_no_fixtures_still_asks(settings, football_client):
    football_client.get_fixtures.return_value = []
    prediction_client = Mock()
    prediction_client.predict.return_value = PredictionResponse(predictions=[])

    run_pipeline(settings, football_client=football_client, prediction_client=prediction_client)

    assert "Assume that these are the fixtures:" in prediction_client.predict.call_args[0][0]
    assert settings.output_path.exists()


def test_no_output_written_when_prediction_fails(settings, football_client):
    prediction_client = Mock()
    prediction_client.predict.side_effect = PredictionSchemaError("bad json")

    with pytest.raises(PredictionSchemaError):
        run_pipeline(settings, football_client=football_client, prediction_client=prediction_client)
    assert not settings.output_path.exists()


def test_dry_run_skips_prediction(settings, football_client, caplog):
    prediction_client = Mock()

    with caplog.at_level("INFO"):
        result = run_pipeline(
            settings,
            football_client=football_client,
            prediction_client=prediction_client,
            dry_run=True,
        )

    assert result is None
    prediction_client.predict.assert_not_called()
    assert not settings.output_path.exists()
    assert "Liverpool - City" in caplog.text


def test_main_without_google_key_exits_before_network(monkeypatch):
    monkeypatch.setattr(pipeline, "load_dotenv", lambda *a, **k: False)
    monkeypatch.setenv("FOOTBALL_API_KEY", "football-key")
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    fake_run = Mock()
    monkeypatch.setattr(pipeline, "run_pipeline", fake_run)

    assert main([]) == 1
    fake_run.assert_not_called()


def test_main_returns_non_zero_on_upstream_failure(monkeypatch):
    monkeypatch.setattr(pipeline, "load_dotenv", lambda *a, **k: False)
    monkeypatch.setenv("FOOTBALL_API_KEY", "football-key")
    monkeypatch.setenv("GOOGLE_API_KEY", "google-key")
    monkeypatch.setattr(
        pipeline, "run_pipeline", Mock(side_effect=UpstreamDataError("403 Forbidden"))
    )

    assert main([]) == 1


def test_main_passes_cli_overrides(monkeypatch, tmp_path):
    monkeypatch.setattr(pipeline, "load_dotenv", lambda *a, **k: False)
    monkeypatch.setenv("FOOTBALL_API_KEY", "football-key")
    monkeypatch.setenv("GOOGLE_API_KEY", "google-key")
    fake_run = Mock(return_value=None)
    monkeypatch.setattr(pipeline, "run_pipeline", fake_run)

    out = tmp_path / "preds.json"
    assert main(["--competition", "PD", "--days", "5", "--output", str(out), "--dry-run"]) == 0

    settings = fake_run.call_args[0][0]
    assert settings.competition == "PD"
    assert settings.fixture_window_days == 5
    assert settings.output_path == out
    assert fake_run.call_args[1] == {"dry_run": True}


def test_main_does_not_log_google_key_on_failure(monkeypatch, caplog, football_client):
    monkeypatch.setattr(pipeline, "load_dotenv", lambda *a, **k: False)
    monkeypatch.setenv("FOOTBALL_API_KEY", "football-key")
    monkeypatch.setenv("GOOGLE_API_KEY", "SECRET-GOOGLE-KEY")
    monkeypatch.setattr(pipeline, "FootballDataClient", Mock(return_value=football_client))

    def refuse(self, url, params=None, **kwargs):
        raise requests.ConnectionError(
            f"Max retries exceeded with url: {url}?key={params['key']}"
        )

    monkeypatch.setattr(requests.Session, "post", refuse)

    with caplog.at_level("DEBUG"):
        assert main(["--verbose"]) == 1

    assert "Prediction run failed" in caplog.text
    assert "SECRET-GOOGLE-KEY" not in caplog.text


def test_verbose_leaves_third_party_loggers_alone(monkeypatch):
    monkeypatch.setattr(pipeline, "run_pipeline", Mock(return_value=None))
    monkeypatch.setattr(pipeline, "load_dotenv", lambda *a, **k: False)
    monkeypatch.setenv("FOOTBALL_API_KEY", "football-key")
    monkeypatch.setenv("GOOGLE_API_KEY", "google-key")
    root_level = logging.getLogger().level

    main(["--verbose"])

    assert logging.getLogger("footycast").level == logging.DEBUG
    assert logging.getLogger().level == root_level
    assert not logging.getLogger("urllib3").isEnabledFor(logging.DEBUG)
    logging.getLogger("footycast").setLevel(logging.NOTSET)
