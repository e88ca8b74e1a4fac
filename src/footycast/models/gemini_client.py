# path: src/footycast/models/gemini_client.py
"""
Client for the Gemini ``generateContent`` REST endpoint.

The call is atomic: it either returns a fully validated `PredictionResponse`
or raises one of

- `PredictionTransportError`   network failure or non-2xx status
- `InvalidResponseFormatError` no ``candidates[0].content.parts[0].text``
- `PredictionSchemaError`      text is not JSON or does not match the schema
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List

import requests
from pydantic import ValidationError

from footycast.config import (
    DEFAULT_MODEL_NAME,
    GEMINI_API_BASE,
    GEMINI_API_TIMEOUT_S,
    GENERATION_CONFIG,
)
from footycast.data.schema import PredictionResponse
from footycast.errors import (
    InvalidResponseFormatError,
    PredictionSchemaError,
    PredictionTransportError,
)
from footycast.utils.logging_utils import get_logger

logger = get_logger(__name__)

_CODE_FENCE = re.compile(r"^\s*```(?:json)?\s*\n?(.*?)\n?\s*```\s*$", re.DOTALL)


def extract_text(payload: Any) -> str:
    """
    Return the first text part of the first candidate.

    Raises
    ------
    InvalidResponseFormatError
        If any level of ``candidates[0].content.parts[0].text`` is missing or
        has the wrong type.
    """
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise InvalidResponseFormatError(
            "Invalid response format: expected candidates[0].content.parts[0].text"
        ) from exc

    if not isinstance(text, str):
        raise InvalidResponseFormatError(
            f"Invalid response format: text part is {type(text).__name__}, not str"
        )
    return text


def _describe_errors(exc: ValidationError) -> str:
    parts: List[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def parse_prediction_text(text: str) -> PredictionResponse:
    """
    Parse model output into a `PredictionResponse`.

    A surrounding Markdown code fence is tolerated. The JSON must then match
    the prediction schema exactly; otherwise `PredictionSchemaError` names the
    offending field path(s).
    """
    fenced = _CODE_FENCE.match(text)
    body = fenced.group(1) if fenced else text

    try:
        data = json.loads(body)
    except json.JSONDecodeError as exc:
        raise PredictionSchemaError(f"Model output is not valid JSON: {exc}") from exc

    try:
        return PredictionResponse.model_validate(data)
    except ValidationError as exc:
        raise PredictionSchemaError(
            f"Model output does not match the prediction schema: {_describe_errors(exc)}"
        ) from exc


@dataclass
class GeminiClient:
    api_key: str = field(repr=False)
    model_name: str = DEFAULT_MODEL_NAME
    base_url: str = GEMINI_API_BASE
    timeout_s: float = GEMINI_API_TIMEOUT_S
    _session: requests.Session = field(default_factory=requests.Session, repr=False)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model_name}:generateContent"

    def build_request_body(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": dict(GENERATION_CONFIG),
        }

    def _describe_failure(self, exc: requests.RequestException) -> str:
        # requests messages embed the full URL, including the ?key= parameter
        status = getattr(exc.response, "status_code", None)
        name = type(exc).__name__
        return name if status is None else f"{name} (HTTP {status})"

    def generate(self, prompt: str) -> str:
        """Send one completion request and return the raw generated text."""
        logger.info("Requesting predictions from %s", self.model_name)
        try:
            r = self._session.post(
                self.endpoint,
                params={"key": self.api_key},
                json=self.build_request_body(prompt),
                timeout=self.timeout_s,
            )
            r.raise_for_status()
        except requests.RequestException as exc:
            raise PredictionTransportError(
                f"Completion request to {self.model_name} failed: {self._describe_failure(exc)}"
            ) from exc

        try:
            payload = r.json()
        except ValueError as exc:
            raise InvalidResponseFormatError(
                "Invalid response format: body is not JSON"
            ) from exc

        return extract_text(payload)

    def predict(self, prompt: str) -> PredictionResponse:
        text = self.generate(prompt)
        logger.debug("Raw model output:\n%s", text)
        response = parse_prediction_text(text)
        logger.info("Received %d match predictions.", len(response.predictions))
        return response
