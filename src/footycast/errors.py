"""
Exception hierarchy for FootyCast.

Every failure that should abort a run derives from `FootycastError`, so the
CLI can turn it into a logged message and a non-zero exit code.
"""


class FootycastError(Exception):
    """Base class for all FootyCast errors."""


class ConfigError(FootycastError):
    """A required setting (usually an API key) is missing or invalid."""


class UpstreamDataError(FootycastError):
    """The sports-data service failed or returned unusable data."""


class PredictionError(FootycastError):
    """Base class for failures of the generative-AI prediction step."""


class PredictionTransportError(PredictionError):
    """The completion request failed at the network or HTTP level."""


class InvalidResponseFormatError(PredictionError):
    """The completion response lacks the expected candidate/content text."""


class PredictionSchemaError(PredictionError):
    """The generated text is not JSON matching the prediction schema."""
