"""Error types raised by the scoring engine and the narrative service."""

from __future__ import annotations


class RiskGaugeError(Exception):
    """Base class for riskgauge errors."""


class InvalidPortfolio(RiskGaugeError, ValueError):
    """Empty asset list, negative position value, or non-positive total value."""


class ModelRateLimited(RiskGaugeError):
    """The language-model endpoint answered with HTTP 429."""


class ModelRequestFailed(RiskGaugeError):
    """Transport error, non-429 HTTP error, or rate-limit retries exhausted."""


class ModelResponseMalformed(RiskGaugeError):
    """The model answered, but not with the four-key JSON object we asked for."""
