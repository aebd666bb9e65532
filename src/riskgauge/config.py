from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv


@dataclass(frozen=True)
class ScoringConfig:
    """Thresholds and weights shared by every scoring function."""

    # Risk level bands: score < low -> Low, < moderate -> Moderate, < high -> Moderate-High
    risk_threshold_low: int = 30
    risk_threshold_moderate: int = 45
    risk_threshold_high: int = 60

    # Volatility bands (right-inclusive): <= low_max, <= medium_max, above
    volatility_low_max: float = 8.0
    volatility_medium_max: float = 20.0
    volatility_weight_low: float = 1.5
    volatility_weight_medium: float = 2.5
    volatility_weight_high: float = 3.5
    volatility_baseline: float = 30.0

    concentration_threshold_pct: float = 20.0
    concentration_multiplier: float = 1.5
    concentration_baseline: float = 35.0

    concentration_weight: float = 0.4
    volatility_weight: float = 0.6

    insight_high_volatility: float = 15.0
    comment_concentration_limit: float = 60.0


DEFAULT_SCORING = ScoringConfig()


@dataclass(frozen=True)
class AppConfig:
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-3.5-turbo"
    model_temperature: float = 0.7
    model_timeout_seconds: int = 30
    model_max_retries: int = 3
    model_base_delay_seconds: float = 1.0
    analysis_delay_seconds: float = 1.5
    scoring: ScoringConfig = field(default_factory=ScoringConfig)

    @property
    def model_configured(self) -> bool:
        return bool(self.openai_api_key)


def load_config() -> AppConfig:
    """Load application config from environment variables.

    Loads .env file if present in the current directory.
    """
    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)

    scoring = ScoringConfig(
        risk_threshold_low=int(os.environ.get("RISK_THRESHOLD_LOW", "30")),
        risk_threshold_moderate=int(os.environ.get("RISK_THRESHOLD_MODERATE", "45")),
        risk_threshold_high=int(os.environ.get("RISK_THRESHOLD_HIGH", "60")),
    )

    return AppConfig(
        openai_api_key=os.environ.get("OPENAI_API_KEY", ""),
        openai_base_url=os.environ.get("OPENAI_BASE_URL", "https://api.openai.com/v1"),
        openai_model=os.environ.get("OPENAI_MODEL", "gpt-3.5-turbo"),
        model_temperature=float(os.environ.get("MODEL_TEMPERATURE", "0.7")),
        model_timeout_seconds=int(os.environ.get("MODEL_TIMEOUT_SECONDS", "30")),
        model_max_retries=int(os.environ.get("MODEL_MAX_RETRIES", "3")),
        model_base_delay_seconds=float(os.environ.get("MODEL_BASE_DELAY_SECONDS", "1.0")),
        analysis_delay_seconds=float(os.environ.get("ANALYSIS_DELAY_SECONDS", "1.5")),
        scoring=scoring,
    )
