"""Combine the sub-scores into one 0-100 risk score and map it to a level.

Weights:
    40% - concentration score
    60% - volatility score
"""

from __future__ import annotations

import math

from riskgauge.config import DEFAULT_SCORING, ScoringConfig
from riskgauge.models.metrics import RiskLevel


def _round_half_up(value: float) -> int:
    # round() would give 62 for 62.5
    return int(math.floor(value + 0.5))


def risk_score(
    concentration: float, volatility: float, config: ScoringConfig = DEFAULT_SCORING
) -> int:
    weighted = concentration * config.concentration_weight + volatility * config.volatility_weight
    return max(0, min(_round_half_up(weighted), 100))


def risk_level(score: int, config: ScoringConfig = DEFAULT_SCORING) -> RiskLevel:
    if score < config.risk_threshold_low:
        return RiskLevel.LOW
    if score < config.risk_threshold_moderate:
        return RiskLevel.MODERATE
    if score < config.risk_threshold_high:
        return RiskLevel.MODERATE_HIGH
    return RiskLevel.HIGH
