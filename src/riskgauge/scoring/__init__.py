from __future__ import annotations

from riskgauge.scoring.aggregate import risk_level, risk_score
from riskgauge.scoring.insights import generate_comment, generate_insight, generate_suggestion
from riskgauge.scoring.primitives import (
    concentration_score,
    portfolio_total,
    volatility_multiplier,
    volatility_score,
)

__all__ = [
    "concentration_score",
    "generate_comment",
    "generate_insight",
    "generate_suggestion",
    "portfolio_total",
    "risk_level",
    "risk_score",
    "volatility_multiplier",
    "volatility_score",
]
