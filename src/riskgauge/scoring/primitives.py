"""Concentration and volatility sub-scores.

Both scores start from a baseline (some risk exists in any finite portfolio)
and add position-weighted penalties, then clamp to 100:

    concentration = min(35 + sum(1.5 * (pct - 20) for pct > 20), 100)
    volatility    = min(30 + sum(vol * weight * band_multiplier), 100)

Volatility bands are right-inclusive: vol <= 8 -> 1.5, vol <= 20 -> 2.5,
otherwise 3.5.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from riskgauge.config import DEFAULT_SCORING, ScoringConfig
from riskgauge.errors import InvalidPortfolio
from riskgauge.models.asset import Asset

MAX_SCORE = 100.0


def portfolio_total(assets: Sequence[Asset]) -> float:
    """Sum of position values. Raises InvalidPortfolio if it cannot be used as a divisor."""
    if not assets:
        raise InvalidPortfolio("portfolio has no assets")
    for asset in assets:
        if not math.isfinite(asset.value) or asset.value < 0:
            raise InvalidPortfolio(f"asset {asset.name!r} has invalid value {asset.value}")
        if not math.isfinite(asset.volatility) or asset.volatility < 0:
            raise InvalidPortfolio(
                f"asset {asset.name!r} has invalid volatility {asset.volatility}"
            )
    total = sum(a.value for a in assets)
    if total <= 0:
        raise InvalidPortfolio("portfolio total value must be positive")
    if not math.isfinite(total):
        raise InvalidPortfolio("portfolio total value overflows")
    return total


def concentration_score(
    assets: Sequence[Asset], config: ScoringConfig = DEFAULT_SCORING
) -> float:
    total = portfolio_total(assets)
    penalty = 0.0
    for asset in assets:
        pct = asset.value / total * 100
        if pct > config.concentration_threshold_pct:
            penalty += (pct - config.concentration_threshold_pct) * config.concentration_multiplier
    return min(penalty + config.concentration_baseline, MAX_SCORE)


def volatility_multiplier(volatility: float, config: ScoringConfig = DEFAULT_SCORING) -> float:
    if volatility <= config.volatility_low_max:
        return config.volatility_weight_low
    if volatility <= config.volatility_medium_max:
        return config.volatility_weight_medium
    return config.volatility_weight_high


def volatility_score(assets: Sequence[Asset], config: ScoringConfig = DEFAULT_SCORING) -> float:
    total = portfolio_total(assets)
    weighted = 0.0
    for asset in assets:
        weight = asset.value / total
        weighted += asset.volatility * weight * volatility_multiplier(asset.volatility, config)
    return min(weighted + config.volatility_baseline, MAX_SCORE)
