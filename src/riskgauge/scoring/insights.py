"""Rule-based commentary: per-asset insight and suggestion, portfolio comment."""

from __future__ import annotations

from collections.abc import Sequence

from riskgauge.config import DEFAULT_SCORING, ScoringConfig
from riskgauge.models.asset import Asset, AssetType, Suggestion
from riskgauge.scoring.primitives import concentration_score

# (low volatility, high volatility) phrasing per asset type
INSIGHTS: dict[AssetType, tuple[str, str]] = {
    AssetType.GOVERNMENT_BOND: (
        "Stable fixed income component providing portfolio foundation",
        "Core position with moderate duration exposure",
    ),
    AssetType.CORPORATE_BOND: (
        "Quality credit exposure with attractive yield",
        "Balanced yield and credit risk profile",
    ),
    AssetType.STOCK: (
        "Well-positioned equity with growth potential",
        "Growth-oriented position with managed risk",
    ),
    AssetType.COMMODITY: (
        "Strategic portfolio diversifier",
        "Alternative asset providing market hedge",
    ),
}
GENERIC_INSIGHT = "Position aligned with portfolio strategy"

REBALANCE_ABOVE_PCT = 25.0
MONITOR_VOLATILITY_ABOVE = 30.0
LOW_YIELD_BELOW = 2.0
MAINTAIN_VOLATILITY_BELOW = 10.0
MAINTAIN_RETURN_ABOVE = 3.0

REVIEW_CLOSING = "Regular monitoring recommended."
WELL_BALANCED_COMMENT = (
    "Portfolio composition appears well-balanced. "
    "Continue regular review of positions and market conditions."
)


def generate_insight(asset: Asset, config: ScoringConfig = DEFAULT_SCORING) -> str:
    phrasing = INSIGHTS.get(asset.type)
    if phrasing is None:
        return GENERIC_INSIGHT
    low, high = phrasing
    return high if asset.volatility > config.insight_high_volatility else low


def generate_suggestion(asset: Asset, percentage: float) -> Suggestion:
    """First matching rule wins, so concentration outranks volatility and yield."""
    if percentage > REBALANCE_ABOVE_PCT:
        return Suggestion.REBALANCE
    if asset.volatility > MONITOR_VOLATILITY_ABOVE:
        return Suggestion.MONITOR_VOLATILITY
    if asset.expected_return < LOW_YIELD_BELOW:
        return Suggestion.REVIEW_YIELD
    if asset.volatility < MAINTAIN_VOLATILITY_BELOW and asset.expected_return > MAINTAIN_RETURN_ABOVE:
        return Suggestion.MAINTAIN
    return Suggestion.HOLD


def generate_comment(
    risk_score: int,
    assets: Sequence[Asset],
    config: ScoringConfig = DEFAULT_SCORING,
    concentration: float | None = None,
) -> str:
    """Portfolio-level comment built from independent observations.

    Args:
        risk_score: Aggregated 0-100 score.
        assets: The analysed positions.
        config: Scoring thresholds.
        concentration: Precomputed concentration score; recomputed when None.
    """
    if concentration is None:
        concentration = concentration_score(assets, config)
    high_vol_count = sum(1 for a in assets if a.volatility > MONITOR_VOLATILITY_ABOVE)
    low_return_count = sum(1 for a in assets if a.expected_return < LOW_YIELD_BELOW)

    observations: list[str] = []
    if risk_score > config.risk_threshold_high:
        observations.append("Portfolio shows elevated risk metrics")
    if concentration > config.comment_concentration_limit:
        observations.append("Consider broader diversification")
    if high_vol_count > 1:
        observations.append("Monitor higher volatility positions")
    if low_return_count > 1:
        observations.append("Review low-yield positions")

    if observations:
        return f"Portfolio Review: {'. '.join(observations)}. {REVIEW_CLOSING}"
    return WELL_BALANCED_COMMENT
