"""Deterministic narrative used when no model is configured or the model call fails.

Same assets, score and level always produce the same text.
"""

from __future__ import annotations

from collections.abc import Sequence

from riskgauge.models.analysis import AIAnalysisResult
from riskgauge.models.asset import EnhancedAsset
from riskgauge.models.metrics import RiskLevel

HIGH_VOLATILITY_ABOVE = 20.0
CONCENTRATED_POSITION_ABOVE_PCT = 20.0
LOW_RETURN_BELOW = 3.0
HIGH_RISK_SHARE_ABOVE_PCT = 50.0
LOW_RETURN_COUNT_ABOVE = 2

# Keyed by lowercased risk level label. The aggregator never emits "very high";
# callers with a wider scale can still reach it.
INSIGHT_TEMPLATES = {
    "low": "Your portfolio maintains a conservative risk profile with emphasis on capital preservation.",
    "moderate": "Your portfolio balances growth potential with risk management strategies.",
    "high": "Your portfolio shows an aggressive growth orientation with elevated risk levels.",
    "very high": "Your portfolio demonstrates a highly speculative approach with significant risk exposure.",
}
DEFAULT_TEMPLATE = "moderate"

MARKET_CONTEXT = (
    "Based on portfolio composition and risk metrics, focus on maintaining alignment with "
    "your investment objectives while staying responsive to changing market conditions. "
    "Regular consultation with a financial advisor is recommended for detailed market "
    "analysis and personalized guidance."
)


def insight_template(risk_level: RiskLevel | str) -> str:
    return INSIGHT_TEMPLATES.get(str(risk_level).lower(), INSIGHT_TEMPLATES[DEFAULT_TEMPLATE])


def fallback_analysis(
    assets: Sequence[EnhancedAsset], risk_score: int, risk_level: RiskLevel | str
) -> AIAnalysisResult:
    level_label = str(risk_level).lower()
    high_risk_pct = sum(a.percentage for a in assets if a.volatility > HIGH_VOLATILITY_ABOVE)
    volatile_heavy = high_risk_pct > HIGH_RISK_SHARE_ABOVE_PCT
    concentrated = any(a.percentage > CONCENTRATED_POSITION_ABOVE_PCT for a in assets)
    low_return_count = sum(1 for a in assets if a.expected_return < LOW_RETURN_BELOW)
    many_low_yield = low_return_count > LOW_RETURN_COUNT_ABOVE
    any_negative = any(a.expected_return < 0 for a in assets)

    if volatile_heavy:
        exposure = "there's a notable concentration in high-volatility assets that requires attention."
    else:
        exposure = "the overall risk exposure is being managed through diversification."
    personalized_insight = (
        f"{insight_template(risk_level)} With a risk score of {risk_score}, {exposure}"
    )

    highlights = [
        "significant position concentration" if concentrated else "balanced asset distribution",
        "high exposure to volatile assets" if volatile_heavy else "controlled volatility exposure",
        "multiple low-yield positions" if many_low_yield else "satisfactory return potential",
        "presence of negative return expectations" if any_negative else "positive return outlook",
    ]
    risk_analysis = (
        f"Current risk assessment highlights: {', '.join(h for h in highlights if h)}. "
        f"This combination of factors contributes to the {level_label} risk classification."
    )

    recommendations = (
        "Implement position size limits of 20% per asset to improve diversification"
        if concentrated
        else "Maintain current diversification levels while monitoring market conditions",
        "Consider reducing high-volatility exposure through strategic reallocation"
        if volatile_heavy
        else "Look for opportunities to optimize risk-adjusted returns through tactical adjustments",
        "Review low-yielding positions for potential alternatives with better return profiles"
        if many_low_yield
        else "Continue regular portfolio rebalancing to maintain target allocations",
    )

    return AIAnalysisResult(
        personalized_insight=personalized_insight,
        risk_analysis=risk_analysis,
        recommendations=recommendations,
        market_context=MARKET_CONTEXT,
        source="fallback",
    )
