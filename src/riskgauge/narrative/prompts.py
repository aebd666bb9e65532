from __future__ import annotations

from collections.abc import Sequence

from riskgauge.models.asset import EnhancedAsset
from riskgauge.models.metrics import RiskLevel

SYSTEM_PROMPT = """\
You are a financial advisor reviewing a client's investment portfolio.
Return ONLY valid JSON. No markdown, no code fences, no commentary outside the JSON."""


def format_number(value: float) -> str:
    """Shortest round-trip form, without a trailing ".0" (5.0 -> "5", 12.3456789 -> "12.3456789")."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def format_asset_line(asset: EnhancedAsset) -> str:
    return (
        f"{asset.name} ({asset.type.value}): {asset.percentage:.1f}% of portfolio, "
        f"volatility: {format_number(asset.volatility)}%, "
        f"expected return: {format_number(asset.expected_return)}%"
    )


def build_prompt(
    assets: Sequence[EnhancedAsset], risk_score: int, risk_level: RiskLevel | str
) -> str:
    portfolio_summary = "\n".join(format_asset_line(a) for a in assets)
    return f"""\
As a financial advisor, analyze this investment portfolio:

Risk Profile:
- Risk Score: {risk_score}/100
- Risk Level: {risk_level}

Portfolio Composition:
{portfolio_summary}

Provide a detailed analysis including:
1. Personalized portfolio insight focusing on risk-adjusted returns
2. Risk analysis highlighting key concerns and potential vulnerabilities
3. Three specific, actionable recommendations for portfolio improvement
4. Current market context and its impact on this portfolio composition

Format the response in JSON with these keys:
- personalizedInsight (string)
- riskAnalysis (string)
- recommendations (array of 3 strings)
- marketContext (string)"""
