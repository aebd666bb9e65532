from __future__ import annotations

from dataclasses import dataclass

from riskgauge.errors import ModelResponseMalformed

REQUIRED_KEYS = ("personalizedInsight", "riskAnalysis", "recommendations", "marketContext")
RECOMMENDATION_COUNT = 3


@dataclass(frozen=True)
class AIAnalysisResult:
    personalized_insight: str
    risk_analysis: str
    recommendations: tuple[str, str, str]
    market_context: str
    source: str = "fallback"  # "model" or "fallback"

    @classmethod
    def from_payload(cls, data: object, source: str = "model") -> AIAnalysisResult:
        """Validate a decoded model response.

        Raises ModelResponseMalformed when a key is missing, a field is not a
        non-empty string, or recommendations is not a list of exactly three
        strings.
        """
        if not isinstance(data, dict):
            raise ModelResponseMalformed(f"expected JSON object, got {type(data).__name__}")

        missing = [k for k in REQUIRED_KEYS if k not in data]
        if missing:
            raise ModelResponseMalformed(f"missing keys: {', '.join(missing)}")

        for key in ("personalizedInsight", "riskAnalysis", "marketContext"):
            if not isinstance(data[key], str) or not data[key].strip():
                raise ModelResponseMalformed(f"{key} must be a non-empty string")

        recs = data["recommendations"]
        if (
            not isinstance(recs, list)
            or len(recs) != RECOMMENDATION_COUNT
            or not all(isinstance(r, str) and r.strip() for r in recs)
        ):
            raise ModelResponseMalformed(
                f"recommendations must be a list of {RECOMMENDATION_COUNT} strings"
            )

        return cls(
            personalized_insight=data["personalizedInsight"],
            risk_analysis=data["riskAnalysis"],
            recommendations=(recs[0], recs[1], recs[2]),
            market_context=data["marketContext"],
            source=source,
        )

    def to_dict(self) -> dict:
        return {
            "personalizedInsight": self.personalized_insight,
            "riskAnalysis": self.risk_analysis,
            "recommendations": list(self.recommendations),
            "marketContext": self.market_context,
        }
