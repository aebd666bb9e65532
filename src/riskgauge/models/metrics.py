from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from riskgauge.models.asset import EnhancedAsset


class RiskLevel(StrEnum):
    LOW = "Low"
    MODERATE = "Moderate"
    MODERATE_HIGH = "Moderate-High"
    HIGH = "High"


@dataclass(frozen=True)
class PortfolioMetrics:
    total_value: float
    risk_score: int  # 0-100
    risk_level: RiskLevel
    comment: str
    assets: tuple[EnhancedAsset, ...]
    concentration_score: float = 0.0
    volatility_score: float = 0.0

    def to_dict(self) -> dict:
        return {
            "totalValue": self.total_value,
            "riskScore": self.risk_score,
            "riskLevel": self.risk_level.value,
            "comment": self.comment,
            "assets": [a.to_dict() for a in self.assets],
            "concentrationScore": self.concentration_score,
            "volatilityScore": self.volatility_score,
        }
