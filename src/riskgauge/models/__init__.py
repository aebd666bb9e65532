from __future__ import annotations

from riskgauge.models.analysis import AIAnalysisResult
from riskgauge.models.asset import Asset, AssetType, EnhancedAsset, Suggestion
from riskgauge.models.metrics import PortfolioMetrics, RiskLevel

__all__ = [
    # asset
    "AssetType",
    "Asset",
    "EnhancedAsset",
    "Suggestion",
    # metrics
    "RiskLevel",
    "PortfolioMetrics",
    # analysis
    "AIAnalysisResult",
]
