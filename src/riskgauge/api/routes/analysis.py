"""Portfolio analysis endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from riskgauge.analyzer import PortfolioAnalyzer
from riskgauge.api.deps import get_analyzer, get_narrative_service
from riskgauge.errors import InvalidPortfolio
from riskgauge.models.asset import Asset, EnhancedAsset
from riskgauge.models.metrics import PortfolioMetrics
from riskgauge.narrative.service import NarrativeService
from riskgauge.sample import SAMPLE_CLIENT, SAMPLE_PORTFOLIO

logger = logging.getLogger(__name__)

router = APIRouter()


class AssetIn(BaseModel):
    name: str
    value: float
    type: str = "Other"
    category: str = ""
    volatility: float
    expectedReturn: float
    maxDrawdown: float | None = None


class EnhancedAssetIn(AssetIn):
    percentage: float
    insight: str = ""
    suggestion: str = "Hold and monitor"


class AnalyzeRequest(BaseModel):
    assets: list[AssetIn]


class NarrativeRequest(BaseModel):
    assets: list[EnhancedAssetIn]
    riskScore: int
    riskLevel: str


async def _score(analyzer: PortfolioAnalyzer, assets: list[Asset]) -> PortfolioMetrics:
    try:
        return await analyzer.analyze(assets)
    except InvalidPortfolio as e:
        logger.info("Rejected portfolio: %s", e)
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/analyze")
async def analyze_portfolio(
    body: AnalyzeRequest,
    analyzer: PortfolioAnalyzer = Depends(get_analyzer),
) -> dict:
    """Score a portfolio: totalValue, riskScore, riskLevel, comment, annotated assets."""
    assets = [Asset.from_dict(a.model_dump()) for a in body.assets]
    metrics = await _score(analyzer, assets)
    return metrics.to_dict()


@router.post("/narrative")
async def portfolio_narrative(
    body: NarrativeRequest,
    narrative: NarrativeService = Depends(get_narrative_service),
) -> dict:
    """Narrative analysis for an already scored portfolio."""
    if not body.assets:
        raise HTTPException(status_code=422, detail="portfolio has no assets")
    try:
        assets = [EnhancedAsset.from_dict(a.model_dump()) for a in body.assets]
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    result = await narrative.analyze(assets, body.riskScore, body.riskLevel)
    return result.to_dict()


@router.post("/report")
async def portfolio_report(
    body: AnalyzeRequest,
    analyzer: PortfolioAnalyzer = Depends(get_analyzer),
    narrative: NarrativeService = Depends(get_narrative_service),
) -> dict:
    """Score the portfolio, then enrich it with the narrative analysis."""
    assets = [Asset.from_dict(a.model_dump()) for a in body.assets]
    metrics = await _score(analyzer, assets)
    analysis = await narrative.analyze(metrics.assets, metrics.risk_score, metrics.risk_level)
    return {"metrics": metrics.to_dict(), "analysis": analysis.to_dict()}


@router.get("/sample")
async def sample_report(
    analyzer: PortfolioAnalyzer = Depends(get_analyzer),
    narrative: NarrativeService = Depends(get_narrative_service),
) -> dict:
    """Full report for the built-in demo portfolio."""
    metrics = await _score(analyzer, list(SAMPLE_PORTFOLIO))
    analysis = await narrative.analyze(metrics.assets, metrics.risk_score, metrics.risk_level)
    return {
        "clientName": SAMPLE_CLIENT,
        "metrics": metrics.to_dict(),
        "analysis": analysis.to_dict(),
    }
