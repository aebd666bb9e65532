"""Dependency injection for the FastAPI application."""

from __future__ import annotations

from riskgauge.analyzer import PortfolioAnalyzer
from riskgauge.config import AppConfig
from riskgauge.narrative.gateway import ModelGateway
from riskgauge.narrative.service import NarrativeService


class AppState:
    """Holds shared application state initialised during lifespan."""

    def __init__(self) -> None:
        self.config: AppConfig | None = None
        self.gateway: ModelGateway | None = None
        self.analyzer: PortfolioAnalyzer | None = None
        self.narrative: NarrativeService | None = None


app_state = AppState()


def get_analyzer() -> PortfolioAnalyzer:
    if app_state.analyzer is None:
        raise RuntimeError("PortfolioAnalyzer not initialised")
    return app_state.analyzer


def get_narrative_service() -> NarrativeService:
    if app_state.narrative is None:
        raise RuntimeError("NarrativeService not initialised")
    return app_state.narrative
