"""FastAPI application factory with CORS and lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from riskgauge.analyzer import PortfolioAnalyzer
from riskgauge.api.deps import app_state
from riskgauge.config import load_config
from riskgauge.narrative.gateway import ModelGateway
from riskgauge.narrative.service import NarrativeService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the analyzer and narrative service once, close the gateway on shutdown."""
    config = load_config()

    gateway = ModelGateway.from_config(config)
    if gateway is not None:
        await gateway.start()

    app_state.config = config
    app_state.gateway = gateway
    app_state.analyzer = PortfolioAnalyzer(
        scoring=config.scoring,
        delay_seconds=config.analysis_delay_seconds,
    )
    app_state.narrative = NarrativeService.from_config(config, gateway=gateway)
    logger.info("API started (model narratives %s)", "enabled" if gateway else "disabled")
    yield

    if gateway is not None:
        await gateway.close()
    logger.info("API shutdown complete")


def create_app(*, use_lifespan: bool = True) -> FastAPI:
    """Build and return the FastAPI application.

    Args:
        use_lifespan: If False, skip the production lifespan (useful for testing
            where deps are injected via app_state directly).
    """
    app = FastAPI(
        title="riskgauge API",
        version="0.1.0",
        lifespan=lifespan if use_lifespan else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:5173",
            "http://localhost:4173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from riskgauge.api.routes import analysis, system

    prefix = "/api/risk"
    app.include_router(analysis.router, prefix=prefix, tags=["analysis"])
    app.include_router(system.router, prefix=prefix, tags=["system"])

    return app
