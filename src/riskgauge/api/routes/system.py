"""System health endpoints."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from riskgauge.api.deps import get_narrative_service
from riskgauge.narrative.service import NarrativeService

router = APIRouter()

_start_time = time.time()


@router.get("/health")
def health(narrative: NarrativeService = Depends(get_narrative_service)) -> dict:
    return {
        "status": "ok",
        "uptimeSeconds": int(time.time() - _start_time),
        "modelConfigured": narrative.model_enabled,
    }
