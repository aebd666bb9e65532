from riskgauge.narrative.fallback import fallback_analysis
from riskgauge.narrative.gateway import (
    CompletionResult,
    CompletionStatus,
    ModelConfig,
    ModelGateway,
)
from riskgauge.narrative.prompts import build_prompt
from riskgauge.narrative.service import NarrativeService

__all__ = [
    "CompletionResult",
    "CompletionStatus",
    "ModelConfig",
    "ModelGateway",
    "NarrativeService",
    "build_prompt",
    "fallback_analysis",
]
