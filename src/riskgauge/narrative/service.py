"""Narrative enrichment: model-written portfolio analysis with a deterministic fallback.

Per request:
  NotStarted -> Prompting -> AwaitingModel -> Succeeded
                                           -> RateLimited -> (backoff, retry) -> ...
                                           -> Failed -> Fallback
Rate-limit retries are bounded by max_retries total attempts, sleeping
base_delay * 2**attempt between them (attempt starts at 1). Every failure mode
ends in the fallback narrative; callers always get a valid AIAnalysisResult.
Cancellation propagates and skips the fallback.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Sequence

from riskgauge.config import AppConfig
from riskgauge.errors import (
    ModelRateLimited,
    ModelRequestFailed,
    ModelResponseMalformed,
    RiskGaugeError,
)
from riskgauge.models.analysis import AIAnalysisResult
from riskgauge.models.asset import EnhancedAsset
from riskgauge.models.metrics import RiskLevel
from riskgauge.narrative.fallback import fallback_analysis
from riskgauge.narrative.gateway import CompletionStatus, ModelGateway
from riskgauge.narrative.prompts import SYSTEM_PROMPT, build_prompt

logger = logging.getLogger(__name__)


class NarrativeService:
    """Produce an AIAnalysisResult for an analysed portfolio."""

    def __init__(
        self,
        gateway: ModelGateway | None,
        max_retries: int = 3,
        base_delay: float = 1.0,
        owns_gateway: bool = False,
    ) -> None:
        self._gateway = gateway
        self._owns_gateway = owns_gateway
        self._max_retries = max(1, max_retries)
        self._base_delay = base_delay
        if gateway is None:
            logger.info("No model credential configured, narratives use the rule-based fallback")

    @property
    def model_enabled(self) -> bool:
        return self._gateway is not None

    async def close(self) -> None:
        """Close the gateway if this service created it."""
        if self._owns_gateway and self._gateway is not None:
            await self._gateway.close()

    async def analyze(
        self,
        assets: Sequence[EnhancedAsset],
        risk_score: int,
        risk_level: RiskLevel | str,
    ) -> AIAnalysisResult:
        if self._gateway is None:
            return self._fallback(assets, risk_score, risk_level, reason=None)

        logger.debug("Narrative: prompting for %d assets", len(assets))
        prompt = build_prompt(assets, risk_score, risk_level)

        try:
            raw = await self._request_with_retry(self._gateway, prompt)
            result = self._parse(raw)
        except RiskGaugeError as e:
            return self._fallback(assets, risk_score, risk_level, reason=e)

        logger.info("Narrative source: model (%s)", self._gateway.model)
        return result

    async def _request_with_retry(self, gateway: ModelGateway, prompt: str) -> str:
        """Return the raw model content or raise ModelRequestFailed."""
        for attempt in range(1, self._max_retries + 1):
            logger.debug("Narrative: awaiting model, attempt %d/%d", attempt, self._max_retries)
            completion = await gateway.complete(prompt, system_prompt=SYSTEM_PROMPT)

            if completion.status is CompletionStatus.OK:
                return completion.content

            if completion.status is CompletionStatus.RATE_LIMITED:
                limited = ModelRateLimited(completion.error)
                if attempt < self._max_retries:
                    wait = self._base_delay * 2**attempt
                    logger.warning(
                        "Model rate limited on attempt %d: %s. Retrying in %.1fs",
                        attempt,
                        limited,
                        wait,
                    )
                    await asyncio.sleep(wait)
                    continue
                raise ModelRequestFailed(
                    f"rate limited after {self._max_retries} attempts: {limited}"
                )

            raise ModelRequestFailed(completion.error)

        raise ModelRequestFailed(f"no response after {self._max_retries} attempts")

    @staticmethod
    def _parse(raw: str) -> AIAnalysisResult:
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ModelResponseMalformed(f"invalid JSON: {e}") from e
        return AIAnalysisResult.from_payload(data, source="model")

    @staticmethod
    def _fallback(
        assets: Sequence[EnhancedAsset],
        risk_score: int,
        risk_level: RiskLevel | str,
        reason: RiskGaugeError | None,
    ) -> AIAnalysisResult:
        if reason is not None:
            logger.warning(
                "Model narrative unavailable (%s: %s), using fallback",
                type(reason).__name__,
                reason,
            )
        logger.info("Narrative source: fallback")
        return fallback_analysis(assets, risk_score, risk_level)

    @classmethod
    def from_config(cls, config: AppConfig, gateway: ModelGateway | None = None) -> NarrativeService:
        owns_gateway = gateway is None
        if gateway is None:
            gateway = ModelGateway.from_config(config)
        return cls(
            gateway,
            owns_gateway=owns_gateway and gateway is not None,
            max_retries=config.model_max_retries,
            base_delay=config.model_base_delay_seconds,
        )
