"""Portfolio analysis facade: weights, scores, level and commentary in one call.

For a list of positions, runs:
  1. Concentration + volatility sub-scores
  2. Weighted aggregate score and risk level
  3. Per-asset insight/suggestion and the portfolio comment
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from riskgauge.config import DEFAULT_SCORING, ScoringConfig
from riskgauge.models.asset import Asset, EnhancedAsset
from riskgauge.models.metrics import PortfolioMetrics
from riskgauge.scoring.aggregate import risk_level, risk_score
from riskgauge.scoring.insights import generate_comment, generate_insight, generate_suggestion
from riskgauge.scoring.primitives import concentration_score, portfolio_total, volatility_score

logger = logging.getLogger(__name__)


class PortfolioAnalyzer:
    """Score a portfolio and annotate its positions."""

    def __init__(
        self,
        scoring: ScoringConfig = DEFAULT_SCORING,
        delay_seconds: float = 1.5,
    ) -> None:
        self._scoring = scoring
        self._delay = delay_seconds

    async def analyze(self, assets: Sequence[Asset]) -> PortfolioMetrics:
        """Analyze a portfolio after the simulated remote-computation delay.

        Raises:
            InvalidPortfolio: empty list, negative values or non-positive total.
        """
        # Validate before sleeping so bad input fails fast.
        portfolio_total(assets)
        if self._delay > 0:
            await asyncio.sleep(self._delay)
        return self.analyze_sync(assets)

    def analyze_sync(self, assets: Sequence[Asset]) -> PortfolioMetrics:
        total = portfolio_total(assets)
        concentration = concentration_score(assets, self._scoring)
        volatility = volatility_score(assets, self._scoring)
        score = risk_score(concentration, volatility, self._scoring)
        level = risk_level(score, self._scoring)

        enhanced = []
        for asset in assets:
            pct = asset.value / total * 100
            enhanced.append(
                EnhancedAsset(
                    name=asset.name,
                    value=asset.value,
                    type=asset.type,
                    category=asset.category,
                    volatility=asset.volatility,
                    expected_return=asset.expected_return,
                    max_drawdown=asset.max_drawdown,
                    percentage=pct,
                    insight=generate_insight(asset, self._scoring),
                    suggestion=generate_suggestion(asset, pct),
                )
            )

        logger.info(
            "Analyzed %d assets: total=%.2f concentration=%.1f volatility=%.1f score=%d (%s)",
            len(assets),
            total,
            concentration,
            volatility,
            score,
            level,
        )

        return PortfolioMetrics(
            total_value=total,
            risk_score=score,
            risk_level=level,
            comment=generate_comment(score, assets, self._scoring, concentration=concentration),
            assets=tuple(enhanced),
            concentration_score=concentration,
            volatility_score=volatility,
        )
