from __future__ import annotations

import asyncio
import time

import pytest

from riskgauge.analyzer import PortfolioAnalyzer
from riskgauge.errors import InvalidPortfolio
from riskgauge.models.asset import Asset, AssetType, EnhancedAsset, Suggestion
from riskgauge.models.metrics import PortfolioMetrics, RiskLevel
from riskgauge.sample import SAMPLE_PORTFOLIO


def _asset(name: str, value: float, volatility: float, expected_return: float = 5.0,
           type: AssetType = AssetType.STOCK) -> Asset:
    return Asset(
        name=name,
        value=value,
        type=type,
        category="Test",
        volatility=volatility,
        expected_return=expected_return,
    )


@pytest.fixture
def analyzer() -> PortfolioAnalyzer:
    return PortfolioAnalyzer(delay_seconds=0)


class TestAnalyzeSync:
    def test_two_asset_scenario(self, analyzer: PortfolioAnalyzer) -> None:
        assets = [
            _asset("Bond", 15000, 3, type=AssetType.GOVERNMENT_BOND),
            _asset("Growth", 85000, 35),
        ]
        metrics = analyzer.analyze_sync(assets)

        assert metrics.total_value == 100000
        assert metrics.concentration_score == 100
        assert metrics.volatility_score == 100
        assert metrics.risk_score == 100
        assert metrics.risk_level is RiskLevel.HIGH
        assert metrics.assets[0].percentage == pytest.approx(15.0)
        assert metrics.assets[1].percentage == pytest.approx(85.0)

    def test_single_asset_scenario(self, analyzer: PortfolioAnalyzer) -> None:
        metrics = analyzer.analyze_sync([_asset("Solo", 10000, 5, expected_return=4)])

        assert metrics.assets[0].percentage == pytest.approx(100.0)
        assert metrics.concentration_score == 100
        assert metrics.volatility_score == pytest.approx(37.5)
        assert metrics.risk_score == 63
        assert metrics.risk_level is RiskLevel.MODERATE_HIGH
        assert metrics.assets[0].suggestion is Suggestion.REBALANCE

    def test_sample_portfolio(self, analyzer: PortfolioAnalyzer) -> None:
        metrics = analyzer.analyze_sync(SAMPLE_PORTFOLIO)

        assert metrics.total_value == 74000
        assert metrics.concentration_score == pytest.approx(62.162, abs=1e-3)
        assert metrics.volatility_score == 100
        assert metrics.risk_score == 85
        assert metrics.risk_level is RiskLevel.HIGH
        assert metrics.comment == (
            "Portfolio Review: Portfolio shows elevated risk metrics. "
            "Consider broader diversification. Regular monitoring recommended."
        )
        suggestions = [a.suggestion for a in metrics.assets]
        assert suggestions == [
            Suggestion.HOLD,
            Suggestion.MAINTAIN,
            Suggestion.REBALANCE,
            Suggestion.HOLD,
            Suggestion.HOLD,
        ]
        assert metrics.assets[2].insight == "Growth-oriented position with managed risk"

    def test_preserves_order_and_fields(self, analyzer: PortfolioAnalyzer) -> None:
        assets = [_asset(f"A{i}", 1000 * (i + 1), 4 * i) for i in range(6)]
        metrics = analyzer.analyze_sync(assets)

        assert [a.name for a in metrics.assets] == [a.name for a in assets]
        for original, enhanced in zip(assets, metrics.assets):
            assert isinstance(enhanced, EnhancedAsset)
            assert enhanced.value == original.value
            assert enhanced.volatility == original.volatility
            assert enhanced.expected_return == original.expected_return
            assert enhanced.insight

    def test_percentages_sum_to_100(self, analyzer: PortfolioAnalyzer) -> None:
        assets = [_asset(f"A{i}", v, 10) for i, v in enumerate([0.01, 3, 777.77, 12345.6, 1e7])]
        metrics = analyzer.analyze_sync(assets)
        assert sum(a.percentage for a in metrics.assets) == pytest.approx(100.0, abs=1e-6)

    def test_zero_value_position_allowed(self, analyzer: PortfolioAnalyzer) -> None:
        metrics = analyzer.analyze_sync([_asset("Empty", 0, 10), _asset("Full", 500, 10)])
        assert metrics.assets[0].percentage == 0
        assert metrics.assets[1].percentage == pytest.approx(100.0)

    def test_empty_rejected(self, analyzer: PortfolioAnalyzer) -> None:
        with pytest.raises(InvalidPortfolio):
            analyzer.analyze_sync([])

    def test_zero_total_rejected(self, analyzer: PortfolioAnalyzer) -> None:
        with pytest.raises(InvalidPortfolio):
            analyzer.analyze_sync([_asset("A", 0, 10), _asset("B", 0, 10)])

    def test_overflowing_total_rejected(self, analyzer: PortfolioAnalyzer) -> None:
        with pytest.raises(InvalidPortfolio):
            analyzer.analyze_sync([_asset("A", 1e308, 10), _asset("B", 1e308, 10)])

    def test_idempotent(self, analyzer: PortfolioAnalyzer) -> None:
        assert analyzer.analyze_sync(SAMPLE_PORTFOLIO) == analyzer.analyze_sync(SAMPLE_PORTFOLIO)

    def test_result_is_frozen(self, analyzer: PortfolioAnalyzer) -> None:
        metrics = analyzer.analyze_sync(SAMPLE_PORTFOLIO)
        try:
            metrics.risk_score = 0  # type: ignore[misc]
            assert False, "Should be frozen"
        except AttributeError:
            pass


class TestAnalyzeAsync:
    def test_returns_metrics(self) -> None:
        async def _run():
            analyzer = PortfolioAnalyzer(delay_seconds=0.01)
            metrics = await analyzer.analyze(SAMPLE_PORTFOLIO)
            assert isinstance(metrics, PortfolioMetrics)
            assert metrics.risk_score == 85
        asyncio.run(_run())

    def test_invalid_portfolio_fails_before_delay(self) -> None:
        async def _run():
            analyzer = PortfolioAnalyzer(delay_seconds=30)
            with pytest.raises(InvalidPortfolio):
                await asyncio.wait_for(analyzer.analyze([]), timeout=1)
        asyncio.run(_run())

    def test_concurrent_calls_not_serialized(self) -> None:
        async def _run():
            analyzer = PortfolioAnalyzer(delay_seconds=0.3)
            start = time.monotonic()
            results = await asyncio.gather(*(analyzer.analyze(SAMPLE_PORTFOLIO) for _ in range(5)))
            elapsed = time.monotonic() - start
            assert len(results) == 5
            # Five sequential delays would take 1.5s
            assert elapsed < 1.0
        asyncio.run(_run())
