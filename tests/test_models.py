from __future__ import annotations

import json

import pytest

from riskgauge.analyzer import PortfolioAnalyzer
from riskgauge.errors import ModelResponseMalformed
from riskgauge.models import (
    AIAnalysisResult,
    Asset,
    AssetType,
    EnhancedAsset,
    RiskLevel,
    Suggestion,
)
from riskgauge.sample import SAMPLE_PORTFOLIO


def _payload(**overrides) -> dict:
    data = {
        "personalizedInsight": "Balanced growth tilt.",
        "riskAnalysis": "Equity concentration in one name.",
        "recommendations": ["Trim NVDA", "Add duration", "Keep silver hedge"],
        "marketContext": "Rates are falling.",
    }
    data.update(overrides)
    return data


class TestAssetType:
    def test_parse_display_label(self) -> None:
        assert AssetType.parse("Government Bond") is AssetType.GOVERNMENT_BOND

    def test_parse_compact_label(self) -> None:
        assert AssetType.parse("CorporateBond") is AssetType.CORPORATE_BOND
        assert AssetType.parse("stock") is AssetType.STOCK

    def test_parse_unknown_defaults_to_other(self) -> None:
        assert AssetType.parse("Crypto") is AssetType.OTHER
        assert AssetType.parse("") is AssetType.OTHER

    def test_parse_passthrough(self) -> None:
        assert AssetType.parse(AssetType.COMMODITY) is AssetType.COMMODITY


class TestAsset:
    def test_from_dict(self) -> None:
        asset = Asset.from_dict({
            "name": "Physical Silver (XAG)",
            "value": 9000,
            "type": "Commodity",
            "category": "Precious Metals",
            "volatility": 22.3,
            "expectedReturn": 6.8,
        })
        assert asset.type is AssetType.COMMODITY
        assert asset.expected_return == 6.8
        assert asset.max_drawdown is None

    def test_round_trip_through_json(self) -> None:
        for asset in SAMPLE_PORTFOLIO:
            wire = json.loads(json.dumps(asset.to_dict()))
            assert Asset.from_dict(wire) == asset

    def test_frozen(self) -> None:
        asset = SAMPLE_PORTFOLIO[0]
        try:
            asset.value = 1  # type: ignore[misc]
            assert False, "Should be frozen"
        except AttributeError:
            pass


class TestEnhancedAsset:
    def test_round_trip_through_json(self) -> None:
        metrics = PortfolioAnalyzer(delay_seconds=0).analyze_sync(SAMPLE_PORTFOLIO)
        for asset in metrics.assets:
            wire = json.loads(json.dumps(asset.to_dict()))
            assert EnhancedAsset.from_dict(wire) == asset

    def test_unknown_suggestion_rejected(self) -> None:
        data = SAMPLE_PORTFOLIO[0].to_dict()
        data.update(percentage=20.0, suggestion="Buy the dip")
        with pytest.raises(ValueError):
            EnhancedAsset.from_dict(data)


class TestPortfolioMetrics:
    def test_to_dict_uses_wire_names(self) -> None:
        metrics = PortfolioAnalyzer(delay_seconds=0).analyze_sync(SAMPLE_PORTFOLIO)
        data = json.loads(json.dumps(metrics.to_dict()))
        assert data["totalValue"] == 74000
        assert data["riskScore"] == 85
        assert data["riskLevel"] == "High"
        assert data["comment"] == metrics.comment
        assert len(data["assets"]) == 5
        first = data["assets"][0]
        assert first["expectedReturn"] == 2.1
        assert first["suggestion"] == Suggestion.HOLD.value
        assert first["percentage"] == pytest.approx(20.27, abs=0.01)

    def test_risk_level_values(self) -> None:
        assert [lvl.value for lvl in RiskLevel] == ["Low", "Moderate", "Moderate-High", "High"]


class TestAIAnalysisResult:
    def test_from_payload(self) -> None:
        result = AIAnalysisResult.from_payload(_payload())
        assert result.personalized_insight == "Balanced growth tilt."
        assert result.recommendations == ("Trim NVDA", "Add duration", "Keep silver hedge")
        assert result.source == "model"

    def test_to_dict_round_trip(self) -> None:
        result = AIAnalysisResult.from_payload(_payload())
        assert AIAnalysisResult.from_payload(result.to_dict()) == result

    def test_missing_key(self) -> None:
        data = _payload()
        del data["marketContext"]
        with pytest.raises(ModelResponseMalformed, match="marketContext"):
            AIAnalysisResult.from_payload(data)

    def test_wrong_recommendation_count(self) -> None:
        with pytest.raises(ModelResponseMalformed):
            AIAnalysisResult.from_payload(_payload(recommendations=["only", "two"]))
        with pytest.raises(ModelResponseMalformed):
            AIAnalysisResult.from_payload(_payload(recommendations=["a", "b", "c", "d"]))

    def test_recommendations_not_a_list(self) -> None:
        with pytest.raises(ModelResponseMalformed):
            AIAnalysisResult.from_payload(_payload(recommendations="do things"))

    def test_non_string_field(self) -> None:
        with pytest.raises(ModelResponseMalformed):
            AIAnalysisResult.from_payload(_payload(riskAnalysis={"text": "x"}))

    def test_empty_string_field(self) -> None:
        with pytest.raises(ModelResponseMalformed):
            AIAnalysisResult.from_payload(_payload(personalizedInsight="  "))

    def test_not_an_object(self) -> None:
        with pytest.raises(ModelResponseMalformed):
            AIAnalysisResult.from_payload(["personalizedInsight"])
