from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class AssetType(StrEnum):
    GOVERNMENT_BOND = "Government Bond"
    CORPORATE_BOND = "Corporate Bond"
    STOCK = "Stock"
    COMMODITY = "Commodity"
    OTHER = "Other"

    @classmethod
    def parse(cls, label: str | AssetType) -> AssetType:
        """Map a free-text type label to an AssetType, defaulting to OTHER.

        Accepts both the display form ("Government Bond") and the compact
        form ("GovernmentBond"), case-insensitively.
        """
        if isinstance(label, AssetType):
            return label
        key = str(label).replace(" ", "").replace("_", "").lower()
        for member in cls:
            if member.value.replace(" ", "").lower() == key:
                return member
        return cls.OTHER


class Suggestion(StrEnum):
    REBALANCE = "Consider rebalancing"
    MONITOR_VOLATILITY = "Monitor volatility"
    REVIEW_YIELD = "Review yield profile"
    MAINTAIN = "Maintain position"
    HOLD = "Hold and monitor"


@dataclass(frozen=True)
class Asset:
    name: str
    value: float
    type: AssetType
    category: str
    volatility: float  # annualized %
    expected_return: float  # %, may be negative
    max_drawdown: float | None = None  # informational only

    @classmethod
    def from_dict(cls, data: dict) -> Asset:
        """Build an Asset from its camelCase wire form."""
        max_dd = data.get("maxDrawdown")
        return cls(
            name=str(data["name"]),
            value=float(data["value"]),
            type=AssetType.parse(data.get("type", AssetType.OTHER)),
            category=str(data.get("category", "")),
            volatility=float(data["volatility"]),
            expected_return=float(data["expectedReturn"]),
            max_drawdown=float(max_dd) if max_dd is not None else None,
        )

    def to_dict(self) -> dict:
        out = {
            "name": self.name,
            "value": self.value,
            "type": self.type.value,
            "category": self.category,
            "volatility": self.volatility,
            "expectedReturn": self.expected_return,
        }
        if self.max_drawdown is not None:
            out["maxDrawdown"] = self.max_drawdown
        return out


@dataclass(frozen=True)
class EnhancedAsset(Asset):
    """An Asset annotated with its portfolio weight and rule-based commentary."""

    percentage: float = 0.0
    insight: str = ""
    suggestion: Suggestion = Suggestion.HOLD

    @classmethod
    def from_dict(cls, data: dict) -> EnhancedAsset:
        base = Asset.from_dict(data)
        return cls(
            name=base.name,
            value=base.value,
            type=base.type,
            category=base.category,
            volatility=base.volatility,
            expected_return=base.expected_return,
            max_drawdown=base.max_drawdown,
            percentage=float(data["percentage"]),
            insight=str(data.get("insight", "")),
            suggestion=Suggestion(data.get("suggestion", Suggestion.HOLD.value)),
        )

    def to_dict(self) -> dict:
        out = super().to_dict()
        out["percentage"] = self.percentage
        out["insight"] = self.insight
        out["suggestion"] = self.suggestion.value
        return out
