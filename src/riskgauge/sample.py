"""Demo portfolio used by the /sample endpoint."""

from __future__ import annotations

from riskgauge.models.asset import Asset, AssetType

SAMPLE_CLIENT = "Mario Rossi"

SAMPLE_PORTFOLIO: tuple[Asset, ...] = (
    Asset(
        name="Swiss Government Bond 2030",
        value=15000,
        type=AssetType.GOVERNMENT_BOND,
        category="Fixed Income",
        volatility=3.2,
        expected_return=2.1,
        max_drawdown=2.8,
    ),
    Asset(
        name="Microsoft Corporate Bond 2026",
        value=12000,
        type=AssetType.CORPORATE_BOND,
        category="Fixed Income",
        volatility=4.8,
        expected_return=3.5,
        max_drawdown=4.2,
    ),
    Asset(
        name="NVIDIA (NVDA)",
        value=28000,
        type=AssetType.STOCK,
        category="Technology",
        volatility=35.6,
        expected_return=15.2,
        max_drawdown=28.5,
    ),
    Asset(
        name="iShares Global Clean Energy ETF",
        value=10000,
        type=AssetType.STOCK,
        category="Clean Energy",
        volatility=28.4,
        expected_return=11.5,
        max_drawdown=22.3,
    ),
    Asset(
        name="Physical Silver (XAG)",
        value=9000,
        type=AssetType.COMMODITY,
        category="Precious Metals",
        volatility=22.3,
        expected_return=6.8,
        max_drawdown=18.7,
    ),
)
