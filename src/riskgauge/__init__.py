"""Portfolio risk scoring engine with model-written or rule-based narratives."""

__version__ = "0.1.0"
