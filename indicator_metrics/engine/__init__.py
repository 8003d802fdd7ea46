from .dispatcher import MetricsEngine, classify_indicators, empty_results

__all__ = ["MetricsEngine", "classify_indicators", "empty_results"]
