"""Guarded ratio helpers shared by the category calculators.

Every ratio returns 0 when its denominator is zero or negative, so no NaN
or Infinity leaves the engine.
"""

from __future__ import annotations


def safe_ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, or 0 when the denominator is 0."""
    if denominator == 0:
        return 0.0
    return numerator / denominator


def percent_change(before: float, after: float) -> float:
    """(after - before) / before x 100, or 0 when ``before`` is 0."""
    return safe_ratio(after - before, before) * 100


def roi_percentage(annual_benefit: float, implementation_cost: float) -> float:
    """ROI = (benefit - cost) / cost x 100; 0 without a positive cost."""
    if implementation_cost <= 0:
        return 0.0
    return (annual_benefit - implementation_cost) / implementation_cost * 100


def payback_months(implementation_cost: float, monthly_benefit: float) -> float:
    """Months of benefit needed to repay the cost; 0 unless both are positive."""
    if implementation_cost <= 0 or monthly_benefit <= 0:
        return 0.0
    return implementation_cost / monthly_benefit


def benefit_cost_ratio(annual_benefit: float, implementation_cost: float) -> float:
    if implementation_cost <= 0:
        return 0.0
    return annual_benefit / implementation_cost
