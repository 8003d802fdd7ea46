"""Immutable per-category metrics objects returned by the calculators."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional

from .enums import IndicatorCategory


@dataclass(frozen=True)
class _MetricsBase:
    indicator_id: Optional[str]
    name: str
    category: IndicatorCategory

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["category"] = self.category.value
        return data


@dataclass(frozen=True)
class PersonProductivity:
    """Hours and cost for one person, at actual and at desired frequency."""

    person: str
    matched: bool
    hh_before: float
    hh_after: float
    hh_saved: float
    cost_before: float
    cost_after: float
    cost_saved: float
    desired_hh_before: float
    desired_hh_after: float
    desired_hh_saved: float
    desired_cost_before: float
    desired_cost_after: float
    desired_cost_saved: float


@dataclass(frozen=True)
class ProductivityMetrics(_MetricsBase):
    people: tuple[PersonProductivity, ...]
    total_hours_saved: float
    total_cost_saved: float
    total_desired_hours_saved: float
    total_desired_cost_saved: float
    monthly_savings: float
    annual_savings: float
    implementation_cost: float
    roi: float
    payback_months: float


@dataclass(frozen=True)
class CriterionComparison:
    criterion: str
    before: str
    after: str


@dataclass(frozen=True)
class AnalyticalCapacityMetrics(_MetricsBase):
    analyses_before: float
    analyses_after: float
    additional_analyses: float
    capacity_increase_pct: float
    monthly_value_before: float
    monthly_value_after: float
    monthly_value_increase: float
    annual_value_increase: float
    implementation_cost: float
    roi: float
    payback_months: float
    criteria: tuple[CriterionComparison, ...] = ()


@dataclass(frozen=True)
class RevenueIncreaseMetrics(_MetricsBase):
    revenue_before: float
    revenue_after: float
    delta_revenue: float


@dataclass(frozen=True)
class MarginImprovementMetrics(_MetricsBase):
    margin_before: float
    margin_after: float
    delta_margin: float
    gross_profit_before: float
    gross_profit_after: float
    delta_margin_currency: float
    volume_before: float
    volume_after: float
    monthly_savings: float
    annual_savings: float
    annual_profit_impact: float
    implementation_cost: float
    roi: float
    payback_months: float


@dataclass(frozen=True)
class RiskReductionMetrics(_MetricsBase):
    risk_type: str
    probability_before: float
    probability_after: float
    probability_reduction: float
    exposure_before: float
    exposure_after: float
    risk_value_avoided: float
    mitigation_savings: float
    annual_benefit: float
    implementation_cost: float
    cost_vs_benefit: float
    roi: float
    payback_months: float


@dataclass(frozen=True)
class DecisionQualityMetrics(_MetricsBase):
    accuracy_before: float
    accuracy_after: float
    accuracy_improvement: float
    decisions_before: float
    decisions_after: float
    wrong_decisions_before: float
    wrong_decisions_after: float
    error_savings: float
    hours_saved: float
    time_value_saved: float
    monthly_benefit: float
    annual_benefit: float
    implementation_cost: float
    roi: float
    payback_months: float


@dataclass(frozen=True)
class SpeedMetrics(_MetricsBase):
    delivery_hours_before: float
    delivery_hours_after: float
    delivery_time_reduction_pct: float
    deliveries_before: float
    deliveries_after: float
    capacity_increase: float
    delay_savings: float
    hours_saved: float
    time_value_saved: float
    productivity_gain_pct: float
    monthly_benefit: float
    annual_benefit: float
    implementation_cost: float
    roi: float
    payback_months: float


@dataclass(frozen=True)
class SatisfactionMetrics(_MetricsBase):
    score_type: str
    score_before: float
    score_after: float
    delta_score: float
    churn_before: float
    churn_after: float
    churn_reduction: float
    retained_customers: float
    retention_value: float
    support_savings: float
    revenue_before: float
    revenue_after: float
    revenue_increase: float
    ltv_before: float
    ltv_after: float
    ltv_delta: float
    annual_benefit: float
    implementation_cost: float
    roi: float
    payback_months: float
