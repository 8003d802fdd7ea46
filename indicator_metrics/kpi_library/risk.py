"""Risk Reduction: expected loss avoided plus cheaper mitigation."""

from __future__ import annotations

from typing import Any, Optional

from indicator_metrics.kpi_library.financial import (
    benefit_cost_ratio,
    payback_months,
    roi_percentage,
)
from indicator_metrics.kpi_library.registry import register_calculator
from indicator_metrics.models.enums import IndicatorCategory
from indicator_metrics.models.metrics import RiskReductionMetrics
from indicator_metrics.normalization import as_indicator, to_number


def exposure(probability_pct: float, financial_impact: float) -> float:
    """Exposure = probability% / 100 x financial impact"""
    return probability_pct / 100 * financial_impact


@register_calculator(
    IndicatorCategory.RISK_REDUCTION,
    description=(
        "Risk exposure avoided and mitigation savings. "
        "Formula: mitigation_savings x 12 + (exposure_before - exposure_after)."
    ),
)
def calc_risk_reduction(indicator: Any) -> Optional[RiskReductionMetrics]:
    record = as_indicator(indicator)
    if record.category is not IndicatorCategory.RISK_REDUCTION:
        return None
    b, p = record.baseline, record.post_change

    probability_before = to_number(b.get("probabilidadeAtual"))
    probability_after = to_number(p.get("probabilidadeComIA"))
    exposure_before = exposure(probability_before, to_number(b.get("impactoFinanceiro")))
    exposure_after = exposure(probability_after, to_number(p.get("impactoFinanceiroReduzido")))
    risk_value_avoided = exposure_before - exposure_after

    mitigation_savings = to_number(b.get("custoMitigacaoAtual")) - to_number(p.get("custoMitigacaoComIA"))
    annual_benefit = mitigation_savings * 12 + risk_value_avoided
    cost = record.implementation_cost
    risk_type = b.get("tipoRisco")

    return RiskReductionMetrics(
        indicator_id=record.id,
        name=record.name,
        category=record.category,
        risk_type=risk_type if isinstance(risk_type, str) else "",
        probability_before=probability_before,
        probability_after=probability_after,
        probability_reduction=probability_before - probability_after,
        exposure_before=exposure_before,
        exposure_after=exposure_after,
        risk_value_avoided=risk_value_avoided,
        mitigation_savings=mitigation_savings,
        annual_benefit=annual_benefit,
        implementation_cost=cost,
        cost_vs_benefit=benefit_cost_ratio(annual_benefit, cost),
        roi=roi_percentage(annual_benefit, cost),
        payback_months=payback_months(cost, annual_benefit / 12),
    )
