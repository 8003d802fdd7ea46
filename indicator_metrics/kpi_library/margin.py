"""Margin Improvement: gross margin and gross profit, before vs after.

Monthly savings are the change in gross profit, so a cost cut and a
revenue gain count the same. Negative savings (a worse margin) are kept.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from indicator_metrics.kpi_library.financial import payback_months, roi_percentage, safe_ratio
from indicator_metrics.kpi_library.registry import register_calculator
from indicator_metrics.models.enums import IndicatorCategory
from indicator_metrics.models.metrics import MarginImprovementMetrics
from indicator_metrics.normalization import as_indicator, has_valid_value, to_number


def gross_margin(snapshot: Mapping[str, Any], margin_key: str, revenue: float, cost: float) -> float:
    """Use the stated margin (%) when present, otherwise derive it."""
    stated = snapshot.get(margin_key)
    if has_valid_value(stated):
        return to_number(stated)
    return safe_ratio(revenue - cost, revenue) * 100


@register_calculator(
    IndicatorCategory.MARGIN_IMPROVEMENT,
    description=(
        "Change in gross margin and the profit it represents. "
        "Formula: (revenue_after - cost_after) - (revenue_before - cost_before)."
    ),
)
def calc_margin_improvement(indicator: Any) -> Optional[MarginImprovementMetrics]:
    record = as_indicator(indicator)
    if record.category is not IndicatorCategory.MARGIN_IMPROVEMENT:
        return None
    b, p = record.baseline, record.post_change

    revenue_before = to_number(b.get("receitaBrutaMensal"))
    cost_before = to_number(b.get("custoTotalMensal"))
    revenue_after = to_number(p.get("receitaBrutaMensalEstimada"))
    cost_after = to_number(p.get("custoTotalMensalEstimado"))

    margin_before = gross_margin(b, "margemBrutaAtual", revenue_before, cost_before)
    margin_after = gross_margin(p, "margemBrutaEstimada", revenue_after, cost_after)
    delta_margin = margin_after - margin_before

    profit_before = revenue_before - cost_before
    profit_after = revenue_after - cost_after
    delta_currency = profit_after - profit_before
    annual_savings = delta_currency * 12
    implementation_cost = record.implementation_cost

    return MarginImprovementMetrics(
        indicator_id=record.id,
        name=record.name,
        category=record.category,
        margin_before=margin_before,
        margin_after=margin_after,
        delta_margin=delta_margin,
        gross_profit_before=profit_before,
        gross_profit_after=profit_after,
        delta_margin_currency=delta_currency,
        volume_before=to_number(b.get("volumeTransacoes")),
        volume_after=to_number(p.get("volumeTransacoesEstimado")),
        monthly_savings=delta_currency,
        annual_savings=annual_savings,
        annual_profit_impact=delta_margin / 100 * revenue_after * 12,
        implementation_cost=implementation_cost,
        roi=roi_percentage(annual_savings, implementation_cost),
        payback_months=payback_months(implementation_cost, delta_currency),
    )
