"""Satisfaction: score change, churn reduction and what retention is worth.

LTV is average value / churn rate; with a churn rate of 0 it is reported
as 0 so the value stays finite downstream.
"""

from __future__ import annotations

from typing import Any, Optional

from indicator_metrics.config.settings import get_settings
from indicator_metrics.kpi_library.financial import payback_months, roi_percentage, safe_ratio
from indicator_metrics.kpi_library.registry import register_calculator
from indicator_metrics.models.enums import IndicatorCategory
from indicator_metrics.models.metrics import SatisfactionMetrics
from indicator_metrics.normalization import as_indicator, to_number


def lifetime_value(average_value: float, churn_rate_pct: float) -> float:
    """LTV = average value / (churn% / 100), 0 when churn is not positive"""
    if churn_rate_pct <= 0:
        return 0.0
    return safe_ratio(average_value, churn_rate_pct / 100)


@register_calculator(
    IndicatorCategory.SATISFACTION,
    description=(
        "Customer retention, support savings and revenue from higher satisfaction. "
        "Formula: customers x churn_reduction% x average_value x 12 + support savings x 12 "
        "+ revenue increase."
    ),
)
def calc_satisfaction(indicator: Any) -> Optional[SatisfactionMetrics]:
    record = as_indicator(indicator)
    if record.category is not IndicatorCategory.SATISFACTION:
        return None
    b, p = record.baseline, record.post_change

    score_before = to_number(b.get("scoreAtual"))
    score_after = to_number(p.get("scoreComIA"))
    churn_before = to_number(b.get("taxaChurnAtual"))
    churn_after = to_number(p.get("taxaChurnComIA"))
    churn_reduction = churn_before - churn_after

    customers_before = to_number(b.get("numeroClientes"))
    value_before = to_number(b.get("valorMedioPorCliente"))
    customers_after = to_number(p.get("numeroClientesEsperado"))
    value_after = to_number(p.get("valorMedioPorClienteComIA"))

    retained_customers = customers_before * churn_reduction / 100
    retention_value = retained_customers * value_before * 12

    ticket_cost = to_number(p.get("custoMedioTicket"), default=get_settings().support_ticket_cost)
    tickets_avoided = to_number(b.get("ticketMedioSuporte")) - to_number(p.get("ticketMedioSuporteComIA"))
    support_savings = tickets_avoided * ticket_cost

    revenue_before = customers_before * value_before * 12
    revenue_after = customers_after * value_after * 12
    revenue_increase = revenue_after - revenue_before

    ltv_before = lifetime_value(value_before, churn_before)
    ltv_after = lifetime_value(value_after, churn_after)

    annual_benefit = retention_value + support_savings * 12 + revenue_increase
    cost = record.implementation_cost
    score_type = b.get("tipoScore")

    return SatisfactionMetrics(
        indicator_id=record.id,
        name=record.name,
        category=record.category,
        score_type=score_type if isinstance(score_type, str) else "",
        score_before=score_before,
        score_after=score_after,
        delta_score=score_after - score_before,
        churn_before=churn_before,
        churn_after=churn_after,
        churn_reduction=churn_reduction,
        retained_customers=retained_customers,
        retention_value=retention_value,
        support_savings=support_savings,
        revenue_before=revenue_before,
        revenue_after=revenue_after,
        revenue_increase=revenue_increase,
        ltv_before=ltv_before,
        ltv_after=ltv_after,
        ltv_delta=ltv_after - ltv_before,
        annual_benefit=annual_benefit,
        implementation_cost=cost,
        roi=roi_percentage(annual_benefit, cost),
        payback_months=payback_months(cost, annual_benefit / 12),
    )
