"""Speed: shorter delivery time and more deliveries per month."""

from __future__ import annotations

from typing import Any, Optional

from indicator_metrics.kpi_library.financial import (
    payback_months,
    percent_change,
    roi_percentage,
    safe_ratio,
)
from indicator_metrics.kpi_library.registry import register_calculator
from indicator_metrics.models.enums import IndicatorCategory
from indicator_metrics.models.metrics import SpeedMetrics
from indicator_metrics.normalization import as_indicator, count_period_factor, to_hours, to_number


@register_calculator(
    IndicatorCategory.SPEED,
    description=(
        "Delivery time reduction, extra capacity and delay savings. "
        "Formula: (hours_before - hours_after) / hours_before x 100."
    ),
)
def calc_speed(indicator: Any) -> Optional[SpeedMetrics]:
    record = as_indicator(indicator)
    if record.category is not IndicatorCategory.SPEED:
        return None
    b, p = record.baseline, record.post_change

    deliveries_before = to_number(b.get("numeroEntregasPeriodo")) * count_period_factor(
        b.get("periodoEntregas")
    )
    deliveries_after = to_number(p.get("numeroEntregasPeriodoComIA")) * count_period_factor(
        p.get("periodoEntregasComIA")
    )
    delivery_hours_before = to_hours(b.get("tempoMedioEntregaAtual"), b.get("unidadeTempoEntrega"))
    delivery_hours_after = to_hours(p.get("tempoMedioEntregaComIA"), p.get("unidadeTempoEntregaComIA"))

    delay_savings = (
        to_number(b.get("custoPorAtraso")) - to_number(p.get("custoPorAtrasoReduzido"))
    ) * deliveries_after

    work_hours_before = (
        deliveries_before
        * to_number(b.get("tempoTrabalhoPorEntrega"))
        * to_number(b.get("pessoasEnvolvidas"))
    )
    work_hours_after = (
        deliveries_after
        * to_number(p.get("tempoTrabalhoPorEntregaComIA"))
        * to_number(p.get("pessoasEnvolvidasComIA"))
    )
    hours_saved = work_hours_before - work_hours_after
    time_value_saved = hours_saved * to_number(b.get("valorHoraMedio"))

    monthly_benefit = delay_savings + time_value_saved
    annual_benefit = monthly_benefit * 12
    cost = record.implementation_cost

    return SpeedMetrics(
        indicator_id=record.id,
        name=record.name,
        category=record.category,
        delivery_hours_before=delivery_hours_before,
        delivery_hours_after=delivery_hours_after,
        delivery_time_reduction_pct=safe_ratio(
            delivery_hours_before - delivery_hours_after, delivery_hours_before
        )
        * 100,
        deliveries_before=deliveries_before,
        deliveries_after=deliveries_after,
        capacity_increase=deliveries_after - deliveries_before,
        delay_savings=delay_savings,
        hours_saved=hours_saved,
        time_value_saved=time_value_saved,
        productivity_gain_pct=percent_change(deliveries_before, deliveries_after),
        monthly_benefit=monthly_benefit,
        annual_benefit=annual_benefit,
        implementation_cost=cost,
        roi=roi_percentage(annual_benefit, cost),
        payback_months=payback_months(cost, monthly_benefit),
    )
