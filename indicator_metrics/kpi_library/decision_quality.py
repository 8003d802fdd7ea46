"""Decision Quality: fewer wrong decisions and less time spent deciding.

Benefits are reported as computed. A drop in accuracy after the change
shows up as a negative benefit rather than being clamped at zero.
"""

from __future__ import annotations

from typing import Any, Optional

from indicator_metrics.kpi_library.financial import payback_months, roi_percentage
from indicator_metrics.kpi_library.registry import register_calculator
from indicator_metrics.models.enums import IndicatorCategory
from indicator_metrics.models.metrics import DecisionQualityMetrics
from indicator_metrics.normalization import as_indicator, count_period_factor, to_number


def wrong_decisions(monthly_decisions: float, accuracy_pct: float) -> float:
    """Wrong = monthly decisions x (1 - accuracy% / 100)"""
    return monthly_decisions * (1 - accuracy_pct / 100)


def decision_hours(monthly_decisions: float, minutes_per_decision: float, people: float) -> float:
    return monthly_decisions * minutes_per_decision * people / 60


@register_calculator(
    IndicatorCategory.DECISION_QUALITY,
    description=(
        "Savings from avoided wrong decisions and faster decisions. "
        "Formula: wrong_before x cost_per_error_before - wrong_after x cost_per_error_after "
        "+ hours_saved x hourly_rate."
    ),
)
def calc_decision_quality(indicator: Any) -> Optional[DecisionQualityMetrics]:
    record = as_indicator(indicator)
    if record.category is not IndicatorCategory.DECISION_QUALITY:
        return None
    b, p = record.baseline, record.post_change

    # Only daily and weekly counts are scaled; anything else is taken as monthly.
    decisions_before = to_number(b.get("numeroDecisoesPeriodo")) * count_period_factor(
        b.get("periodo"), yearly=False
    )
    decisions_after = to_number(p.get("numeroDecisoesPeriodoComIA")) * count_period_factor(
        p.get("periodoComIA"), yearly=False
    )
    accuracy_before = to_number(b.get("taxaAcertoAtual"))
    accuracy_after = to_number(p.get("taxaAcertoComIA"))

    wrong_before = wrong_decisions(decisions_before, accuracy_before)
    wrong_after = wrong_decisions(decisions_after, accuracy_after)
    error_savings = wrong_before * to_number(b.get("custoMedioDecisaoErrada")) - wrong_after * to_number(
        p.get("custoMedioDecisaoErradaComIA")
    )

    hours_before = decision_hours(
        decisions_before, to_number(b.get("tempoMedioDecisao")), to_number(b.get("pessoasEnvolvidas"))
    )
    hours_after = decision_hours(
        decisions_after,
        to_number(p.get("tempoMedioDecisaoComIA")),
        to_number(p.get("pessoasEnvolvidasComIA")),
    )
    hours_saved = hours_before - hours_after
    time_value_saved = hours_saved * to_number(b.get("valorHoraMedio"))

    monthly_benefit = error_savings + time_value_saved
    annual_benefit = monthly_benefit * 12
    cost = record.implementation_cost

    return DecisionQualityMetrics(
        indicator_id=record.id,
        name=record.name,
        category=record.category,
        accuracy_before=accuracy_before,
        accuracy_after=accuracy_after,
        accuracy_improvement=accuracy_after - accuracy_before,
        decisions_before=decisions_before,
        decisions_after=decisions_after,
        wrong_decisions_before=wrong_before,
        wrong_decisions_after=wrong_after,
        error_savings=error_savings,
        hours_saved=hours_saved,
        time_value_saved=time_value_saved,
        monthly_benefit=monthly_benefit,
        annual_benefit=annual_benefit,
        implementation_cost=cost,
        roi=roi_percentage(annual_benefit, cost),
        payback_months=payback_months(cost, monthly_benefit),
    )
