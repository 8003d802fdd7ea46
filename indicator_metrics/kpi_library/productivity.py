"""Productivity: hours and cost saved per person on a recurring task.

Hours before and after are measured against the same monthly-equivalent
base (the baseline frequency), so the comparison isolates the change in
time spent per occurrence. A second pass repeats the comparison at the
frequency the task *should* run at. Savings never go negative.
"""

from __future__ import annotations

from typing import Any, Optional

from indicator_metrics.kpi_library.financial import payback_months, roi_percentage
from indicator_metrics.kpi_library.registry import register_calculator
from indicator_metrics.models.enums import IndicatorCategory
from indicator_metrics.models.indicator import PersonPair, Recurrence
from indicator_metrics.models.metrics import PersonProductivity, ProductivityMetrics
from indicator_metrics.normalization import as_indicator, monthly_equivalent, pair_people


def _hours(minutes: float, base: float) -> float:
    return minutes / 60 * base


def person_productivity(pair: PersonPair) -> PersonProductivity:
    """Compute one person's row at actual and at desired frequency."""
    before, after = pair.before, pair.after
    rate = after.hourly_rate or before.hourly_rate

    def compare(frequency: Recurrence) -> tuple[float, float, float, float, float, float]:
        base = monthly_equivalent(frequency.quantity, frequency.period)
        hh_before = _hours(before.time_spent_minutes, base)
        hh_after = _hours(after.time_spent_minutes, base)
        cost_before = hh_before * rate
        cost_after = hh_after * rate
        return (
            hh_before,
            hh_after,
            max(0.0, hh_before - hh_after),
            cost_before,
            cost_after,
            max(0.0, cost_before - cost_after),
        )

    actual = compare(before.actual_frequency)
    desired = compare(before.desired_frequency)
    return PersonProductivity(
        person=before.name,
        matched=pair.matched,
        hh_before=actual[0],
        hh_after=actual[1],
        hh_saved=actual[2],
        cost_before=actual[3],
        cost_after=actual[4],
        cost_saved=actual[5],
        desired_hh_before=desired[0],
        desired_hh_after=desired[1],
        desired_hh_saved=desired[2],
        desired_cost_before=desired[3],
        desired_cost_after=desired[4],
        desired_cost_saved=desired[5],
    )


@register_calculator(
    IndicatorCategory.PRODUCTIVITY,
    description=(
        "Man-hours and cost saved per person. "
        "Formula: (minutes / 60) x monthly frequency, before vs after, clamped at zero."
    ),
)
def calc_productivity(indicator: Any) -> Optional[ProductivityMetrics]:
    record = as_indicator(indicator)
    if record.category is not IndicatorCategory.PRODUCTIVITY:
        return None

    rows = tuple(
        person_productivity(pair)
        for pair in pair_people(record.baseline.get("pessoas"), record.post_change.get("pessoas"))
    )
    total_cost_saved = sum(r.cost_saved for r in rows)
    annual_savings = total_cost_saved * 12
    cost = record.implementation_cost

    return ProductivityMetrics(
        indicator_id=record.id,
        name=record.name,
        category=record.category,
        people=rows,
        total_hours_saved=sum(r.hh_saved for r in rows),
        total_cost_saved=total_cost_saved,
        total_desired_hours_saved=sum(r.desired_hh_saved for r in rows),
        total_desired_cost_saved=sum(r.desired_cost_saved for r in rows),
        monthly_savings=total_cost_saved,
        annual_savings=annual_savings,
        implementation_cost=cost,
        roi=roi_percentage(annual_savings, cost),
        payback_months=payback_months(cost, total_cost_saved),
    )
