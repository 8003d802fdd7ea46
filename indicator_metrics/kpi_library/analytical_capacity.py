"""Analytical Capacity: analyses delivered per month, before vs after."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from indicator_metrics.kpi_library.financial import payback_months, percent_change, roi_percentage
from indicator_metrics.kpi_library.registry import register_calculator
from indicator_metrics.models.enums import IndicatorCategory
from indicator_metrics.models.metrics import AnalyticalCapacityMetrics, CriterionComparison
from indicator_metrics.normalization import as_indicator, count_period_factor, to_number


def _criteria(raw: Any) -> list[Mapping[str, Any]]:
    if not isinstance(raw, (list, tuple)):
        return []
    return [item for item in raw if isinstance(item, Mapping)]


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def compare_criteria(before: Any, after: Any) -> list[CriterionComparison]:
    """Pair qualitative criteria by id, falling back to the criterion name.

    Baseline order is kept; criteria only present after the change are
    appended with an empty ``before``.
    """
    after_items = _criteria(after)
    used: set[int] = set()
    rows: list[CriterionComparison] = []

    for item in _criteria(before):
        name = _text(item.get("criterio"))
        match_index = None
        for index, candidate in enumerate(after_items):
            if index in used:
                continue
            same_id = item.get("id") is not None and candidate.get("id") == item.get("id")
            if same_id or (name and _text(candidate.get("criterio")) == name):
                match_index = index
                break
        after_value = ""
        if match_index is not None:
            used.add(match_index)
            after_value = _text(after_items[match_index].get("valor"))
        rows.append(CriterionComparison(criterion=name, before=_text(item.get("valor")), after=after_value))

    for index, candidate in enumerate(after_items):
        if index not in used:
            rows.append(
                CriterionComparison(
                    criterion=_text(candidate.get("criterio")),
                    before="",
                    after=_text(candidate.get("valor")),
                )
            )
    return rows


@register_calculator(
    IndicatorCategory.ANALYTICAL_CAPACITY,
    description=(
        "Extra analyses per month and the value they add. "
        "Formula: (after - before) / before x 100, 0 when before is 0."
    ),
)
def calc_analytical_capacity(indicator: Any) -> Optional[AnalyticalCapacityMetrics]:
    record = as_indicator(indicator)
    if record.category is not IndicatorCategory.ANALYTICAL_CAPACITY:
        return None
    b, p = record.baseline, record.post_change

    analyses_before = to_number(b.get("quantidadeAnalises")) * count_period_factor(b.get("periodo"))
    analyses_after = to_number(p.get("quantidadeAnalisesComIA")) * count_period_factor(p.get("periodoComIA"))
    value_before = to_number(b.get("valorPorAnalise"))
    # A missing post-change value per analysis falls back to the baseline one.
    value_after = to_number(p.get("valorPorAnaliseComIA"), default=value_before)

    monthly_before = analyses_before * value_before
    monthly_after = analyses_after * value_after
    monthly_increase = monthly_after - monthly_before
    annual_increase = monthly_increase * 12
    cost = record.implementation_cost

    return AnalyticalCapacityMetrics(
        indicator_id=record.id,
        name=record.name,
        category=record.category,
        analyses_before=analyses_before,
        analyses_after=analyses_after,
        additional_analyses=analyses_after - analyses_before,
        capacity_increase_pct=percent_change(analyses_before, analyses_after),
        monthly_value_before=monthly_before,
        monthly_value_after=monthly_after,
        monthly_value_increase=monthly_increase,
        annual_value_increase=annual_increase,
        implementation_cost=cost,
        roi=roi_percentage(annual_increase, cost),
        payback_months=payback_months(cost, monthly_increase),
        criteria=tuple(compare_criteria(b.get("camposQualitativos"), p.get("camposQualitativos"))),
    )
