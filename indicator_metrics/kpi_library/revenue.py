from __future__ import annotations

from typing import Any, Optional

from indicator_metrics.kpi_library.registry import register_calculator
from indicator_metrics.models.enums import IndicatorCategory
from indicator_metrics.models.metrics import RevenueIncreaseMetrics
from indicator_metrics.normalization import as_indicator, to_number


@register_calculator(
    IndicatorCategory.REVENUE_INCREASE,
    description="Revenue gained after the change. Formula: revenue_after - revenue_before.",
)
def calc_revenue_increase(indicator: Any) -> Optional[RevenueIncreaseMetrics]:
    """Delta_Revenue = revenue_after - revenue_before"""
    record = as_indicator(indicator)
    if record.category is not IndicatorCategory.REVENUE_INCREASE:
        return None

    revenue_before = to_number(record.baseline.get("valorReceitaAntes"))
    revenue_after = to_number(record.post_change.get("valorReceitaDepois"))
    return RevenueIncreaseMetrics(
        indicator_id=record.id,
        name=record.name,
        category=record.category,
        revenue_before=revenue_before,
        revenue_after=revenue_after,
        delta_revenue=revenue_after - revenue_before,
    )
