"""Audit hooks: logs each metrics calculation for the audit trail."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

logger = logging.getLogger(__name__)

# Headline benefit field per category, first one present wins.
_BENEFIT_FIELDS = (
    "annual_savings",
    "annual_value_increase",
    "annual_benefit",
    "annual_profit_impact",
    "delta_revenue",
)
_HEADLINE_FIELDS = ("implementation_cost", "roi", "payback_months")


def summarize_metrics(metrics: Any) -> Optional[dict[str, Any]]:
    """Headline figures of a metrics object: annual benefit, cost, ROI, payback."""
    if metrics is None:
        return None
    data = metrics.to_dict()
    summary: dict[str, Any] = {}
    for name in _BENEFIT_FIELDS:
        if name in data:
            summary["annual_benefit"] = data[name]
            break
    for name in _HEADLINE_FIELDS:
        if name in data:
            summary[name] = data[name]
    return summary


def log_calculation(
    indicator_id: Optional[str],
    category: str,
    metrics: Any = None,
) -> dict[str, Any]:
    """Log one calculated indicator and return its audit entry."""
    summary = summarize_metrics(metrics)
    entry = {
        "indicator_id": indicator_id,
        "category": category,
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        "summary": summary,
    }
    logger.info("Calculated %s for indicator %s: %s", category, indicator_id, summary)
    return entry
