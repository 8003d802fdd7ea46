"""Classification dispatcher.

Takes raw indicator records -> routes each through the category
calculators in priority order -> per-category lists of metrics objects.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional

# Ensure all calculators are registered on import
import indicator_metrics.kpi_library  # noqa: F401
from indicator_metrics.hooks.audit_hooks import log_calculation
from indicator_metrics.kpi_library.registry import get_all_calculators
from indicator_metrics.models.enums import IndicatorCategory
from indicator_metrics.models.indicator import IndicatorRecord
from indicator_metrics.normalization import normalize_record, to_number

logger = logging.getLogger(__name__)


def empty_results() -> dict[str, list[Any]]:
    """One empty list per category code, in priority order."""
    return {category.value: [] for category in IndicatorCategory}


class MetricsEngine:
    """Stateless engine that classifies indicators and computes their metrics."""

    def calculate(self, indicator: Any, implementation_cost: Optional[float] = None) -> Optional[Any]:
        """Compute the metrics of a single record, or None if no category claims it.

        ``implementation_cost`` overrides any cost embedded in the record.
        """
        record = self._prepare(indicator, implementation_cost)
        for definition in get_all_calculators():
            metrics = definition.calculate_fn(record)
            if metrics is not None:
                log_calculation(record.id, definition.category.value, metrics)
                return metrics
        logger.debug("Indicator %s (%s) matched no category", record.id, record.name)
        return None

    def classify(
        self,
        indicators: Optional[Iterable[Any]],
        implementation_costs: Optional[Mapping[Any, Any]] = None,
    ) -> dict[str, list[Any]]:
        """Run every record through the calculators; first match wins.

        ``implementation_costs`` maps indicator id -> one-time implementation
        cost; ids are compared as strings.
        """
        results = empty_results()
        costs = {str(key): value for key, value in (implementation_costs or {}).items()}

        for position, indicator in enumerate(indicators or []):
            if not isinstance(indicator, (Mapping, IndicatorRecord)):
                logger.warning(
                    "Skipping indicator at position %d: expected a mapping, got %s",
                    position,
                    type(indicator).__name__,
                )
                continue
            cost = costs.get(self._indicator_id(indicator))
            metrics = self.calculate(indicator, implementation_cost=cost)
            if metrics is not None:
                results[metrics.category.value].append(metrics)

        logger.info(
            "Classified indicators: %s",
            ", ".join(f"{code}={len(items)}" for code, items in results.items()),
        )
        return results

    @staticmethod
    def _indicator_id(indicator: Any) -> Optional[str]:
        raw_id = indicator.id if isinstance(indicator, IndicatorRecord) else indicator.get("id")
        return str(raw_id) if raw_id not in (None, "") else None

    @staticmethod
    def _prepare(indicator: Any, implementation_cost: Optional[float]) -> IndicatorRecord:
        if isinstance(indicator, IndicatorRecord):
            if implementation_cost is None:
                return indicator
            return replace(indicator, implementation_cost=to_number(implementation_cost))
        return normalize_record(indicator, implementation_cost=implementation_cost)


def classify_indicators(
    indicators: Optional[Iterable[Any]],
    implementation_costs: Optional[Mapping[Any, Any]] = None,
) -> dict[str, list[Any]]:
    """Module-level shortcut for ``MetricsEngine().classify``."""
    return MetricsEngine().classify(indicators, implementation_costs)
