from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from indicator_metrics.models.enums import IndicatorCategory

# Global registry -- maps category -> CalculatorDefinition
_REGISTRY: dict[IndicatorCategory, CalculatorDefinition] = {}


@dataclass(frozen=True)
class CalculatorDefinition:
    """A category calculator registered in the library."""

    category: IndicatorCategory
    label: str
    description: str
    calculate_fn: Callable[[Any], Optional[Any]]


def register_calculator(
    category: IndicatorCategory,
    description: str,
) -> Callable:
    """Decorator to register a function as the calculator for ``category``."""

    def decorator(fn: Callable[[Any], Optional[Any]]) -> Callable[[Any], Optional[Any]]:
        if category in _REGISTRY:
            raise ValueError(f"Calculator for '{category.value}' is already registered")
        _REGISTRY[category] = CalculatorDefinition(
            category=category,
            label=category.label,
            description=description,
            calculate_fn=fn,
        )
        return fn

    return decorator


def get_calculator(category: IndicatorCategory) -> Optional[CalculatorDefinition]:
    """Look up the calculator registered for a category."""
    return _REGISTRY.get(category)


def get_all_calculators() -> list[CalculatorDefinition]:
    """Return every registered calculator in classification priority order."""
    return [_REGISTRY[c] for c in IndicatorCategory if c in _REGISTRY]
