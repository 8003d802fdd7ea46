from __future__ import annotations

from enum import Enum
from typing import Optional


class IndicatorCategory(str, Enum):
    """The eight business-indicator categories, in classification priority order."""

    PRODUCTIVITY = "productivity"
    ANALYTICAL_CAPACITY = "analytical_capacity"
    REVENUE_INCREASE = "revenue_increase"
    MARGIN_IMPROVEMENT = "margin_improvement"
    RISK_REDUCTION = "risk_reduction"
    DECISION_QUALITY = "decision_quality"
    SPEED = "speed"
    SATISFACTION = "satisfaction"

    @property
    def label(self) -> str:
        """Human-readable label used by the legacy schema."""
        return _LABELS[self]

    @property
    def tag(self) -> str:
        """Upper-case tag embedded in baseline / post-change snapshots."""
        return _LABELS[self].upper()

    @classmethod
    def from_label(cls, text: object) -> Optional[IndicatorCategory]:
        """Parse a legacy label, snapshot tag or machine code.

        Returns None for anything that is not one of the eight categories.
        """
        if not isinstance(text, str):
            return None
        key = text.strip().casefold()
        if not key:
            return None
        return _LOOKUP.get(key)


_LABELS: dict[IndicatorCategory, str] = {
    IndicatorCategory.PRODUCTIVITY: "Produtividade",
    IndicatorCategory.ANALYTICAL_CAPACITY: "Capacidade Analítica",
    IndicatorCategory.REVENUE_INCREASE: "Incremento Receita",
    IndicatorCategory.MARGIN_IMPROVEMENT: "Melhoria Margem",
    IndicatorCategory.RISK_REDUCTION: "Redução de Risco",
    IndicatorCategory.DECISION_QUALITY: "Qualidade Decisão",
    IndicatorCategory.SPEED: "Velocidade",
    IndicatorCategory.SATISFACTION: "Satisfação",
}

# Code, label and tag all casefold to the same key space.
_LOOKUP: dict[str, IndicatorCategory] = {}
for _category, _label in _LABELS.items():
    _LOOKUP[_category.value] = _category
    _LOOKUP[_label.casefold()] = _category


# improvement_type code -> legacy label. Read-only after import.
IMPROVEMENT_TYPE_LABELS: dict[str, str] = {
    "productivity": "Produtividade",
    "analytical_capacity": "Capacidade Analítica",
    "revenue_increase": "Incremento Receita",
    "cost_reduction": "Custos Relacionados",
    "risk_reduction": "Redução de Risco",
    "decision_quality": "Qualidade Decisão",
    "speed": "Velocidade",
    "satisfaction": "Satisfação",
    "margin_improvement": "Melhoria Margem",
}
