"""Canonical indicator record produced by the normalization adapter.

Calculators only ever see these types; raw dashboard payloads (legacy nested
objects or the normalized flat schema) are mapped onto them once, in
``indicator_metrics.normalization.adapter``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .enums import IndicatorCategory

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class Recurrence:
    """A quantity tagged with its recurrence period (e.g. 3 per 'Semanal')."""

    quantity: float = 0.0
    period: str = "Mensal"


@dataclass(frozen=True)
class PersonSnapshot:
    """One person's workload on a productivity task."""

    id: Optional[str]
    name: str
    role: str = ""
    hourly_rate: float = 0.0
    time_spent_minutes: float = 0.0
    actual_frequency: Recurrence = field(default_factory=Recurrence)
    desired_frequency: Recurrence = field(default_factory=Recurrence)


@dataclass(frozen=True)
class PersonPair:
    """A baseline person and its post-change counterpart.

    ``matched`` is False when no post-change person shared the baseline id
    and the baseline snapshot stands in for itself.
    """

    before: PersonSnapshot
    after: PersonSnapshot
    matched: bool


@dataclass(frozen=True)
class Snapshots:
    baseline: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    post_change: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    metadata: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)


@dataclass(frozen=True)
class IndicatorRecord:
    """One indicator, with its category already resolved."""

    id: Optional[str]
    name: str
    category: Optional[IndicatorCategory]
    snapshots: Snapshots = field(default_factory=Snapshots)
    description: str = ""
    implementation_cost: float = 0.0

    @property
    def baseline(self) -> Mapping[str, Any]:
        return self.snapshots.baseline

    @property
    def post_change(self) -> Mapping[str, Any]:
        return self.snapshots.post_change

    @property
    def metadata(self) -> Mapping[str, Any]:
        return self.snapshots.metadata
