"""Period and unit normalizers.

All functions are total: unrecognized periods or units are treated as
already normalized rather than rejected, so partially filled records still
produce numbers.
"""

from __future__ import annotations

from typing import Any

from .coercion import to_number

DAYS_PER_MONTH = 30
WEEKS_PER_MONTH = 4.33
HOURS_PER_DAY = 24

_DAILY = {"diário", "diario", "daily", "dia", "day", "por dia"}
_WEEKLY = {"semanal", "weekly", "semana", "week", "por semana"}
_YEARLY = {"anual", "yearly", "ano", "year", "por ano"}


def _key(label: Any) -> str:
    return label.strip().casefold() if isinstance(label, str) else ""


def monthly_equivalent(quantity: Any, period: Any) -> float:
    """Convert a recurring quantity into its per-month equivalent.

    Daily x30, weekly x4.33, yearly /12; monthly and anything unrecognized
    pass through unchanged.
    """
    qty = to_number(quantity)
    if qty == 0:
        return 0.0
    key = _key(period)
    if key in _DAILY:
        return qty * DAYS_PER_MONTH
    if key in _WEEKLY:
        return qty * WEEKS_PER_MONTH
    if key in _YEARLY:
        return qty / 12
    return qty


def count_period_factor(period: Any, yearly: bool = True) -> float:
    """Monthly multiplier for event counts (decisions, deliveries, analyses).

    Uses a flat 4 weeks per month, unlike ``monthly_equivalent``. With
    ``yearly=False`` a yearly period falls through to x1, as decision
    counts are read.
    """
    key = _key(period)
    if key in _DAILY:
        return float(DAYS_PER_MONTH)
    if key in _WEEKLY:
        return 4.0
    if yearly and key in _YEARLY:
        return 1 / 12
    return 1.0


def to_hours(duration: Any, unit: Any) -> float:
    """Express ``duration`` in hours; only 'dias' / 'days' is converted."""
    value = to_number(duration)
    if _key(unit) in {"dias", "days", "dia", "day"}:
        return value * HOURS_PER_DAY
    return value
