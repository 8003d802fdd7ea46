"""Render engine output as pt-BR display strings.

Every formatter accepts anything (None, NaN, infinities included) and
returns a string; none of them raise. Rounding is half-up.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, Optional

from indicator_metrics.config.settings import get_settings

_PT_BR_SEPARATORS = str.maketrans({",": ".", ".": ","})

# Enough digits for any finite float.
_DECIMAL_CONTEXT = Context(prec=400)


def _as_float(value: Any) -> Optional[float]:
    """None for anything that is not a real number (NaN included)."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(number):
        return None
    return number


def _round_half_up(value: float, decimals: int = 0) -> Decimal:
    quantum = Decimal(1).scaleb(-decimals)
    return Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT)


def _half_up_int(value: float) -> int:
    return int(_round_half_up(value))


def _pt_br(value: float, decimals: int) -> str:
    """Group thousands with '.' and use ',' as the decimal mark."""
    rounded = _round_half_up(abs(value), decimals)
    text = f"{rounded:,.{decimals}f}".translate(_PT_BR_SEPARATORS)
    if value < 0 and rounded != 0:
        return "-" + text
    return text


def format_currency(value: Any) -> str:
    """R$ 1.234,56; negatives as -R$ 1.234,56; invalid input as R$ 0,00."""
    symbol = get_settings().currency_symbol
    number = _as_float(value)
    if number is None or math.isinf(number):
        return f"{symbol} 0,00"
    text = _pt_br(number, 2)
    if text.startswith("-"):
        return f"-{symbol} {text[1:]}"
    return f"{symbol} {text}"


def format_percentage(value: Any, decimals: int = 1) -> str:
    decimals = max(0, int(decimals))
    number = _as_float(value)
    if number is None:
        return "0%"
    if math.isinf(number):
        return "∞%" if number > 0 else "-∞%"
    rounded = _round_half_up(number, decimals)
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:.{decimals}f}%"


def format_roi(value: Any) -> str:
    """ROI as a percentage; an unbounded ROI renders as ∞%."""
    number = _as_float(value)
    if number is None:
        return "0%"
    if number == math.inf:
        return "∞%"
    return format_percentage(number)


def _hours_and_minutes(total_minutes: int) -> str:
    hours, minutes = divmod(total_minutes, 60)
    if minutes == 0:
        return f"{hours}h"
    return f"{hours}h {minutes}min"


def format_hours(value: Any) -> str:
    """Hours as '45 min', '2h' or '2h 30min'."""
    hours = _as_float(value)
    if hours is None or math.isinf(hours) or hours == 0:
        return "0h"
    if hours < 1:
        return f"{_half_up_int(hours * 60)} min"
    return _hours_and_minutes(_half_up_int(hours * 60))


def format_minutes(value: Any) -> str:
    minutes = _as_float(value)
    if minutes is None or math.isinf(minutes) or minutes == 0:
        return "0 min"
    if minutes < 60:
        return f"{_half_up_int(minutes)} min"
    return _hours_and_minutes(_half_up_int(minutes))


def format_payback(value: Any) -> str:
    """Payback period in months as a human duration.

    0 -> 'Imediato'; under a month -> days (30-day months); under a year ->
    '4.5 meses'; otherwise years and remaining months.
    """
    months = _as_float(value)
    if months is None or math.isinf(months):
        return "N/A"
    if months == 0:
        return "Imediato"
    if months < 1:
        return f"{_half_up_int(months * 30)} dias"
    if months < 12:
        return f"{_round_half_up(months, 1)} meses"

    years, remaining = divmod(_half_up_int(months), 12)
    year_text = f"{years} {'ano' if years == 1 else 'anos'}"
    if remaining == 0:
        return year_text
    return f"{year_text} e {remaining} {'mês' if remaining == 1 else 'meses'}"


def format_number(value: Any, decimals: int = 0) -> str:
    """Number with pt-BR separators, e.g. 1.234.567 or 1.234,5."""
    decimals = max(0, int(decimals))
    number = _as_float(value)
    if number is None or math.isinf(number):
        return "0"
    return _pt_br(number, decimals)
