"""Numeric coercion for loosely-typed dashboard inputs."""

from __future__ import annotations

import math
import re
from typing import Any

_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def to_number(value: Any, default: float = 0.0) -> float:
    """Coerce ``value`` to a float, falling back to ``default``.

    None, empty / whitespace strings, unparseable strings, NaN and the
    infinities all yield ``default``. Numeric strings are parsed leniently:
    the longest numeric prefix is used, so ``"12.5kg"`` gives 12.5. Never
    raises.
    """
    if value is None:
        return default
    if isinstance(value, float):
        num = value
    elif isinstance(value, str):
        if not value.strip():
            return default
        num = _parse_float_prefix(value)
    else:
        try:
            num = float(value)
        except (TypeError, ValueError, OverflowError):
            return default
    if not math.isfinite(num):
        return default
    return num


def _parse_float_prefix(text: str) -> float:
    """Parse the leading float of ``text``, ignoring whatever trails it."""
    stripped = text.strip()
    try:
        return float(stripped)
    except ValueError:
        pass
    match = _FLOAT_PREFIX.match(stripped)
    if match is None:
        return math.nan
    return float(match.group(0))


def has_valid_value(value: Any, allow_zero: bool = True) -> bool:
    """True when ``value`` is displayable: not None, not blank, finite.

    With ``allow_zero=False`` a numeric zero is also rejected.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if math.isnan(value) or math.isinf(value):
            return False
        if not allow_zero and value == 0:
            return False
    return True
