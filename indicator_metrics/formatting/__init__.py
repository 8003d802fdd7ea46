from .formatters import (
    format_currency,
    format_hours,
    format_minutes,
    format_number,
    format_payback,
    format_percentage,
    format_roi,
)

__all__ = [
    "format_currency",
    "format_hours",
    "format_minutes",
    "format_number",
    "format_payback",
    "format_percentage",
    "format_roi",
]
