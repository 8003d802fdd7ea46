from .adapter import (
    as_indicator,
    normalize_record,
    pair_people,
    resolve_category,
    resolve_category_label,
    resolve_snapshots,
)
from .coercion import has_valid_value, to_number
from .periods import count_period_factor, monthly_equivalent, to_hours

__all__ = [
    "as_indicator",
    "normalize_record",
    "pair_people",
    "resolve_category",
    "resolve_category_label",
    "resolve_snapshots",
    "has_valid_value",
    "to_number",
    "count_period_factor",
    "monthly_equivalent",
    "to_hours",
]
