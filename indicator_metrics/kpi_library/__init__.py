# Importing the calculator modules registers them, in classification order.
from indicator_metrics.kpi_library import (  # noqa: F401
    productivity,
    analytical_capacity,
    revenue,
    margin,
    risk,
    decision_quality,
    speed,
    satisfaction,
)
