"""
Fitness tracker calculation core.

Formula constants and the pure metric functions. No I/O, no state.
"""

from ftracker.calc.metrics import (
    distance,
    mean_speed,
    swimming_mean_speed,
    running_calories,
    walking_calories,
    swimming_calories,
)
from ftracker.calc.types import (
    ActivityType,
    ACTIVITY_ALIASES,
    UNKNOWN_ACTIVITY_MESSAGE,
    resolve_activity,
)

__all__ = [
    "distance",
    "mean_speed",
    "swimming_mean_speed",
    "running_calories",
    "walking_calories",
    "swimming_calories",
    "ActivityType",
    "ACTIVITY_ALIASES",
    "UNKNOWN_ACTIVITY_MESSAGE",
    "resolve_activity",
]
