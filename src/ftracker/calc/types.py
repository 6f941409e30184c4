"""
Fitness tracker constants, enums, and label mappings.

All formula coefficients and the localized report literals live here.
"""

from enum import Enum


# Main constants
STEP_LENGTH_M = 0.65     # mean step length
METERS_PER_KM = 1000
MINUTES_PER_HOUR = 60
KMH_TO_MS = 0.278        # km/h -> m/s
CM_PER_M = 100

# Running calories
RUNNING_SPEED_MULTIPLIER = 18
RUNNING_SPEED_SHIFT = 1.79

# Walking calories
WALKING_WEIGHT_MULTIPLIER = 0.035
WALKING_SPEED_HEIGHT_MULTIPLIER = 0.029

# Swimming calories
SWIMMING_SPEED_SHIFT = 1.1
SWIMMING_WEIGHT_MULTIPLIER = 2


class ActivityType(Enum):
    """Supported training types.

    Values are the labels the tracker firmware sends.
    """
    RUNNING = "Бег"
    WALKING = "Ходьба"
    SWIMMING = "Плавание"


# English aliases accepted alongside the firmware labels
ACTIVITY_ALIASES = {
    "running": ActivityType.RUNNING,
    "walking": ActivityType.WALKING,
    "swimming": ActivityType.SWIMMING,
}

# Which inputs each activity actually reads
ACTIVITY_INPUTS = {
    ActivityType.RUNNING: ("action_count", "duration_hours", "weight_kg"),
    ActivityType.WALKING: ("action_count", "duration_hours", "weight_kg", "height_cm"),
    ActivityType.SWIMMING: (
        "action_count", "duration_hours", "weight_kg", "pool_length_m", "pool_lap_count",
    ),
}

REPORT_TEMPLATE = (
    "Тип тренировки: {label}\n"
    "Длительность: {duration} ч.\n"
    "Дистанция: {distance} км.\n"
    "Скорость: {speed} км/ч\n"
    "Сожгли калорий: {calories}\n"
)

UNKNOWN_ACTIVITY_MESSAGE = "неизвестный тип тренировки"


def resolve_activity(label: str):
    """Map a label (firmware literal or English alias) to an ActivityType.

    Returns None for anything unrecognized. Matching is exact.
    """
    if label in ACTIVITY_ALIASES:
        return ACTIVITY_ALIASES[label]
    try:
        return ActivityType(label)
    except ValueError:
        return None
