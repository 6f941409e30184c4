"""
Training report: which formulas apply to which activity.

Dispatches on the activity label and renders the device report.
"""

import logging
import math

from ftracker.api.model import TrainingSession
from ftracker.calc import metrics
from ftracker.calc.types import (
    ActivityType,
    REPORT_TEMPLATE,
    UNKNOWN_ACTIVITY_MESSAGE,
    resolve_activity,
)

logger = logging.getLogger(__name__)


def format_value(value: float) -> str:
    """Format a report number with two decimals.

    Non-finite values are spelled the way the tracker firmware prints them
    ('+Inf', '-Inf', 'NaN').
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:.2f}"


def _running(s: TrainingSession) -> tuple:
    return (
        metrics.distance(s.action_count),
        metrics.mean_speed(s.action_count, s.duration_hours),
        metrics.running_calories(s.action_count, s.weight_kg, s.duration_hours),
    )


def _walking(s: TrainingSession) -> tuple:
    return (
        metrics.distance(s.action_count),
        metrics.mean_speed(s.action_count, s.duration_hours),
        metrics.walking_calories(s.action_count, s.duration_hours, s.weight_kg, s.height_cm),
    )


def _swimming(s: TrainingSession) -> tuple:
    # Distance stays step-based even for swimming; speed and calories use the pool.
    return (
        metrics.distance(s.action_count),
        metrics.swimming_mean_speed(s.pool_length_m, s.pool_lap_count, s.duration_hours),
        metrics.swimming_calories(s.pool_length_m, s.pool_lap_count, s.duration_hours, s.weight_kg),
    )


_FORMULAS = {
    ActivityType.RUNNING: _running,
    ActivityType.WALKING: _walking,
    ActivityType.SWIMMING: _swimming,
}


def compute_training_summary(session: TrainingSession) -> dict | None:
    """Compute distance, speed and calories for a training session.

    Returns:
        {activity, label, duration_hours, distance_km, mean_speed_kmh, calories_kcal},
        or None if the activity label is not recognized.
    """
    activity = resolve_activity(session.activity_label)
    if activity is None:
        logger.warning(f"Unknown activity label: {session.activity_label!r}")
        return None

    distance_km, speed_kmh, calories = _FORMULAS[activity](session)
    summary = {
        "activity": activity.name.lower(),
        "label": session.activity_label,
        "duration_hours": session.duration_hours,
        "distance_km": distance_km,
        "mean_speed_kmh": speed_kmh,
        "calories_kcal": calories,
    }
    logger.debug(f"Training summary: {summary}")
    return summary


def show_training_info(
    action_count: int,
    activity_label: str,
    duration_hours: float,
    weight_kg: float,
    height_cm: float,
    pool_length_m: int,
    pool_lap_count: int,
) -> str:
    """Render the training report shown on the device.

    Args:
        action_count: Steps (running, walking) or strokes (swimming)
        activity_label: Training type label
        duration_hours: Training duration in hours
        weight_kg: User weight in kg
        height_cm: User height in cm
        pool_length_m: Pool length in meters
        pool_lap_count: How many times the pool was crossed

    Returns:
        Multi-line report, or the unknown-activity message for an
        unrecognized label
    """
    summary = compute_training_summary(TrainingSession(
        action_count=action_count,
        activity_label=activity_label,
        duration_hours=duration_hours,
        weight_kg=weight_kg,
        height_cm=height_cm,
        pool_length_m=pool_length_m,
        pool_lap_count=pool_lap_count,
    ))
    if summary is None:
        return UNKNOWN_ACTIVITY_MESSAGE

    return REPORT_TEMPLATE.format(
        label=summary["label"],
        duration=format_value(summary["duration_hours"]),
        distance=format_value(summary["distance_km"]),
        speed=format_value(summary["mean_speed_kmh"]),
        calories=format_value(summary["calories_kcal"]),
    )
