"""
Training metric formulas.

Pure functions over scalar measurements. Distance is in km, speed in km/h,
energy in kcal, duration in hours.
"""

import math

from ftracker.calc.types import (
    STEP_LENGTH_M,
    METERS_PER_KM,
    MINUTES_PER_HOUR,
    KMH_TO_MS,
    CM_PER_M,
    RUNNING_SPEED_MULTIPLIER,
    RUNNING_SPEED_SHIFT,
    WALKING_WEIGHT_MULTIPLIER,
    WALKING_SPEED_HEIGHT_MULTIPLIER,
    SWIMMING_SPEED_SHIFT,
    SWIMMING_WEIGHT_MULTIPLIER,
)


def _divide(numerator: float, denominator: float) -> float:
    """IEEE 754 float division: x/0 is a signed inf, 0/0 is nan."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def distance(action_count: int) -> float:
    """Distance covered in km.

    Args:
        action_count: Number of actions (steps when walking or running,
            strokes when swimming)
    """
    return action_count * STEP_LENGTH_M / METERS_PER_KM


def mean_speed(action_count: int, duration_hours: float) -> float:
    """Average speed over the whole training in km/h.

    Returns 0.0 for a zero duration.
    """
    if duration_hours == 0:
        return 0.0
    return distance(action_count) / duration_hours


def swimming_mean_speed(pool_length_m: int, pool_lap_count: int, duration_hours: float) -> float:
    """Average swimming speed in km/h.

    Args:
        pool_length_m: Pool length in meters
        pool_lap_count: How many times the pool was crossed
        duration_hours: Training duration in hours

    Returns:
        Speed in km/h, or 0.0 for a zero duration
    """
    if duration_hours == 0:
        return 0.0
    return pool_length_m * pool_lap_count / METERS_PER_KM / duration_hours


def running_calories(action_count: int, weight_kg: float, duration_hours: float) -> float:
    """Calories spent while running."""
    return (
        (RUNNING_SPEED_MULTIPLIER * mean_speed(action_count, duration_hours) * RUNNING_SPEED_SHIFT)
        * weight_kg / METERS_PER_KM * duration_hours * MINUTES_PER_HOUR
    )


def walking_calories(action_count: int, duration_hours: float, weight_kg: float, height_cm: float) -> float:
    """Calories spent while walking.

    Speed is converted to m/s and height to meters. A zero height is not
    guarded: the result is inf, or nan when the speed is zero too.
    """
    speed_ms = mean_speed(action_count, duration_hours) * KMH_TO_MS
    return (
        (WALKING_WEIGHT_MULTIPLIER * weight_kg
         + _divide(math.pow(speed_ms, 2), height_cm / CM_PER_M) * WALKING_SPEED_HEIGHT_MULTIPLIER * weight_kg)
        * duration_hours * MINUTES_PER_HOUR
    )


def swimming_calories(pool_length_m: int, pool_lap_count: int, duration_hours: float, weight_kg: float) -> float:
    """Calories spent while swimming."""
    return (
        (swimming_mean_speed(pool_length_m, pool_lap_count, duration_hours) + SWIMMING_SPEED_SHIFT)
        * SWIMMING_WEIGHT_MULTIPLIER * weight_kg * duration_hours
    )
