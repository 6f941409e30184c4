"""Tests for calc/metrics.py — training metric formulas."""

import math

import pytest

from ftracker.calc.metrics import (
    distance,
    mean_speed,
    swimming_mean_speed,
    running_calories,
    walking_calories,
    swimming_calories,
)


class TestDistance:
    def test_zero_steps(self):
        assert distance(0) == 0

    def test_thousand_steps(self):
        assert distance(1000) == 0.65

    def test_linear_in_steps(self):
        assert distance(5000) == pytest.approx(5 * distance(1000))
        assert distance(1) == pytest.approx(0.00065)


class TestMeanSpeed:
    def test_one_hour(self):
        assert mean_speed(1000, 1) == 0.65

    def test_half_hour(self):
        assert mean_speed(1000, 0.5) == pytest.approx(1.3)

    def test_zero_duration(self):
        assert mean_speed(12345, 0) == 0
        assert isinstance(mean_speed(12345, 0), float)

    def test_zero_steps(self):
        assert mean_speed(0, 2) == 0


class TestSwimmingMeanSpeed:
    def test_pool(self):
        assert swimming_mean_speed(25, 20, 1) == 0.5

    def test_two_hours(self):
        assert swimming_mean_speed(50, 40, 2) == pytest.approx(1.0)

    def test_zero_duration(self):
        assert swimming_mean_speed(25, 20, 0) == 0
        assert isinstance(swimming_mean_speed(25, 20, 0), float)


class TestRunningCalories:
    def test_reference_values(self):
        expected = (18 * 0.65 * 1.79) * 70 / 1000 * 1 * 60
        assert running_calories(1000, 70, 1) == expected
        assert running_calories(1000, 70, 1) == pytest.approx(87.96, abs=0.01)

    def test_zero_duration(self):
        assert running_calories(1000, 70, 0) == 0


class TestWalkingCalories:
    def test_reference_values(self):
        expected = (0.035 * 70 + (math.pow(0.65 * 0.278, 2) / (170 / 100)) * 0.029 * 70) * 1 * 60
        assert walking_calories(1000, 1, 70, 170) == expected
        assert walking_calories(1000, 1, 70, 170) == pytest.approx(149.34, abs=0.01)

    def test_standing_still_burns_base_rate(self):
        # speed term vanishes, only the weight term is left
        assert walking_calories(0, 1, 70, 170) == pytest.approx(0.035 * 70 * 60)

    def test_zero_height_is_infinite(self):
        calories = walking_calories(1000, 1, 70, 0)
        assert math.isinf(calories)
        assert calories > 0

    def test_zero_height_and_zero_speed_is_nan(self):
        assert math.isnan(walking_calories(0, 1, 70, 0))
        assert math.isnan(walking_calories(1000, 0, 70, 0))


class TestSwimmingCalories:
    def test_reference_values(self):
        assert swimming_calories(25, 20, 1, 70) == pytest.approx(224.0)

    def test_zero_duration(self):
        assert swimming_calories(25, 20, 0, 70) == 0


def test_idempotent():
    assert walking_calories(4321, 0.75, 68.5, 181) == walking_calories(4321, 0.75, 68.5, 181)
    assert running_calories(9000, 80, 1.2) == running_calories(9000, 80, 1.2)
    assert swimming_calories(50, 33, 0.8, 60) == swimming_calories(50, 33, 0.8, 60)
