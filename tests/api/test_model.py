"""Tests for api/model.py — TrainingSession."""

import pytest

from ftracker.api.model import TrainingSession


class TestTrainingSession:
    def test_from_dict_defaults(self):
        session = TrainingSession.from_dict({
            "action_count": 1000,
            "activity_label": "Бег",
            "duration_hours": 1,
            "weight_kg": 70,
        })
        assert session.action_count == 1000
        assert session.height_cm == 0
        assert session.pool_length_m == 0
        assert session.pool_lap_count == 0

    def test_from_dict_swimming(self):
        session = TrainingSession.from_dict({
            "activity_label": "Плавание",
            "duration_hours": 1.5,
            "weight_kg": 60,
            "pool_length_m": 50,
            "pool_lap_count": 30,
        })
        assert session.action_count == 0
        assert session.pool_length_m == 50
        assert session.pool_lap_count == 30

    def test_validate_ok(self):
        TrainingSession(1000, "Бег", 0, 70).validate()

    @pytest.mark.parametrize("field", [
        "action_count", "duration_hours", "height_cm", "pool_length_m", "pool_lap_count",
    ])
    def test_validate_negative(self, field):
        session = TrainingSession(1000, "Бег", 1, 70)
        setattr(session, field, -1)
        with pytest.raises(ValueError, match=field):
            session.validate()

    def test_validate_weight(self):
        with pytest.raises(ValueError, match="weight_kg"):
            TrainingSession(1000, "Бег", 1, 0).validate()
