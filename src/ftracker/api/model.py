"""
Domain types for the fitness tracker API.

Only the training session needs a dataclass: it is what the tool layer
builds from caller input and validates. Summaries stay plain dicts.
"""

from dataclasses import dataclass


@dataclass
class TrainingSession:
    """Raw measurements of one training.

    Pool fields are only read for swimming, height only for walking.
    """
    action_count: int
    activity_label: str
    duration_hours: float
    weight_kg: float
    height_cm: float = 0
    pool_length_m: int = 0
    pool_lap_count: int = 0

    @classmethod
    def from_dict(cls, d: dict) -> "TrainingSession":
        """Create a TrainingSession from a plain dict."""
        return cls(
            action_count=d.get("action_count", 0),
            activity_label=d.get("activity_label", ""),
            duration_hours=d.get("duration_hours", 0),
            weight_kg=d.get("weight_kg", 0),
            height_cm=d.get("height_cm", 0),
            pool_length_m=d.get("pool_length_m", 0),
            pool_lap_count=d.get("pool_lap_count", 0),
        )

    def validate(self):
        """Validate the measurements.

        Raises:
            ValueError: If a counter or the duration is negative, or the
                weight is not positive.
        """
        for name in ("action_count", "pool_length_m", "pool_lap_count", "duration_hours", "height_cm"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)}")
        if self.weight_kg <= 0:
            raise ValueError(f"weight_kg must be positive, got {self.weight_kg}")
