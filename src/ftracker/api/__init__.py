"""
High-Level API for the fitness tracker.

Every function takes plain measurements and returns either the device
report string or a clean dict. Composes with the calc layer internally.

Modules:
    model  — TrainingSession input type
    report — Formula dispatch by activity, device report
"""

# Model
from ftracker.api.model import TrainingSession

# Report
from ftracker.api.report import compute_training_summary, show_training_info

__all__ = [
    # Model
    "TrainingSession",
    # Report
    "compute_training_summary", "show_training_info",
]
