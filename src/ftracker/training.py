"""
Training metrics tools for the fitness tracker MCP server.

Device report, structured summary, and supported activity types.
"""

import json
import logging

from ftracker.api.model import TrainingSession
from ftracker.api import report as api_report
from ftracker.calc.types import ActivityType, ACTIVITY_ALIASES, ACTIVITY_INPUTS

logger = logging.getLogger(__name__)


def register_tools(app):
    """Register training metrics tools with the MCP app."""

    @app.tool()
    async def show_training_info(
        action_count: int,
        activity_label: str,
        duration_hours: float,
        weight_kg: float,
        height_cm: float = 0,
        pool_length_m: int = 0,
        pool_lap_count: int = 0,
    ) -> str:
        """
        Get the training report exactly as the tracker displays it.

        Args:
            action_count: Steps (running, walking) or strokes (swimming)
            activity_label: Training type ("Бег", "Ходьба", "Плавание" or running/walking/swimming)
            duration_hours: Training duration in hours
            weight_kg: User weight in kg
            height_cm: User height in cm (walking only)
            pool_length_m: Pool length in meters (swimming only)
            pool_lap_count: Number of pool crossings (swimming only)

        Returns:
            Multi-line report text
        """
        return api_report.show_training_info(
            action_count,
            activity_label,
            duration_hours,
            weight_kg,
            height_cm,
            pool_length_m,
            pool_lap_count,
        )

    @app.tool()
    async def get_training_summary(
        action_count: int,
        activity_label: str,
        duration_hours: float,
        weight_kg: float,
        height_cm: float = 0,
        pool_length_m: int = 0,
        pool_lap_count: int = 0,
    ) -> str:
        """
        Get distance, mean speed and calories for a training as JSON.

        Same formulas as show_training_info, without rounding.

        Args:
            action_count: Steps (running, walking) or strokes (swimming)
            activity_label: Training type ("Бег", "Ходьба", "Плавание" or running/walking/swimming)
            duration_hours: Training duration in hours
            weight_kg: User weight in kg
            height_cm: User height in cm (walking only)
            pool_length_m: Pool length in meters (swimming only)
            pool_lap_count: Number of pool crossings (swimming only)

        Returns:
            JSON with the training summary
        """
        session = TrainingSession.from_dict({
            "action_count": action_count,
            "activity_label": activity_label,
            "duration_hours": duration_hours,
            "weight_kg": weight_kg,
            "height_cm": height_cm,
            "pool_length_m": pool_length_m,
            "pool_lap_count": pool_lap_count,
        })

        try:
            session.validate()
            summary = api_report.compute_training_summary(session)
            if summary is None:
                raise ValueError(f"Unknown activity type '{activity_label}'")
            return json.dumps(summary, indent=2, ensure_ascii=False)
        except ValueError as e:
            logger.error(f"get_training_summary failed: {e}")
            return json.dumps({
                "success": False,
                "error": str(e),
            }, indent=2, ensure_ascii=False)

    @app.tool()
    async def list_activity_types() -> str:
        """
        List supported activity types.

        Returns the label the tracker sends, accepted aliases, and which
        measurements each activity uses.

        Returns:
            JSON with activity types
        """
        aliases = {}
        for alias, activity in ACTIVITY_ALIASES.items():
            aliases.setdefault(activity, []).append(alias)

        result = [
            {
                "activity": activity.name.lower(),
                "label": activity.value,
                "aliases": aliases.get(activity, []),
                "inputs": list(ACTIVITY_INPUTS[activity]),
            }
            for activity in ActivityType
        ]
        return json.dumps(result, indent=2, ensure_ascii=False)

    return app
