"""Serialization module: plan payloads for storage and tabular export."""

from triplan.serialization.frame import plan_to_frame, sport_breakdown
from triplan.serialization.plan_json import (
    event_from_dict,
    event_to_dict,
    plan_from_dict,
    plan_from_json_string,
    plan_to_dict,
    plan_to_json_string,
    workout_from_dict,
    workout_to_dict,
)

__all__ = [
    "event_from_dict",
    "event_to_dict",
    "plan_from_dict",
    "plan_from_json_string",
    "plan_to_dict",
    "plan_to_frame",
    "plan_to_json_string",
    "sport_breakdown",
    "workout_from_dict",
    "workout_to_dict",
]
