"""JSON-compatible serialization for events and training plans.

Enums are written by member name and dates as ISO-8601 strings. All
functions are pure (no I/O); callers decide where the payload is stored.
"""

from __future__ import annotations

import json
import math
from datetime import date
from enum import IntEnum
from typing import Any, TypeVar

from triplan.exceptions import SerializationError
from triplan.models.enums import (
    RPE_MAX,
    RPE_MIN,
    DistanceTier,
    Intensity,
    Sport,
    TrainingPhase,
)
from triplan.models.event import Event
from triplan.models.training_week import TrainingWeek
from triplan.models.workout import Workout

_E = TypeVar("_E", bound=IntEnum)

PLAN_FORMAT_VERSION = 1


# ---------------------------------------------------------------------------
# Event
# ---------------------------------------------------------------------------


def event_to_dict(event: Event) -> dict:
    return {
        "name": event.name,
        "location": event.location,
        "eventDate": event.event_date.isoformat(),
        "distanceTier": event.distance_tier.name,
        "totalWeeksOverride": event.total_weeks_override,
        "isCompleted": event.is_completed,
        "goalTimeMin": event.goal_time_min,
        "actualTimeMin": event.actual_time_min,
    }


def event_from_dict(data: dict) -> Event:
    _require_object(data, "Event")
    return Event(
        event_date=_parse_date(_require(data, "eventDate")),
        distance_tier=_parse_enum(DistanceTier, _require(data, "distanceTier")),
        total_weeks_override=data.get("totalWeeksOverride"),
        name=data.get("name", ""),
        location=data.get("location", ""),
        is_completed=_parse_bool(data, "isCompleted"),
        goal_time_min=data.get("goalTimeMin"),
        actual_time_min=data.get("actualTimeMin"),
    )


# ---------------------------------------------------------------------------
# Workout / week / plan
# ---------------------------------------------------------------------------


def workout_to_dict(workout: Workout) -> dict:
    return {
        "id": workout.workout_id,
        "date": workout.workout_date.isoformat(),
        "sport": workout.sport.name,
        "title": workout.title,
        "description": workout.description,
        "durationMin": workout.duration_min,
        "intensity": workout.intensity.name,
        "completed": workout.completed,
        "actualDurationMin": workout.actual_duration_min,
        "perceivedEffort": workout.perceived_effort,
        "notes": workout.notes,
    }


def workout_from_dict(data: dict) -> Workout:
    _require_object(data, "Workout")
    completed = _parse_bool(data, "completed")
    actual = data.get("actualDurationMin")
    if completed and actual is None:
        raise SerializationError(
            f"Workout {data.get('id')!r} is completed but has no actual duration"
        )
    return Workout(
        workout_id=str(_require(data, "id")),
        workout_date=_parse_date(_require(data, "date")),
        sport=_parse_enum(Sport, _require(data, "sport")),
        title=data.get("title", ""),
        description=data.get("description", ""),
        duration_min=_parse_minutes(_require(data, "durationMin"), "durationMin"),
        intensity=_parse_enum(Intensity, _require(data, "intensity")),
        completed=completed,
        actual_duration_min=(
            None if actual is None else _parse_minutes(actual, "actualDurationMin")
        ),
        perceived_effort=_parse_effort(data.get("perceivedEffort")),
        notes=data.get("notes", ""),
    )


def week_to_dict(week: TrainingWeek) -> dict:
    return {
        "weekNumber": week.week_number,
        "startDate": week.start_date.isoformat(),
        "phase": week.phase.name,
        "workouts": [workout_to_dict(w) for w in week.workouts],
    }


def week_from_dict(data: dict) -> TrainingWeek:
    _require_object(data, "Week")
    week_number = _require(data, "weekNumber")
    if isinstance(week_number, bool) or not isinstance(week_number, int):
        raise SerializationError(f"Invalid weekNumber {week_number!r}")
    return TrainingWeek(
        week_number=week_number,
        start_date=_parse_date(_require(data, "startDate")),
        workouts=tuple(
            workout_from_dict(w) for w in _require_list(data, "workouts", default=[])
        ),
        phase=_parse_enum(TrainingPhase, _require(data, "phase")),
    )


def plan_to_dict(weeks: list[TrainingWeek], event: Event | None = None) -> dict:
    return {
        "version": PLAN_FORMAT_VERSION,
        "event": event_to_dict(event) if event is not None else None,
        "weeks": [week_to_dict(w) for w in weeks],
    }


def plan_from_dict(data: dict) -> tuple[list[TrainingWeek], Event | None]:
    """Decode a plan payload into (weeks, event).

    Raises:
        SerializationError: On an unknown version or malformed content.
    """
    _require_object(data, "Plan")
    version = data.get("version")
    if version != PLAN_FORMAT_VERSION:
        raise SerializationError(f"Unsupported plan format version: {version!r}")
    event_data = data.get("event")
    event = event_from_dict(event_data) if event_data is not None else None
    weeks = [week_from_dict(w) for w in _require_list(data, "weeks", default=[])]
    return weeks, event


def plan_to_json_string(
    weeks: list[TrainingWeek], event: Event | None = None, indent: int = 2
) -> str:
    return json.dumps(plan_to_dict(weeks, event), indent=indent)


def plan_from_json_string(text: str) -> tuple[list[TrainingWeek], Event | None]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Plan is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SerializationError("Plan payload must be a JSON object")
    return plan_from_dict(data)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _require_object(data: Any, what: str) -> None:
    if not isinstance(data, dict):
        raise SerializationError(
            f"{what} payload must be an object, got {type(data).__name__}"
        )


def _require(data: dict, key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise SerializationError(f"Missing required field {key!r}") from None


def _require_list(data: dict, key: str, default: list) -> list:
    value = data.get(key, default)
    if not isinstance(value, list):
        raise SerializationError(f"Field {key!r} must be a list")
    return value


def _parse_bool(data: dict, key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise SerializationError(f"Field {key!r} must be a boolean, got {value!r}")
    return value


def _parse_minutes(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SerializationError(f"Field {key!r} must be a number, got {value!r}")
    minutes = float(value)
    if not math.isfinite(minutes) or minutes < 0:
        raise SerializationError(f"Field {key!r} out of range: {value!r}")
    return minutes


def _parse_effort(value: Any) -> int | None:
    if value is None:
        return None
    if (
        isinstance(value, bool)
        or not isinstance(value, int)
        or not RPE_MIN <= value <= RPE_MAX
    ):
        raise SerializationError(
            f"perceivedEffort must be an integer {RPE_MIN}-{RPE_MAX}, got {value!r}"
        )
    return value


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Invalid date {value!r}") from exc


def _parse_enum(enum_cls: type[_E], name: str) -> _E:
    try:
        return enum_cls[name]
    except (KeyError, TypeError):
        raise SerializationError(f"Unknown {enum_cls.__name__} {name!r}") from None
