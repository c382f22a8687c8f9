"""Tests for JSON-compatible plan and event serialization."""

from __future__ import annotations

import json

import pytest

from triplan.exceptions import SerializationError
from triplan.models.event import Event
from triplan.models.training_week import TrainingWeek
from triplan.serialization import (
    event_from_dict,
    event_to_dict,
    plan_from_dict,
    plan_from_json_string,
    plan_to_dict,
    plan_to_json_string,
    workout_from_dict,
    workout_to_dict,
)


class TestEventPayload:
    def test_fields(self, half_event: Event) -> None:
        data = event_to_dict(half_event)
        assert data["eventDate"] == "2025-06-01"
        assert data["distanceTier"] == "HALF"
        assert data["totalWeeksOverride"] is None
        assert data["name"] == "Ironman 70.3 Austin"

    def test_decode(self, half_event: Event) -> None:
        assert event_from_dict(event_to_dict(half_event)) == half_event

    def test_minimal_payload(self) -> None:
        event = event_from_dict({"eventDate": "2025-09-14", "distanceTier": "SPRINT"})
        assert event.total_weeks == 8
        assert event.name == ""

    def test_unknown_tier(self) -> None:
        with pytest.raises(SerializationError):
            event_from_dict({"eventDate": "2025-09-14", "distanceTier": "MARATHON"})

    def test_bad_date(self) -> None:
        with pytest.raises(SerializationError):
            event_from_dict({"eventDate": "14/09/2025", "distanceTier": "SPRINT"})

    def test_missing_field(self) -> None:
        with pytest.raises(SerializationError, match="eventDate"):
            event_from_dict({"distanceTier": "SPRINT"})


class TestWorkoutPayload:
    def test_enums_written_by_name(self, half_plan: list[TrainingWeek]) -> None:
        data = workout_to_dict(half_plan[0].workouts[0])
        assert data["sport"] == "SWIM"
        assert data["intensity"] == "MODERATE"
        assert data["date"] == "2025-02-16"
        assert data["completed"] is False

    def test_completed_without_duration_rejected(self, half_plan: list[TrainingWeek]) -> None:
        data = workout_to_dict(half_plan[0].workouts[0])
        data["completed"] = True
        with pytest.raises(SerializationError):
            workout_from_dict(data)

    def test_completed_payload(self, half_plan: list[TrainingWeek]) -> None:
        done = half_plan[0].workouts[1].with_completion(52.5, perceived_effort=8, notes="hot")
        assert workout_from_dict(workout_to_dict(done)) == done


class TestPlanPayload:
    def test_plan_survives_json(self, half_plan: list[TrainingWeek], half_event: Event) -> None:
        text = plan_to_json_string(half_plan, half_event)
        weeks, event = plan_from_json_string(text)
        assert weeks == half_plan
        assert event == half_event

    def test_plan_without_event(self, half_plan: list[TrainingWeek]) -> None:
        weeks, event = plan_from_dict(plan_to_dict(half_plan[:2]))
        assert event is None
        assert len(weeks) == 2

    def test_payload_is_json_serializable(self, half_plan: list[TrainingWeek]) -> None:
        json.dumps(plan_to_dict(half_plan))

    def test_unknown_version(self, half_plan: list[TrainingWeek]) -> None:
        data = plan_to_dict(half_plan)
        data["version"] = 99
        with pytest.raises(SerializationError):
            plan_from_dict(data)

    def test_invalid_json(self) -> None:
        with pytest.raises(SerializationError):
            plan_from_json_string("{not json")

    def test_non_object_json(self) -> None:
        with pytest.raises(SerializationError):
            plan_from_json_string("[1, 2, 3]")

    def test_serialization_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            plan_from_json_string("")


class TestMalformedPayloads:
    @pytest.mark.parametrize("entry", ["oops", 42, None, ["a"]])
    def test_week_entry_not_an_object(self, entry: object) -> None:
        with pytest.raises(SerializationError):
            plan_from_dict({"version": 1, "event": None, "weeks": [entry]})

    def test_weeks_not_a_list(self) -> None:
        with pytest.raises(SerializationError):
            plan_from_dict({"version": 1, "weeks": {"weekNumber": 1}})

    def test_workout_entry_not_an_object(self, half_plan: list[TrainingWeek]) -> None:
        data = plan_to_dict(half_plan[:1])
        data["weeks"][0]["workouts"][0] = 7
        with pytest.raises(SerializationError):
            plan_from_dict(data)

    def test_event_not_an_object(self) -> None:
        with pytest.raises(SerializationError):
            event_from_dict("2025-06-01")

    @pytest.mark.parametrize("value", ["three", "3", 2.5, True])
    def test_bad_week_number(self, half_plan: list[TrainingWeek], value: object) -> None:
        data = plan_to_dict(half_plan[:1])
        data["weeks"][0]["weekNumber"] = value
        with pytest.raises(SerializationError):
            plan_from_dict(data)

    @pytest.mark.parametrize("value", ["long", None, float("nan"), -10])
    def test_bad_duration(self, half_plan: list[TrainingWeek], value: object) -> None:
        data = workout_to_dict(half_plan[0].workouts[0])
        data["durationMin"] = value
        with pytest.raises(SerializationError):
            workout_from_dict(data)

    @pytest.mark.parametrize("value", [["SWIM"], 1])
    def test_enum_field_wrong_type(self, half_plan: list[TrainingWeek], value: object) -> None:
        data = workout_to_dict(half_plan[0].workouts[0])
        data["sport"] = value
        with pytest.raises(SerializationError):
            workout_from_dict(data)

    def test_completed_must_be_boolean(self, half_plan: list[TrainingWeek]) -> None:
        data = workout_to_dict(half_plan[0].workouts[0])
        data["completed"] = "false"
        with pytest.raises(SerializationError):
            workout_from_dict(data)

    @pytest.mark.parametrize("effort", [42, 0, "x", 6.5, True])
    def test_effort_outside_rpe_scale(
        self, half_plan: list[TrainingWeek], effort: object
    ) -> None:
        data = workout_to_dict(half_plan[0].workouts[1].with_completion(50.0))
        data["perceivedEffort"] = effort
        with pytest.raises(SerializationError):
            workout_from_dict(data)
