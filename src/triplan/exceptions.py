"""Custom exception hierarchy for the plan generator and plan store."""

from __future__ import annotations


class PlanError(Exception):
    """Base exception for all triplan errors."""


class InvalidConfigurationError(PlanError, ValueError):
    """Generation parameters or an installed plan are unusable."""


class InvalidCompletionError(PlanError, ValueError):
    """Completion data is out of range (effort outside 1-10, negative duration)."""


class WorkoutNotFoundError(PlanError, KeyError):
    """No workout with the requested id exists in the current plan."""

    def __init__(self, workout_id: str) -> None:
        super().__init__(f"No workout with id {workout_id!r} in the current plan")
        self.workout_id = workout_id

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class SerializationError(PlanError, ValueError):
    """A serialized event or plan payload is malformed."""
