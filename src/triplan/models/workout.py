"""Workout record: a single scheduled session in a training plan."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import date

from triplan.models.enums import Intensity, Sport


@dataclass(frozen=True)
class Workout:
    """One scheduled session.

    Records are frozen; the plan store swaps a record in its plan slot when
    completion data changes. ``workout_id`` is preserved across every swap.
    """

    workout_id: str
    workout_date: date
    sport: Sport
    title: str
    description: str
    duration_min: float
    intensity: Intensity
    completed: bool = False
    actual_duration_min: float | None = None
    perceived_effort: int | None = None  # 1-10 RPE
    notes: str = ""

    @property
    def effective_duration_min(self) -> float:
        """Actual duration when recorded, else the planned duration."""
        if self.actual_duration_min is not None:
            return self.actual_duration_min
        return self.duration_min

    def with_completion(
        self,
        actual_duration_min: float,
        perceived_effort: int | None = None,
        notes: str = "",
    ) -> Workout:
        return dataclasses.replace(
            self,
            completed=True,
            actual_duration_min=actual_duration_min,
            perceived_effort=perceived_effort,
            notes=notes,
        )

    def without_completion(self) -> Workout:
        return dataclasses.replace(
            self,
            completed=False,
            actual_duration_min=None,
            perceived_effort=None,
            notes="",
        )
