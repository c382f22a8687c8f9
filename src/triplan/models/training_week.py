"""Training week: one 7-day block of a generated plan."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date, timedelta

from triplan.models.enums import DAYS_PER_WEEK, TrainingPhase
from triplan.models.workout import Workout


@dataclass(frozen=True)
class TrainingWeek:
    """A week of workouts in chronological order.

    Totals and completion figures are derived from ``workouts`` on every
    access and never stored.
    """

    week_number: int  # 1-indexed
    start_date: date
    workouts: tuple[Workout, ...] = field(default_factory=tuple)
    phase: TrainingPhase = TrainingPhase.BASE

    @property
    def end_date(self) -> date:
        return self.start_date + timedelta(days=DAYS_PER_WEEK - 1)

    @property
    def total_hours(self) -> float:
        """Sum of effective durations (actual when recorded) in hours."""
        return sum(w.effective_duration_min for w in self.workouts) / 60

    @property
    def completed_count(self) -> int:
        return sum(1 for w in self.workouts if w.completed)

    @property
    def total_count(self) -> int:
        return len(self.workouts)

    @property
    def completion_fraction(self) -> float:
        if not self.workouts:
            return 0.0
        return self.completed_count / self.total_count

    def contains(self, day: date) -> bool:
        """True if *day* falls within [start_date, end_date]."""
        return self.start_date <= day <= self.end_date

    def workout_on(self, day: date) -> Workout | None:
        for workout in self.workouts:
            if workout.workout_date == day:
                return workout
        return None

    def index_of(self, workout_id: str) -> int | None:
        for i, workout in enumerate(self.workouts):
            if workout.workout_id == workout_id:
                return i
        return None

    def with_workout_at(self, index: int, workout: Workout) -> TrainingWeek:
        """Return a copy with the workout at *index* replaced."""
        workouts = list(self.workouts)
        workouts[index] = workout
        return dataclasses.replace(self, workouts=tuple(workouts))
