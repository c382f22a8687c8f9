"""Read-projection result types returned by the plan store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from triplan.models.enums import TodayStatus
from triplan.models.workout import Workout


class WeeklyStats(NamedTuple):
    """Totals for the current week. All zeros when no week is active."""

    total_hours: float = 0.0
    completed_count: int = 0
    total_count: int = 0

    @property
    def completion_fraction(self) -> float:
        if self.total_count == 0:
            return 0.0
        return self.completed_count / self.total_count


class OverallStats(NamedTuple):
    """Totals across every week of the plan."""

    total_hours: float = 0.0
    completed_count: int = 0
    total_count: int = 0

    @property
    def completion_rate(self) -> float:
        if self.total_count == 0:
            return 0.0
        return self.completed_count / self.total_count


class SportStats(NamedTuple):
    """Per-sport totals. ``hours`` counts completed workouts only."""

    completed: int
    total: int
    hours: float


@dataclass(frozen=True)
class TodaysWorkout:
    """Today's workout, or why there is none.

    ``workout`` is set only when ``status`` is WORKOUT.
    """

    status: TodayStatus
    workout: Workout | None = None

    @property
    def is_rest_day(self) -> bool:
        return self.status == TodayStatus.REST_DAY
