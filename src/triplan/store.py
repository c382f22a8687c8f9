"""PlanStore: owns the installed plan and its current-week index.

All mutation goes through the store's methods, each of which holds a
re-entrant lock for its whole body. The current week is kept as an index
into the plan list and every projection reads through it, so a workout
update is visible to the current-week view as soon as the slot is swapped.
"""

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Callable
from datetime import date, datetime

from triplan.exceptions import (
    InvalidCompletionError,
    InvalidConfigurationError,
    WorkoutNotFoundError,
)
from triplan.generator import PlanGenerator
from triplan.models.enums import DEFAULT_UPCOMING_LIMIT, RPE_MAX, RPE_MIN, Sport, TodayStatus
from triplan.models.event import Event
from triplan.models.stats import OverallStats, SportStats, TodaysWorkout, WeeklyStats
from triplan.models.training_week import TrainingWeek
from triplan.models.workout import Workout
from triplan.serialization.frame import plan_to_frame, sport_breakdown

logger = logging.getLogger(__name__)


class PlanStore:
    """Single owner of the active training plan.

    Usage:
        store = PlanStore()
        store.install_event(event)
        store.complete_workout(workout_id, actual_duration_min=50, perceived_effort=6)
        stats = store.weekly_stats()

    Args:
        clock: Returns the current time. Only its calendar date is used.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or datetime.now
        self._lock = threading.RLock()
        self._weeks: list[TrainingWeek] = []
        self._event: Event | None = None
        self._current_index: int | None = None
        # workout_id -> index of the owning week in self._weeks
        self._week_of: dict[str, int] = {}

    # -- Properties -------------------------------------------------------

    @property
    def weeks(self) -> tuple[TrainingWeek, ...]:
        with self._lock:
            return tuple(self._weeks)

    @property
    def event(self) -> Event | None:
        with self._lock:
            return self._event

    @property
    def current_week(self) -> TrainingWeek | None:
        with self._lock:
            if self._current_index is None:
                return None
            return self._weeks[self._current_index]

    def today(self) -> date:
        return self._clock().date()

    # -- Plan installation -------------------------------------------------

    def install_plan(
        self, weeks: list[TrainingWeek], event: Event | None = None
    ) -> None:
        """Replace the plan wholesale and recompute the current week.

        Raises:
            InvalidConfigurationError: If two workouts share an id. The
                existing plan is left untouched.
        """
        weeks = list(weeks)
        week_of: dict[str, int] = {}
        for index, week in enumerate(weeks):
            for workout in week.workouts:
                if workout.workout_id in week_of:
                    raise InvalidConfigurationError(
                        f"Duplicate workout id {workout.workout_id!r} in plan"
                    )
                week_of[workout.workout_id] = index

        with self._lock:
            self._weeks = weeks
            self._week_of = week_of
            self._event = event
            self._refresh_current_week()
            logger.info(
                "Installed %d-week plan (%d workouts), current week: %s",
                len(weeks),
                len(week_of),
                self._describe_current(),
            )

    def install_event(
        self, event: Event, generator: PlanGenerator | None = None
    ) -> list[TrainingWeek]:
        """Generate a plan for *event* and install it.

        Generation runs before the lock is taken; if it fails the store is
        unchanged.
        """
        weeks = (generator or PlanGenerator()).generate(event)
        self.install_plan(weeks, event=event)
        return weeks

    def refresh_current_week(self) -> TrainingWeek | None:
        """Re-evaluate which week contains today, e.g. after midnight."""
        with self._lock:
            self._refresh_current_week()
            return self.current_week

    def _refresh_current_week(self) -> None:
        today = self.today()
        self._current_index = next(
            (i for i, week in enumerate(self._weeks) if week.contains(today)),
            None,
        )

    # -- Completion protocol -------------------------------------------------

    def get_workout(self, workout_id: str) -> Workout:
        with self._lock:
            week_index, slot = self._locate(workout_id)
            return self._weeks[week_index].workouts[slot]

    def complete_workout(
        self,
        workout_id: str,
        actual_duration_min: float | None = None,
        perceived_effort: int | None = None,
        notes: str = "",
    ) -> Workout:
        """Mark a workout completed and return the updated record.

        Args:
            workout_id: Id of a workout in the current plan.
            actual_duration_min: Minutes actually trained. Defaults to the
                planned duration.
            perceived_effort: Optional RPE, 1-10.
            notes: Free-text notes.

        Raises:
            WorkoutNotFoundError: If no workout has that id.
            InvalidCompletionError: If effort or duration is out of range.
        """
        if perceived_effort is not None and (
            isinstance(perceived_effort, bool)
            or not isinstance(perceived_effort, int)
            or not RPE_MIN <= perceived_effort <= RPE_MAX
        ):
            raise InvalidCompletionError(
                f"Perceived effort must be an integer {RPE_MIN}-{RPE_MAX}, "
                f"got {perceived_effort!r}"
            )
        if actual_duration_min is not None and (
            not math.isfinite(actual_duration_min) or actual_duration_min < 0
        ):
            raise InvalidCompletionError(
                f"Actual duration must be a non-negative number, got {actual_duration_min}"
            )

        with self._lock:
            week_index, slot = self._locate(workout_id)
            workout = self._weeks[week_index].workouts[slot]
            duration = (
                workout.duration_min if actual_duration_min is None else actual_duration_min
            )
            updated = workout.with_completion(duration, perceived_effort, notes)
            self._replace(week_index, slot, updated)
            logger.info(
                "Completed workout %s (%s, %s) in %.1f min",
                workout_id,
                updated.title,
                updated.workout_date.isoformat(),
                duration,
            )
            return updated

    def uncomplete_workout(self, workout_id: str) -> Workout:
        """Clear completion, actual duration, effort and notes.

        Raises:
            WorkoutNotFoundError: If no workout has that id.
        """
        with self._lock:
            week_index, slot = self._locate(workout_id)
            updated = self._weeks[week_index].workouts[slot].without_completion()
            self._replace(week_index, slot, updated)
            logger.info("Reset workout %s", workout_id)
            return updated

    def _locate(self, workout_id: str) -> tuple[int, int]:
        week_index = self._week_of.get(workout_id)
        if week_index is None:
            raise WorkoutNotFoundError(workout_id)
        slot = self._weeks[week_index].index_of(workout_id)
        if slot is None:
            raise WorkoutNotFoundError(workout_id)
        return week_index, slot

    def _replace(self, week_index: int, slot: int, workout: Workout) -> None:
        self._weeks[week_index] = self._weeks[week_index].with_workout_at(slot, workout)
        # The week may have become current since the last refresh (date rollover).
        self._refresh_current_week()

    # -- Read projections --------------------------------------------------

    def todays_workout(self) -> TodaysWorkout:
        """Today's workout, REST_DAY, or NO_ACTIVE_WEEK."""
        with self._lock:
            week = self.current_week
            if week is None:
                return TodaysWorkout(status=TodayStatus.NO_ACTIVE_WEEK)
            workout = week.workout_on(self.today())
            if workout is None:
                return TodaysWorkout(status=TodayStatus.REST_DAY)
            return TodaysWorkout(status=TodayStatus.WORKOUT, workout=workout)

    def upcoming_workouts(self, limit: int = DEFAULT_UPCOMING_LIMIT) -> list[Workout]:
        """Incomplete workouts dated today or later, soonest first.

        Equal dates keep plan order (``sorted`` is stable).
        """
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        with self._lock:
            today = self.today()
            pending = [
                w
                for week in self._weeks
                for w in week.workouts
                if w.workout_date >= today and not w.completed
            ]
        pending.sort(key=lambda w: w.workout_date)
        return pending[:limit]

    def weekly_stats(self) -> WeeklyStats:
        """Totals for the current week; all zeros when no week is active."""
        with self._lock:
            week = self.current_week
            if week is None:
                return WeeklyStats()
            return WeeklyStats(
                total_hours=week.total_hours,
                completed_count=week.completed_count,
                total_count=week.total_count,
            )

    def overall_stats(self) -> OverallStats:
        with self._lock:
            return OverallStats(
                total_hours=sum(week.total_hours for week in self._weeks),
                completed_count=sum(week.completed_count for week in self._weeks),
                total_count=sum(week.total_count for week in self._weeks),
            )

    def sport_breakdown(self) -> dict[Sport, SportStats]:
        """Per-sport counts and completed hours across the whole plan."""
        with self._lock:
            weeks = tuple(self._weeks)
        return sport_breakdown(plan_to_frame(weeks))

    # -- Internal helpers --------------------------------------------------

    def _describe_current(self) -> str:
        if self._current_index is None:
            return "none"
        week = self._weeks[self._current_index]
        return f"week {week.week_number} ({week.phase.name})"
