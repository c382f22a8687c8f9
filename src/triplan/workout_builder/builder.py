"""WorkoutBuilder: turns day templates into concrete Workout records."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import date, timedelta

from triplan.math.periodization import volume_multiplier
from triplan.models.enums import DAYS_PER_WEEK, TrainingPhase
from triplan.models.training_week import TrainingWeek
from triplan.models.workout import Workout
from triplan.workout_builder.day_templates import DayTemplate, get_template


def new_workout_id() -> str:
    return str(uuid.uuid4())


def planned_duration(template: DayTemplate, phase: TrainingPhase) -> float:
    """Template duration scaled by the phase volume multiplier, to 0.1 min."""
    if not template.scales_with_volume:
        return template.base_duration_min
    return round(template.base_duration_min * volume_multiplier(phase), 1)


class WorkoutBuilder:
    """Builds the workouts of one training week from the day template table.

    Usage::

        builder = WorkoutBuilder()
        week = builder.build_week(3, date(2025, 3, 3), TrainingPhase.BASE)

    Args:
        id_factory: Zero-argument callable producing unique workout ids.
            Defaults to random UUID4 strings.
    """

    def __init__(self, id_factory: Callable[[], str] | None = None) -> None:
        self.id_factory = id_factory or new_workout_id

    def build_workout(
        self, template: DayTemplate, phase: TrainingPhase, workout_date: date
    ) -> Workout:
        return Workout(
            workout_id=self.id_factory(),
            workout_date=workout_date,
            sport=template.sport,
            title=template.title,
            description=template.description,
            duration_min=planned_duration(template, phase),
            intensity=template.intensity,
        )

    def build_week(
        self, week_number: int, start_date: date, phase: TrainingPhase
    ) -> TrainingWeek:
        """Build a full week: one workout per day, none on the rest day."""
        workouts: list[Workout] = []
        for offset in range(DAYS_PER_WEEK):
            template = get_template(offset, phase, week_number)
            if template is None:
                continue
            workouts.append(
                self.build_workout(template, phase, start_date + timedelta(days=offset))
            )

        return TrainingWeek(
            week_number=week_number,
            start_date=start_date,
            workouts=tuple(workouts),
            phase=phase,
        )
