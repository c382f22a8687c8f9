"""PlanGenerator: builds a periodized multi-week plan for a target event."""

from __future__ import annotations

import logging
from collections.abc import Callable

from triplan.math.periodization import (
    determine_phase,
    validate_total_weeks,
    week_start_date,
)
from triplan.models.event import Event
from triplan.models.training_week import TrainingWeek
from triplan.workout_builder.builder import WorkoutBuilder

logger = logging.getLogger(__name__)


class PlanGenerator:
    """Generates a training plan from an Event.

    Generation is a pure function of the event apart from workout ids, which
    come from the builder's id factory. Nothing is shared between calls, so
    a generator can be used from any thread.

    Usage:
        generator = PlanGenerator()
        weeks = generator.generate(event)
    """

    def __init__(
        self,
        builder: WorkoutBuilder | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.builder = builder or WorkoutBuilder(id_factory=id_factory)

    def generate(self, event: Event) -> list[TrainingWeek]:
        """Generate every week of the plan, oldest first.

        Args:
            event: Target event. Its ``total_weeks`` sets the plan length.

        Returns:
            ``total_weeks`` TrainingWeeks. The last one starts on the event date.

        Raises:
            InvalidConfigurationError: If the plan length is not a positive int.
        """
        total_weeks = validate_total_weeks(event.total_weeks)

        weeks: list[TrainingWeek] = []
        for week_number in range(1, total_weeks + 1):
            phase = determine_phase(week_number, total_weeks)
            start = week_start_date(event.event_date, week_number, total_weeks)
            weeks.append(self.builder.build_week(week_number, start, phase))

        logger.debug(
            "Generated %d-week %s plan for %s (event %s)",
            total_weeks,
            event.distance_tier.name,
            event.name or "unnamed event",
            event.event_date.isoformat(),
        )
        return weeks


def generate_plan(
    event: Event, id_factory: Callable[[], str] | None = None
) -> list[TrainingWeek]:
    """Convenience: generate a plan with a throwaway PlanGenerator."""
    return PlanGenerator(id_factory=id_factory).generate(event)
