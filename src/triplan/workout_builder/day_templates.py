"""Day templates: what gets scheduled on each day offset of a training week.

The table maps ``(day_offset, phase)`` to a DayTemplate. Offsets count from
the week's start date (0 = Monday for a Monday-start week). The rest-day
offset has no entry. Periodic key-workout substitutions are separate
override rules applied after the table lookup.
"""

from __future__ import annotations

from dataclasses import dataclass

from triplan.models.enums import (
    BRICK_WEEK_INTERVAL,
    KEY_WORKOUT_OFFSET,
    REST_DAY_OFFSET,
    Intensity,
    Sport,
    TrainingPhase,
)
from triplan.workout_builder import descriptions


@dataclass(frozen=True)
class DayTemplate:
    """Template for one day's workout.

    Attributes:
        sport: Discipline of the session.
        title: Workout title shown to the athlete.
        description: Session structure text.
        base_duration_min: Duration before the phase volume multiplier.
        intensity: Intensity tier.
        scales_with_volume: False for sessions with a fixed duration in every
            phase (the Friday recovery run).
    """

    sport: Sport
    title: str
    description: str
    base_duration_min: float
    intensity: Intensity
    scales_with_volume: bool = True


@dataclass(frozen=True)
class KeyWorkoutOverride:
    """Replace a day's template every ``week_interval`` weeks.

    Fires when ``week_number % week_interval == 0`` on ``day_offset``,
    unless the week's phase is in ``suppressed_phases``.
    """

    day_offset: int
    week_interval: int
    template: DayTemplate
    suppressed_phases: frozenset[TrainingPhase] = frozenset()

    def applies(self, day_offset: int, phase: TrainingPhase, week_number: int) -> bool:
        return (
            day_offset == self.day_offset
            and week_number % self.week_interval == 0
            and phase not in self.suppressed_phases
        )


# ---------------------------------------------------------------------------
# Phase-independent defaults
# ---------------------------------------------------------------------------

_DEFAULT_DAY_TEMPLATES: dict[int, DayTemplate] = {
    0: DayTemplate(
        sport=Sport.SWIM,
        title="Swim Technique",
        description=descriptions.SWIM_TECHNIQUE,
        base_duration_min=45.0,
        intensity=Intensity.MODERATE,
    ),
    1: DayTemplate(
        sport=Sport.RUN,
        title="Run Intervals",
        description=descriptions.RUN_BY_PHASE[TrainingPhase.BUILD],
        base_duration_min=60.0,
        intensity=Intensity.MODERATE,
    ),
    2: DayTemplate(
        sport=Sport.BIKE,
        title="Bike Endurance",
        description=descriptions.BIKE_ENDURANCE,
        base_duration_min=90.0,
        intensity=Intensity.MODERATE,
    ),
    3: DayTemplate(
        sport=Sport.SWIM,
        title="Swim Endurance",
        description=descriptions.SWIM_ENDURANCE,
        base_duration_min=60.0,
        intensity=Intensity.EASY,
    ),
    4: DayTemplate(
        sport=Sport.RUN,
        title="Recovery Run",
        description=descriptions.RECOVERY_RUN,
        base_duration_min=30.0,
        intensity=Intensity.RECOVERY,
        scales_with_volume=False,
    ),
    5: DayTemplate(
        sport=Sport.BIKE,
        title="Long Ride",
        description=descriptions.LONG_RIDE,
        base_duration_min=150.0,
        intensity=Intensity.EASY,
    ),
}

# ---------------------------------------------------------------------------
# Phase-specific variants
# ---------------------------------------------------------------------------

_PHASE_VARIANTS: dict[tuple[int, TrainingPhase], DayTemplate] = {
    (1, TrainingPhase.BASE): DayTemplate(
        sport=Sport.RUN,
        title="Base Run",
        description=descriptions.RUN_BY_PHASE[TrainingPhase.BASE],
        base_duration_min=60.0,
        intensity=Intensity.MODERATE,
    ),
    (1, TrainingPhase.PEAK): DayTemplate(
        sport=Sport.RUN,
        title="Run Intervals",
        description=descriptions.RUN_BY_PHASE[TrainingPhase.PEAK],
        base_duration_min=60.0,
        intensity=Intensity.HARD,
    ),
    (1, TrainingPhase.TAPER): DayTemplate(
        sport=Sport.RUN,
        title="Run Intervals",
        description=descriptions.RUN_BY_PHASE[TrainingPhase.TAPER],
        base_duration_min=60.0,
        intensity=Intensity.MODERATE,
    ),
    (1, TrainingPhase.RECOVERY): DayTemplate(
        sport=Sport.RUN,
        title="Run Intervals",
        description=descriptions.RUN_BY_PHASE[TrainingPhase.RECOVERY],
        base_duration_min=60.0,
        intensity=Intensity.MODERATE,
    ),
}

DAY_TEMPLATES: dict[tuple[int, TrainingPhase], DayTemplate] = {
    (offset, phase): _PHASE_VARIANTS.get((offset, phase), template)
    for offset, template in _DEFAULT_DAY_TEMPLATES.items()
    for phase in TrainingPhase
}

# ---------------------------------------------------------------------------
# Key-workout overrides
# ---------------------------------------------------------------------------

BRICK_TEMPLATE = DayTemplate(
    sport=Sport.BRICK,
    title="Brick Workout",
    description=descriptions.BRICK,
    base_duration_min=120.0,
    intensity=Intensity.MODERATE,
)

KEY_WORKOUT_OVERRIDES: tuple[KeyWorkoutOverride, ...] = (
    KeyWorkoutOverride(
        day_offset=KEY_WORKOUT_OFFSET,
        week_interval=BRICK_WEEK_INTERVAL,
        template=BRICK_TEMPLATE,
        suppressed_phases=frozenset({TrainingPhase.TAPER}),
    ),
)


def get_template(
    day_offset: int, phase: TrainingPhase, week_number: int
) -> DayTemplate | None:
    """Resolve the template for a day, or None on the rest day.

    Raises:
        KeyError: If *day_offset* is outside 0-6.
    """
    if day_offset == REST_DAY_OFFSET:
        return None
    template = DAY_TEMPLATES[(day_offset, phase)]
    for override in KEY_WORKOUT_OVERRIDES:
        if override.applies(day_offset, phase, week_number):
            template = override.template
    return template
