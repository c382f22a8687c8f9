"""Periodization math: phase per week and week start dates.

Phases follow a fixed progress ladder over the plan: the first 40% of weeks
are BASE, up to 70% BUILD, up to 90% PEAK, and the remainder TAPER. Weeks are
laid out backwards from the event so the final week contains race day.
"""

from __future__ import annotations

from datetime import date, timedelta

from triplan.exceptions import InvalidConfigurationError
from triplan.models.enums import (
    FINAL_PHASE,
    PHASE_PROGRESS_THRESHOLDS,
    PHASE_VOLUME_MULTIPLIER,
    TrainingPhase,
)


def validate_total_weeks(total_weeks: object) -> int:
    """Return *total_weeks* if it is a positive int.

    Raises:
        InvalidConfigurationError: For non-int (including bool) or non-positive values.
    """
    if isinstance(total_weeks, bool) or not isinstance(total_weeks, int):
        raise InvalidConfigurationError(
            f"Plan length must be a positive integer, got {total_weeks!r}"
        )
    if total_weeks <= 0:
        raise InvalidConfigurationError(
            f"Plan length must be a positive integer, got {total_weeks}"
        )
    return total_weeks


def determine_phase(week: int, total_weeks: int) -> TrainingPhase:
    """Training phase for a 1-indexed *week* of a *total_weeks* plan.

    Args:
        week: 1-indexed week number.
        total_weeks: Total weeks in the plan.

    Returns:
        BASE, BUILD, PEAK or TAPER. RECOVERY is never returned.

    Raises:
        ValueError: If week is outside 1..total_weeks.
    """
    validate_total_weeks(total_weeks)
    if not 1 <= week <= total_weeks:
        raise ValueError(f"Week {week} is outside plan range (1-{total_weeks})")

    progress = week / total_weeks
    for threshold, phase in PHASE_PROGRESS_THRESHOLDS:
        if progress < threshold:
            return phase
    return FINAL_PHASE


def week_start_date(event_date: date, week: int, total_weeks: int) -> date:
    """Start of *week*, counted back in whole weeks from *event_date*.

    The last week starts on the event date itself, so its 7-day range
    always contains race day.
    """
    return event_date - timedelta(weeks=total_weeks - week)


def volume_multiplier(phase: TrainingPhase) -> float:
    return PHASE_VOLUME_MULTIPLIER[phase]


def phase_sequence(total_weeks: int) -> list[TrainingPhase]:
    """Convenience: the phase of every week in a plan, in order."""
    return [determine_phase(w, total_weeks) for w in range(1, total_weeks + 1)]
