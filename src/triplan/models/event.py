"""Target event: the race a training plan is generated for."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from triplan.models.enums import TIER_DISTANCES_KM, TIER_PLAN_WEEKS, DistanceTier


@dataclass(frozen=True)
class Event:
    """A race on the calendar.

    ``total_weeks_override`` replaces the tier's default plan length. It is
    validated by the generator, not here, so that an Event can be stored and
    round-tripped even when it carries a value the generator will reject.
    """

    event_date: date
    distance_tier: DistanceTier
    total_weeks_override: int | None = None
    name: str = ""
    location: str = ""
    is_completed: bool = False
    goal_time_min: float | None = None
    actual_time_min: float | None = None

    @property
    def estimated_plan_weeks(self) -> int:
        return TIER_PLAN_WEEKS[self.distance_tier]

    @property
    def total_weeks(self) -> int:
        """Plan length: the override when given, else the tier default."""
        if self.total_weeks_override is not None:
            return self.total_weeks_override
        return self.estimated_plan_weeks

    @property
    def distances_km(self) -> tuple[float, float, float]:
        """(swim, bike, run) leg distances in km."""
        return TIER_DISTANCES_KM[self.distance_tier]

    def days_until(self, as_of: date) -> int:
        return (self.event_date - as_of).days

    def weeks_until(self, as_of: date) -> int:
        """Whole weeks from *as_of* to the event (negative once it has passed)."""
        days = self.days_until(as_of)
        return days // 7 if days >= 0 else -((-days) // 7)
