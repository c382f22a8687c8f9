"""Tests for the Event model."""

from __future__ import annotations

from datetime import date

import pytest

from triplan.models.enums import DistanceTier
from triplan.models.event import Event


class TestEvent:
    @pytest.mark.parametrize(
        ("tier", "weeks"),
        [
            (DistanceTier.SPRINT, 8),
            (DistanceTier.OLYMPIC, 12),
            (DistanceTier.HALF, 16),
            (DistanceTier.FULL, 20),
        ],
    )
    def test_estimated_plan_weeks(self, tier: DistanceTier, weeks: int) -> None:
        event = Event(event_date=date(2025, 6, 1), distance_tier=tier)
        assert event.estimated_plan_weeks == weeks
        assert event.total_weeks == weeks

    def test_override_replaces_tier_default(self) -> None:
        event = Event(
            event_date=date(2025, 6, 1),
            distance_tier=DistanceTier.FULL,
            total_weeks_override=10,
        )
        assert event.total_weeks == 10
        assert event.estimated_plan_weeks == 20

    def test_frozen(self, half_event: Event) -> None:
        with pytest.raises(AttributeError):
            half_event.name = "Nope"  # type: ignore[misc]

    def test_distances(self, half_event: Event) -> None:
        assert half_event.distances_km == (1.9, 90.0, 21.1)

    def test_days_and_weeks_until(self, half_event: Event) -> None:
        assert half_event.days_until(date(2025, 5, 1)) == 31
        assert half_event.weeks_until(date(2025, 5, 1)) == 4
        assert half_event.days_until(date(2025, 6, 1)) == 0

    def test_weeks_until_after_event_is_negative(self, half_event: Event) -> None:
        assert half_event.weeks_until(date(2025, 6, 16)) == -2
        assert half_event.weeks_until(date(2025, 6, 3)) == 0
