"""Shared test fixtures: events, deterministic ids, fixed clocks, generated plans.

The reference plan is a 16-week HALF plan ending 2025-06-01. Week 1 starts
2025-02-16 and each later week starts 7 days after the previous one, so
week 3 runs 2025-03-02 .. 2025-03-08 with its rest day on 2025-03-08.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable
from datetime import date, datetime

import pytest

from triplan.generator import PlanGenerator
from triplan.models.enums import DistanceTier
from triplan.models.event import Event
from triplan.models.training_week import TrainingWeek
from triplan.store import PlanStore

EVENT_DATE = date(2025, 6, 1)

# Wednesday of week 3 (BASE phase)
MID_WEEK_3 = datetime(2025, 3, 5, 9, 30)
# Last day of week 3 (rest-day offset)
REST_DAY_WEEK_3 = datetime(2025, 3, 8, 18, 0)
# Before week 1 starts
BEFORE_PLAN = datetime(2025, 1, 1, 8, 0)


def sequential_ids() -> Callable[[], str]:
    counter = itertools.count(1)
    return lambda: f"w-{next(counter):03d}"


def fixed_clock(moment: datetime) -> Callable[[], datetime]:
    return lambda: moment


@pytest.fixture
def make_ids() -> Callable[[], Callable[[], str]]:
    """Factory for fresh sequential id generators ("w-001", "w-002", ...)."""
    return sequential_ids


@pytest.fixture
def make_store() -> Callable[..., PlanStore]:
    """Factory: make_store(weeks, moment, event=None) -> installed PlanStore."""

    def _make(
        weeks: list[TrainingWeek], moment: datetime, event: Event | None = None
    ) -> PlanStore:
        s = PlanStore(clock=fixed_clock(moment))
        s.install_plan(weeks, event=event)
        return s

    return _make


@pytest.fixture
def half_event() -> Event:
    """70.3 on 2025-06-01 with the default 16-week plan."""
    return Event(
        event_date=EVENT_DATE,
        distance_tier=DistanceTier.HALF,
        name="Ironman 70.3 Austin",
        location="Austin, TX",
    )


@pytest.fixture
def sprint_event() -> Event:
    return Event(
        event_date=date(2025, 9, 14),
        distance_tier=DistanceTier.SPRINT,
        name="City Sprint",
    )


@pytest.fixture
def generator() -> PlanGenerator:
    return PlanGenerator(id_factory=sequential_ids())


@pytest.fixture
def half_plan(generator: PlanGenerator, half_event: Event) -> list[TrainingWeek]:
    return generator.generate(half_event)


@pytest.fixture
def store(half_plan: list[TrainingWeek], half_event: Event) -> PlanStore:
    """Store with the half plan installed, clock on Wednesday of week 3."""
    s = PlanStore(clock=fixed_clock(MID_WEEK_3))
    s.install_plan(half_plan, event=half_event)
    return s


@pytest.fixture
def rest_day_store(half_plan: list[TrainingWeek], half_event: Event) -> PlanStore:
    s = PlanStore(clock=fixed_clock(REST_DAY_WEEK_3))
    s.install_plan(half_plan, event=half_event)
    return s


@pytest.fixture
def idle_store(half_plan: list[TrainingWeek], half_event: Event) -> PlanStore:
    """Store whose clock is before the plan starts (no current week)."""
    s = PlanStore(clock=fixed_clock(BEFORE_PLAN))
    s.install_plan(half_plan, event=half_event)
    return s
