"""Data models for the plan generator and plan store."""

from triplan.models.enums import (
    DistanceTier,
    Intensity,
    Sport,
    TodayStatus,
    TrainingPhase,
)
from triplan.models.event import Event
from triplan.models.race_calendar import RaceCalendar
from triplan.models.stats import OverallStats, SportStats, TodaysWorkout, WeeklyStats
from triplan.models.training_week import TrainingWeek
from triplan.models.workout import Workout

__all__ = [
    "DistanceTier",
    "Event",
    "Intensity",
    "OverallStats",
    "RaceCalendar",
    "Sport",
    "SportStats",
    "TodayStatus",
    "TodaysWorkout",
    "TrainingPhase",
    "TrainingWeek",
    "WeeklyStats",
    "Workout",
]
