"""Enumerations and plan constants for the triathlon plan generator."""

from enum import IntEnum, auto


class TrainingPhase(IntEnum):
    """Macrocycle phases, ordered as they occur in a generated plan.

    RECOVERY is never produced by the threshold ladder; it exists for
    manually assigned recovery blocks.
    """

    BASE = auto()
    BUILD = auto()
    PEAK = auto()
    TAPER = auto()
    RECOVERY = auto()


class Sport(IntEnum):
    """Discipline of a single workout."""

    SWIM = auto()
    BIKE = auto()
    RUN = auto()
    BRICK = auto()       # Bike immediately followed by a run
    STRENGTH = auto()
    REST = auto()


class Intensity(IntEnum):
    """Workout intensity tiers, easiest first."""

    RECOVERY = auto()
    EASY = auto()
    MODERATE = auto()
    HARD = auto()
    RACE = auto()


class DistanceTier(IntEnum):
    """Triathlon race distance categories."""

    SPRINT = auto()
    OLYMPIC = auto()
    HALF = auto()    # 70.3
    FULL = auto()    # 140.6


class TodayStatus(IntEnum):
    """Outcome of asking the store for today's workout."""

    WORKOUT = auto()
    REST_DAY = auto()
    NO_ACTIVE_WEEK = auto()


# ---------------------------------------------------------------------------
# Phase constants
# ---------------------------------------------------------------------------

PHASE_VOLUME_MULTIPLIER: dict[TrainingPhase, float] = {
    TrainingPhase.BASE: 0.8,
    TrainingPhase.BUILD: 1.0,
    TrainingPhase.PEAK: 1.2,
    TrainingPhase.TAPER: 0.6,
    TrainingPhase.RECOVERY: 0.4,
}

# Progress thresholds (week / total_weeks), evaluated in order, first match wins.
# Anything at or above the last threshold is TAPER.
PHASE_PROGRESS_THRESHOLDS: tuple[tuple[float, TrainingPhase], ...] = (
    (0.4, TrainingPhase.BASE),
    (0.7, TrainingPhase.BUILD),
    (0.9, TrainingPhase.PEAK),
)
FINAL_PHASE = TrainingPhase.TAPER

# ---------------------------------------------------------------------------
# Weekly structure
# ---------------------------------------------------------------------------

DAYS_PER_WEEK = 7
REST_DAY_OFFSET = 6   # Sunday when the week starts on a Monday
WORKOUTS_PER_WEEK = DAYS_PER_WEEK - 1

# Every Nth week the Saturday long ride becomes a brick (outside TAPER)
KEY_WORKOUT_OFFSET = 5
BRICK_WEEK_INTERVAL = 3

# ---------------------------------------------------------------------------
# Distance tiers
# ---------------------------------------------------------------------------

TIER_PLAN_WEEKS: dict[DistanceTier, int] = {
    DistanceTier.SPRINT: 8,
    DistanceTier.OLYMPIC: 12,
    DistanceTier.HALF: 16,
    DistanceTier.FULL: 20,
}

# (swim, bike, run) in km
TIER_DISTANCES_KM: dict[DistanceTier, tuple[float, float, float]] = {
    DistanceTier.SPRINT: (0.75, 20.0, 5.0),
    DistanceTier.OLYMPIC: (1.5, 40.0, 10.0),
    DistanceTier.HALF: (1.9, 90.0, 21.1),
    DistanceTier.FULL: (3.8, 180.0, 42.2),
}

# ---------------------------------------------------------------------------
# Perceived effort (RPE)
# ---------------------------------------------------------------------------

RPE_MIN = 1
RPE_MAX = 10

DEFAULT_UPCOMING_LIMIT = 7
