"""triplan: periodized triathlon plan generation and plan state tracking."""

from triplan.exceptions import (
    InvalidCompletionError,
    InvalidConfigurationError,
    PlanError,
    SerializationError,
    WorkoutNotFoundError,
)
from triplan.generator import PlanGenerator, generate_plan
from triplan.store import PlanStore

__all__ = [
    "InvalidCompletionError",
    "InvalidConfigurationError",
    "PlanError",
    "PlanGenerator",
    "PlanStore",
    "SerializationError",
    "WorkoutNotFoundError",
    "generate_plan",
]
