"""Workout builder: day templates and workout construction."""

from triplan.workout_builder.builder import WorkoutBuilder

__all__ = ["WorkoutBuilder"]
