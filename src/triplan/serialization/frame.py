"""Tabular export of a plan: one pandas row per workout.

Used for per-sport aggregation and for handing a plan to notebooks or
spreadsheet exports.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from triplan.models.enums import Sport
from triplan.models.stats import SportStats
from triplan.models.training_week import TrainingWeek

FRAME_COLUMNS = (
    "week_number",
    "phase",
    "workout_id",
    "workout_date",
    "sport",
    "title",
    "intensity",
    "duration_min",
    "effective_duration_min",
    "completed",
    "perceived_effort",
)


def plan_to_frame(weeks: list[TrainingWeek] | tuple[TrainingWeek, ...]) -> pd.DataFrame:
    """Flatten *weeks* into a DataFrame in plan order.

    Enum columns hold member names so they survive CSV/parquet export.
    """
    rows = [
        (
            week.week_number,
            week.phase.name,
            w.workout_id,
            w.workout_date,
            w.sport.name,
            w.title,
            w.intensity.name,
            w.duration_min,
            w.effective_duration_min,
            w.completed,
            w.perceived_effort,
        )
        for week in weeks
        for w in week.workouts
    ]
    return pd.DataFrame.from_records(rows, columns=list(FRAME_COLUMNS))


def sport_breakdown(frame: pd.DataFrame) -> dict[Sport, SportStats]:
    """Completed/total counts and completed hours per sport.

    Hours use the actual duration when one was recorded. Sports with no
    workouts in the frame are omitted. Keys follow Sport declaration order.
    """
    if frame.empty:
        return {}

    completed = frame["completed"].astype(bool).to_numpy()
    minutes = frame["effective_duration_min"].astype(float).to_numpy()
    totals = pd.DataFrame(
        {
            "sport": frame["sport"],
            "completed": completed.astype(int),
            "hours": np.where(completed, minutes, 0.0) / 60.0,
        }
    ).groupby("sport").agg(
        completed=("completed", "sum"),
        total=("completed", "size"),
        hours=("hours", "sum"),
    )

    return {
        sport: SportStats(
            completed=int(totals.at[sport.name, "completed"]),
            total=int(totals.at[sport.name, "total"]),
            hours=float(totals.at[sport.name, "hours"]),
        )
        for sport in Sport
        if sport.name in totals.index
    }
