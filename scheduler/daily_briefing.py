"""Daily briefing: installs the active plan and logs the day's training.

Usage:
    python -m scheduler.daily_briefing --once      # single run (for cron)
    python -m scheduler.daily_briefing --daemon    # APScheduler loop
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from triplan.exceptions import PlanError
from triplan.models.enums import TodayStatus
from triplan.serialization import (
    event_from_dict,
    plan_from_json_string,
    plan_to_json_string,
)
from triplan.store import PlanStore

from scheduler.config import (
    BRIEFING_HOUR,
    BRIEFING_MINUTE,
    EVENT_PATH,
    STATE_PATH,
    UPCOMING_LIMIT,
)

logger = logging.getLogger(__name__)


def load_store(
    event_path: Path,
    state_path: Path,
    clock: Callable[[], datetime] | None = None,
) -> PlanStore:
    """Build a store from the saved plan, or generate one for the event.

    A saved plan is reused only while it was generated for the same event;
    a changed event file triggers a fresh plan.
    """
    with open(event_path) as f:
        event = event_from_dict(json.load(f))

    store = PlanStore(clock=clock)
    if state_path.exists():
        weeks, saved_event = plan_from_json_string(state_path.read_text())
        if saved_event == event:
            store.install_plan(weeks, event=event)
            return store
        logger.info("Event changed since the plan was saved, regenerating")

    store.install_event(event)
    return store


def save_store(store: PlanStore, state_path: Path) -> None:
    """Write the plan to *state_path* via a temp file and rename."""
    state_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = state_path.with_suffix(state_path.suffix + ".tmp")
    tmp_path.write_text(plan_to_json_string(list(store.weeks), store.event))
    tmp_path.replace(state_path)


def log_briefing(store: PlanStore, limit: int = UPCOMING_LIMIT) -> None:
    today = store.todays_workout()
    if today.status == TodayStatus.WORKOUT and today.workout is not None:
        workout = today.workout
        logger.info(
            "Today: %s (%s, %.0f min, %s)%s",
            workout.title,
            workout.sport.name,
            workout.duration_min,
            workout.intensity.name,
            " [done]" if workout.completed else "",
        )
    elif today.status == TodayStatus.REST_DAY:
        logger.info("Today: rest day")
    else:
        logger.info("Today: no active training week")

    stats = store.weekly_stats()
    logger.info(
        "This week: %d/%d workouts, %.1f h",
        stats.completed_count,
        stats.total_count,
        stats.total_hours,
    )
    for workout in store.upcoming_workouts(limit):
        logger.info(
            "Upcoming %s: %s (%.0f min)",
            workout.workout_date.isoformat(),
            workout.title,
            workout.duration_min,
        )


def briefing_job(
    event_path: Path = EVENT_PATH,
    state_path: Path = STATE_PATH,
    limit: int = UPCOMING_LIMIT,
    clock: Callable[[], datetime] | None = None,
) -> PlanStore | None:
    """Execute one briefing: load, log, and persist the plan."""
    logger.info("Starting daily briefing")

    try:
        store = load_store(event_path, state_path, clock=clock)
    except FileNotFoundError:
        logger.error("Event not found at %s", event_path)
        return None
    except (PlanError, ValueError) as exc:
        logger.error("Failed to load plan: %s", exc)
        return None

    log_briefing(store, limit)

    try:
        save_store(store, state_path)
    except OSError as exc:
        logger.error("Failed to save plan to %s: %s", state_path, exc)
        return store

    logger.info("Daily briefing complete")
    return store


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="triplan daily briefing")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--once", action="store_true", help="Run once and exit")
    group.add_argument("--daemon", action="store_true", help="Run as APScheduler daemon")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.once:
        briefing_job()
    else:
        from apscheduler.schedulers.blocking import BlockingScheduler

        scheduler = BlockingScheduler()
        scheduler.add_job(
            briefing_job,
            "cron",
            hour=BRIEFING_HOUR,
            minute=BRIEFING_MINUTE,
            id="daily_briefing",
        )
        logger.info(
            "Scheduler started, daily briefing at %02d:%02d",
            BRIEFING_HOUR,
            BRIEFING_MINUTE,
        )
        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")


if __name__ == "__main__":
    main()
