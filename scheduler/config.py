"""Environment-variable-based configuration for the daily briefing scheduler."""

from __future__ import annotations

import os
from pathlib import Path

EVENT_PATH: Path = Path(os.environ.get("TRIPLAN_EVENT_PATH", "data/event.json"))
STATE_PATH: Path = Path(os.environ.get("TRIPLAN_STATE_PATH", "data/plan_state.json"))
BRIEFING_HOUR: int = int(os.environ.get("TRIPLAN_BRIEFING_HOUR", "6"))
BRIEFING_MINUTE: int = int(os.environ.get("TRIPLAN_BRIEFING_MINUTE", "0"))
UPCOMING_LIMIT: int = int(os.environ.get("TRIPLAN_UPCOMING_LIMIT", "7"))
