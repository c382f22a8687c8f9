"""Daily briefing scheduler for the active training plan."""
