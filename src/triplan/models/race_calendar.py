"""Race calendar: the athlete's list of target events.

Events are identified by name. The calendar is frozen: every edit returns
a new calendar, and the plan store is fed the selected event explicitly.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date

from triplan.models.event import Event


@dataclass(frozen=True)
class RaceCalendar:
    """Frozen calendar of events, sorted chronologically."""

    entries: tuple[Event, ...] = field(default_factory=tuple)
    selected_name: str | None = None

    # -- Factory ----------------------------------------------------------

    @classmethod
    def from_events(cls, *events: Event) -> RaceCalendar:
        """Create a RaceCalendar with entries sorted chronologically."""
        return cls(entries=tuple(sorted(events, key=lambda e: e.event_date)))

    # -- Edits ------------------------------------------------------------

    def add(self, event: Event) -> RaceCalendar:
        if self.get(event.name) is not None:
            raise ValueError(f"An event named {event.name!r} is already on the calendar")
        entries = tuple(sorted((*self.entries, event), key=lambda e: e.event_date))
        return dataclasses.replace(self, entries=entries)

    def update(self, event: Event) -> RaceCalendar:
        """Replace the entry sharing *event*'s name. Unknown names are a KeyError."""
        if self.get(event.name) is None:
            raise KeyError(event.name)
        replaced = (event if e.name == event.name else e for e in self.entries)
        entries = tuple(sorted(replaced, key=lambda e: e.event_date))
        return dataclasses.replace(self, entries=entries)

    def remove(self, name: str) -> RaceCalendar:
        """Drop an entry. Removing the selected event clears the selection."""
        entries = tuple(e for e in self.entries if e.name != name)
        selected = None if self.selected_name == name else self.selected_name
        return dataclasses.replace(self, entries=entries, selected_name=selected)

    def select(self, name: str) -> RaceCalendar:
        if self.get(name) is None:
            raise KeyError(name)
        return dataclasses.replace(self, selected_name=name)

    # -- Query helpers ----------------------------------------------------

    def get(self, name: str) -> Event | None:
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    @property
    def selected(self) -> Event | None:
        if self.selected_name is None:
            return None
        return self.get(self.selected_name)

    def upcoming(self, as_of: date) -> tuple[Event, ...]:
        """Events on or after *as_of* that are not yet completed."""
        return tuple(
            e for e in self.entries if e.event_date >= as_of and not e.is_completed
        )

    def next_race(self, as_of: date) -> Event | None:
        upcoming = self.upcoming(as_of)
        return upcoming[0] if upcoming else None
