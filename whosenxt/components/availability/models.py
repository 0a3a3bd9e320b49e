"""
Availability component models.

Weekly store schedules and the open/closed status derived from them.

Invariants:
- temporary_closure overrides is_24x7 and the weekly hours
- is_24x7 overrides the weekly hours
- A day with only one bound set is closed
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any, Literal

# --- Days ---


class Weekday(IntEnum):
    """Day of week, numbered from Sunday like the business records."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, moment: datetime) -> Weekday:
        """Weekday of a datetime (Python's weekday() starts at Monday)."""
        return cls((moment.weekday() + 1) % 7)

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def record_key(self) -> str:
        return self.name.lower()

    def next(self) -> Weekday:
        return Weekday((self + 1) % 7)


# Monday first, Sunday last, whatever the locale says
DISPLAY_ORDER: tuple[Weekday, ...] = (
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
    Weekday.SUNDAY,
)


@dataclass(frozen=True)
class DayHours:
    """Open and close time for one day, as zero-padded 24h HH:MM strings."""

    open: str | None = None
    close: str | None = None

    @property
    def is_set(self) -> bool:
        return bool(self.open) and bool(self.close)


CLOSED = DayHours()


@dataclass(frozen=True)
class WeeklySchedule:
    """
    A store's posted weekly hours plus override flags.

    `timezone` is carried for callers; evaluation only uses it when
    AvailabilityConfig.use_store_timezone is on.
    """

    hours: Mapping[Weekday, DayHours] = field(default_factory=dict)
    is_24x7: bool = False
    temporary_closure: bool = False
    closure_message: str | None = None
    timezone: str | None = None

    def day(self, weekday: Weekday) -> DayHours:
        return self.hours.get(weekday, CLOSED)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> WeeklySchedule:
        """
        Build a schedule from a flat business record.

        Reads `{day}_open` / `{day}_close` for each day plus `is_24_7`,
        `temporary_closure`, `closure_message` and `timezone`. Missing keys
        are treated as null.
        """
        hours = {
            day: DayHours(
                open=record.get(f"{day.record_key}_open") or None,
                close=record.get(f"{day.record_key}_close") or None,
            )
            for day in Weekday
        }
        return cls(
            hours=hours,
            is_24x7=bool(record.get("is_24_7", False)),
            temporary_closure=bool(record.get("temporary_closure", False)),
            closure_message=record.get("closure_message") or None,
            timezone=record.get("timezone") or None,
        )


# --- Status ---

BadgeTone = Literal["open", "closed", "pending"]


@dataclass(frozen=True)
class AvailabilityStatus:
    """Open/closed state of a store at one instant."""

    is_open: bool
    status_text: str
    next_change_text: str | None = None


# --- Inputs ---


@dataclass(frozen=True)
class AvailabilityInput:
    """Input for evaluating a schedule at an instant."""

    schedule: WeeklySchedule
    now: datetime


@dataclass(frozen=True)
class FormatScheduleInput:
    """Input for formatting a schedule for display."""

    schedule: WeeklySchedule


# --- Configuration ---


@dataclass(frozen=True)
class AvailabilityConfig:
    """Availability configuration from rules."""

    use_store_timezone: bool = False
    default_timezone: str = "America/New_York"
