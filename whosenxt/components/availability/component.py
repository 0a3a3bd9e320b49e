"""
Availability component.

Pure functions evaluating a store's weekly schedule at an explicit instant.

Precedence (first match wins):
1. Temporary closure
2. Open 24/7
3. Today's posted hours
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .models import (
    DISPLAY_ORDER,
    AvailabilityConfig,
    AvailabilityInput,
    AvailabilityStatus,
    BadgeTone,
    FormatScheduleInput,
    WeeklySchedule,
    Weekday,
)

logger = logging.getLogger(__name__)

OPEN_24X7 = "Open 24/7"
TEMPORARILY_CLOSED = "Temporarily Closed"


def format_time(time: str | None) -> str:
    """
    Format a 24h HH:MM time as 12h with AM/PM.

    "09:00" -> "9:00 AM", "00:00" -> "12:00 AM", "12:30" -> "12:30 PM".
    """
    if not time:
        return ""

    hours, minutes = time.split(":")[:2]
    hour = int(hours)
    suffix = "PM" if hour >= 12 else "AM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minutes} {suffix}"


def _local_moment(
    schedule: WeeklySchedule,
    now: datetime,
    config: AvailabilityConfig,
) -> datetime:
    """Wall-clock time the schedule is compared against."""
    if not config.use_store_timezone or now.tzinfo is None:
        return now

    tz_name = schedule.timezone or config.default_timezone
    try:
        return now.astimezone(ZoneInfo(tz_name))
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown store timezone %r, using %s", tz_name, config.default_timezone)
        return now.astimezone(ZoneInfo(config.default_timezone))


# --- Pure Functions ---


def is_store_open(
    schedule: WeeklySchedule,
    now: datetime,
    config: AvailabilityConfig | None = None,
) -> AvailabilityStatus:
    """
    Evaluate whether a store is open at `now`.

    Args:
        schedule: The store's weekly schedule
        now: Evaluation instant; its wall-clock fields are used as given
            unless config.use_store_timezone converts it first
        config: Availability configuration

    Returns:
        AvailabilityStatus with status and next-change text
    """
    config = config or AvailabilityConfig()

    if schedule.temporary_closure:
        return AvailabilityStatus(
            is_open=False,
            status_text=schedule.closure_message or TEMPORARILY_CLOSED,
        )

    if schedule.is_24x7:
        return AvailabilityStatus(is_open=True, status_text=OPEN_24X7)

    moment = _local_moment(schedule, now, config)
    today = Weekday.of(moment)
    current_time = moment.strftime("%H:%M")
    hours = schedule.day(today)

    logger.debug(
        "Evaluating %s at %s: hours %s-%s",
        today.display_name,
        current_time,
        hours.open,
        hours.close,
    )

    if not hours.is_set:
        return AvailabilityStatus(is_open=False, status_text="Closed Today")

    open_time = hours.open or ""
    close_time = hours.close or ""

    # Zero-padded HH:MM compares chronologically as strings
    if open_time <= current_time <= close_time:
        closes_at = format_time(close_time)
        return AvailabilityStatus(
            is_open=True,
            status_text=f"Open until {closes_at}",
            next_change_text=f"Closes at {closes_at}",
        )

    if current_time > close_time:
        tomorrow = today.next()
        next_open = schedule.day(tomorrow).open
        day_label = tomorrow.display_name
    else:
        next_open = open_time
        day_label = "today"

    if not next_open:
        return AvailabilityStatus(is_open=False, status_text="Closed")

    opens_at = format_time(next_open)
    return AvailabilityStatus(
        is_open=False,
        status_text=f"Closed - Opens {day_label} at {opens_at}",
        next_change_text=f"Opens {day_label} at {opens_at}",
    )


def format_weekly_schedule(schedule: WeeklySchedule) -> list[str]:
    """
    Format the weekly hours for display, Monday first and Sunday last.

    Returns ["Open 24/7"] for round-the-clock stores.
    """
    if schedule.is_24x7:
        return [OPEN_24X7]

    lines: list[str] = []
    for day in DISPLAY_ORDER:
        hours = schedule.day(day)
        if hours.is_set:
            lines.append(
                f"{day.display_name}: {format_time(hours.open)} - {format_time(hours.close)}"
            )
        else:
            lines.append(f"{day.display_name}: Closed")

    return lines


def status_badge(is_open: bool, is_closed: bool = False) -> BadgeTone:
    """Badge tone for a store status; an explicit closure wins."""
    if is_closed:
        return "closed"
    if is_open:
        return "open"
    return "pending"


# --- Run Function (Atomic Component Pattern) ---


def run(
    input_data: AvailabilityInput | FormatScheduleInput,
    config: AvailabilityConfig | None = None,
) -> AvailabilityStatus | list[str]:
    """
    Run an availability operation based on input type.

    Args:
        input_data: One of the input types
        config: Availability configuration

    Returns:
        AvailabilityStatus or formatted schedule lines
    """
    if isinstance(input_data, AvailabilityInput):
        return is_store_open(input_data.schedule, input_data.now, config)

    if isinstance(input_data, FormatScheduleInput):
        return format_weekly_schedule(input_data.schedule)

    raise TypeError(f"Unknown input type: {type(input_data)}")


# --- Configuration Loader ---


def load_config_from_rules(rules: dict[str, Any]) -> AvailabilityConfig:
    """
    Load AvailabilityConfig from whosenxt_rules.yaml.

    Args:
        rules: Parsed rules dictionary

    Returns:
        AvailabilityConfig instance
    """
    availability = rules.get("availability", {})
    defaults = AvailabilityConfig()

    return AvailabilityConfig(
        use_store_timezone=availability.get("use_store_timezone", defaults.use_store_timezone),
        default_timezone=availability.get("default_timezone", defaults.default_timezone),
    )
