"""
Availability component.

Public API for store open/closed evaluation and weekly hours display.
"""

from .component import (
    OPEN_24X7,
    TEMPORARILY_CLOSED,
    format_time,
    format_weekly_schedule,
    is_store_open,
    load_config_from_rules,
    run,
    status_badge,
)
from .models import (
    CLOSED,
    DISPLAY_ORDER,
    AvailabilityConfig,
    AvailabilityInput,
    AvailabilityStatus,
    BadgeTone,
    DayHours,
    FormatScheduleInput,
    WeeklySchedule,
    Weekday,
)
from .ports import BusinessRepoPort, TimePort

__all__ = [
    # Functions
    "format_time",
    "format_weekly_schedule",
    "is_store_open",
    "load_config_from_rules",
    "run",
    "status_badge",
    # Models
    "AvailabilityConfig",
    "AvailabilityInput",
    "AvailabilityStatus",
    "BadgeTone",
    "CLOSED",
    "DISPLAY_ORDER",
    "DayHours",
    "FormatScheduleInput",
    "OPEN_24X7",
    "TEMPORARILY_CLOSED",
    "WeeklySchedule",
    "Weekday",
    # Ports
    "BusinessRepoPort",
    "TimePort",
]
