"""
Availability component ports.

External interfaces supplying the evaluation instant and schedule records.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Protocol


class TimePort(Protocol):
    """
    Time source for availability checks.

    The resolver never reads the wall clock itself; shells ask this port
    for "now" and pass it in.
    """

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...

    def now_local(self) -> datetime:
        """Get current time in the adapter's display timezone."""
        ...

    @property
    def timezone_name(self) -> str:
        """Get the display timezone name (e.g., 'America/New_York')."""
        ...


class BusinessRepoPort(Protocol):
    """Read-only access to business records carrying weekly hours."""

    def get_business(self, business_id: str) -> Mapping[str, Any] | None:
        """Get one business record by id."""
        ...

    def list_businesses(self, category: str | None = None) -> list[Mapping[str, Any]]:
        """List approved business records, optionally by category."""
        ...
