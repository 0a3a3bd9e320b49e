"""
Zone-aware time adapters (TimePort implementations).

Supply "now" to the availability resolver, which never reads the clock
itself. Local time is always derived from UTC, so DST shifts come from
zoneinfo rather than the host's clock settings.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "America/New_York"


class _ZoneClock:
    """Derives local time in a fixed IANA zone from now_utc()."""

    def __init__(self, tz_name: str = DEFAULT_TIMEZONE) -> None:
        self._tz_name = tz_name
        self._tz = ZoneInfo(tz_name)

    def now_utc(self) -> datetime:
        raise NotImplementedError

    def now_local(self) -> datetime:
        """Current time in the adapter's zone."""
        return self.now_utc().astimezone(self._tz)

    @property
    def timezone_name(self) -> str:
        return self._tz_name


class ZoneTimeAdapter(_ZoneClock):
    """Wall-clock time source for a store-facing timezone."""

    def now_utc(self) -> datetime:
        return datetime.now(UTC)


class FrozenTimeAdapter(_ZoneClock):
    """
    Time source pinned to one instant.

    Naive instants are taken as UTC. Use advance() to step the clock in
    tests, for example across a DST change.
    """

    def __init__(self, frozen_utc: datetime, tz_name: str = DEFAULT_TIMEZONE) -> None:
        super().__init__(tz_name)
        if frozen_utc.tzinfo is None:
            frozen_utc = frozen_utc.replace(tzinfo=UTC)
        self._frozen_utc = frozen_utc.astimezone(UTC)

    def now_utc(self) -> datetime:
        return self._frozen_utc

    def advance(self, delta: timedelta) -> None:
        self._frozen_utc = self._frozen_utc + delta
