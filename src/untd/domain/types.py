"""Closed enumerations for timezones, format keywords, and time units."""

from __future__ import annotations

from enum import StrEnum
from zoneinfo import ZoneInfo


class TimezoneName(StrEnum):
    """Timezones accepted by ``--timezone``."""

    UTC = "UTC"
    JST = "JST"

    @property
    def zone(self) -> ZoneInfo:
        """The IANA zone backing this name."""
        return ZoneInfo(_IANA_ZONES[self])


_IANA_ZONES: dict[TimezoneName, str] = {
    TimezoneName.UTC: "UTC",
    TimezoneName.JST: "Asia/Tokyo",
}


class FormatKeyword(StrEnum):
    """Symbolic names for the predefined output patterns."""

    DEFAULT = "default"
    ISO = "iso"
    JP = "jp"
    JPWD = "jpwd"
    JPHM = "jphm"
    JPHMS = "jphms"


class TimeUnit(StrEnum):
    """Unit suffixes accepted in an adjustment string."""

    SECONDS = "s"
    MINUTES = "m"
    HOURS = "h"
    DAYS = "d"
    WEEKS = "w"

    @property
    def seconds(self) -> int:
        """Length of one unit in seconds."""
        return UNIT_SECONDS[self]


UNIT_SECONDS: dict[TimeUnit, int] = {
    TimeUnit.SECONDS: 1,
    TimeUnit.MINUTES: 60,
    TimeUnit.HOURS: 3600,
    TimeUnit.DAYS: 86400,
    TimeUnit.WEEKS: 604800,
}
