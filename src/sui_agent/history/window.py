"""
Resolve free-form time filters ("today", "last week", "45 days") into a
concrete TimeWindow.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo

from sui_agent.core.models import TimeWindow

ALL_TIME = "all"

_DAYS_RE = re.compile(r"(\d+)\s*days?")

# (phrases, label, days back), checked in order after today/yesterday.
# "3 months" never wins over "month"; only "90 days" reaches that row.
_ROLLING_WINDOWS: list[tuple[tuple[str, ...], str, int]] = [
    (("week", "7 days"), "last week", 7),
    (("month", "30 days"), "last month", 30),
    (("3 months", "90 days"), "last 3 months", 90),
    (("year", "365 days"), "last year", 365),
]

FILTER_LEGEND: list[tuple[str, str]] = [
    ('"today"', "Today's transactions"),
    ('"yesterday"', "Yesterday's transactions"),
    ('"last week" or "7 days"', "Last 7 days"),
    ('"last month" or "30 days"', "Last 30 days"),
    ('"last 3 months" or "90 days"', "Last 3 months"),
    ('"last year" or "365 days"', "Last year"),
    ('"last X days"', "Custom number of days"),
    ("No filter", "All transactions"),
]


def _start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def _localize(wall: datetime, zone: tzinfo | None) -> datetime:
    """
    Attach a zone to a naive wall-clock time.

    With no zone the system local rules apply, so each bound gets the UTC
    offset in force at that moment; midnight and now may differ across DST.
    """
    if zone is None:
        return wall.astimezone()
    return wall.replace(tzinfo=zone)


def _days_before(moment: datetime, days: int) -> datetime:
    """Exactly `days` x 24h before `moment`, whatever the zone."""
    return (moment.astimezone(timezone.utc) - timedelta(days=days)).astimezone(moment.tzinfo)


def resolve_time_window(text: str | None, now: datetime | None = None) -> TimeWindow:
    """
    Parse a natural-language time filter.

    Matching is a case-insensitive substring test and the first matching
    phrase wins, so "last 7 days" resolves as "last week".

    Args:
        text: free-form filter, or None / "" for all history
        now:  reference time (defaults to the current local time). A naive
              value is local wall-clock time; an aware one keeps its zone.

    Returns:
        TimeWindow: start=None for unbounded history
    """
    now = now or datetime.now()
    zone = now.tzinfo
    wall = now.replace(tzinfo=None)
    end = _localize(wall, zone)
    lowered = (text or "").lower().strip()

    if not lowered:
        return TimeWindow(label=ALL_TIME, start=None, end=end)

    if "today" in lowered:
        return TimeWindow(label="today", start=_localize(_start_of_day(wall), zone), end=end)

    if "yesterday" in lowered:
        day = _start_of_day(wall) - timedelta(days=1)
        return TimeWindow(
            label="yesterday",
            start=_localize(day, zone),
            end=_localize(day.replace(hour=23, minute=59, second=59, microsecond=999000), zone),
            fixed_end=True,
        )

    for phrases, label, days in _ROLLING_WINDOWS:
        if any(phrase in lowered for phrase in phrases):
            return TimeWindow(label=label, start=_days_before(end, days), end=end)

    if "days" in lowered:
        match = _DAYS_RE.search(lowered)
        if match and int(match.group(1)) > 0:
            days = int(match.group(1))
            try:
                start: datetime | None = _days_before(end, days)
            except OverflowError:
                # Further back than datetime can represent: no lower bound.
                start = None
            return TimeWindow(label=f"last {days} days", start=start, end=end)

    return TimeWindow(label=ALL_TIME, start=None, end=end)
