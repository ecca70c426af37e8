"""
Unit tests for the time filter resolver.
These run without network access (pure Python logic).
"""

import time
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from sui_agent.history.window import resolve_time_window

NOW = datetime(2024, 3, 15, 14, 30, 0, tzinfo=timezone.utc)


def test_yesterday_has_fixed_bounds():
    window = resolve_time_window("yesterday", now=NOW)
    assert window.label == "yesterday"
    assert window.start == datetime(2024, 3, 14, 0, 0, 0, tzinfo=timezone.utc)
    assert window.end == datetime(2024, 3, 14, 23, 59, 59, 999000, tzinfo=timezone.utc)
    assert window.fixed_end is True


def test_today_starts_at_midnight_and_ends_now():
    window = resolve_time_window("What did I do today?", now=NOW)
    assert window.label == "today"
    assert window.start == datetime(2024, 3, 15, tzinfo=timezone.utc)
    assert window.end == NOW
    assert window.fixed_end is False


def test_last_7_days_resolves_as_week():
    window = resolve_time_window("last 7 days", now=NOW)
    assert window.label == "last week"
    assert window.start == NOW - timedelta(days=7)


@pytest.mark.parametrize(
    "text,label,days",
    [
        ("this week", "last week", 7),
        ("Last Month", "last month", 30),
        ("30 days", "last month", 30),
        ("90 days", "last 3 months", 90),
        ("past year", "last year", 365),
        ("365 days", "last year", 365),
        ("last 45 days", "last 45 days", 45),
        ("14 DAYS ago", "last 14 days", 14),
    ],
)
def test_rolling_windows(text, label, days):
    window = resolve_time_window(text, now=NOW)
    assert window.label == label
    assert window.start == NOW - timedelta(days=days)
    assert window.end == NOW


def test_3_months_matches_month_first():
    # "month" is checked before "3 months"
    window = resolve_time_window("last 3 months", now=NOW)
    assert window.label == "last month"
    assert window.start == NOW - timedelta(days=30)


@pytest.mark.parametrize("text", [None, "", "   ", "everything", "since launch", "0 days", "1 day"])
def test_unrecognized_input_is_unbounded(text):
    window = resolve_time_window(text, now=NOW)
    assert window.label == "all"
    assert window.start is None
    assert window.end == NOW
    assert not window.is_bounded


def test_huge_day_count_drops_lower_bound():
    window = resolve_time_window("last 99999999 days", now=NOW)
    assert window.label == "last 99999999 days"
    assert window.start is None


def test_defaults_to_current_time():
    window = resolve_time_window("today")
    assert window.end.tzinfo is not None
    assert window.start <= window.end


# ------------------------------------------------------------------
# Local midnight across a DST change (US clocks went forward 2024-03-10)
# ------------------------------------------------------------------

@pytest.fixture
def new_york_local_time(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_today_starts_at_local_midnight_on_dst_day(new_york_local_time):
    # 00:00 EST is 05:00 UTC; 10:00 the same day is already EDT
    window = resolve_time_window("today", now=datetime(2024, 3, 10, 10, 0))
    assert window.start == datetime(2024, 3, 10, 5, 0, tzinfo=timezone.utc)
    assert window.end == datetime(2024, 3, 10, 14, 0, tzinfo=timezone.utc)


def test_yesterday_uses_its_own_offset_after_dst(new_york_local_time):
    window = resolve_time_window("yesterday", now=datetime(2024, 3, 11, 10, 0))
    assert window.start == datetime(2024, 3, 10, 5, 0, tzinfo=timezone.utc)
    assert window.end == datetime(2024, 3, 11, 3, 59, 59, 999000, tzinfo=timezone.utc)


def test_aware_zone_reference_time():
    zone = ZoneInfo("America/New_York")
    window = resolve_time_window("today", now=datetime(2024, 3, 10, 10, 0, tzinfo=zone))
    assert window.start == datetime(2024, 3, 10, 5, 0, tzinfo=timezone.utc)


def test_rolling_window_is_elapsed_time_across_dst():
    zone = ZoneInfo("America/New_York")
    now = datetime(2024, 3, 11, 10, 0, tzinfo=zone)
    window = resolve_time_window("last week", now=now)
    assert now.timestamp() - window.start.timestamp() == 7 * 86400
