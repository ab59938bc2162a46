from __future__ import annotations

from datetime import date, datetime, time, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_hhmm(value: str) -> time:
    """Parse HH:MM string into time."""
    return datetime.strptime(value, "%H:%M").time()


def format_hhmm(value: time) -> str:
    return value.strftime("%H:%M")


def minutes_of_day(value: time) -> int:
    return value.hour * 60 + value.minute


def next_day(value: date) -> date:
    return value + timedelta(days=1)


def month_key(value: date) -> str:
    """YYYY-MM bucket used by the month filter."""
    return value.strftime("%Y-%m")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def now_millis() -> int:
    return int(now_local().timestamp() * 1000)
