"""Fold stored records into period totals.

Totals keep hour buckets as integer minutes so that summing is exact and
order-independent; salaries are summed as the already-rounded integers
stored on each record.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Optional

from ..common.datetime_utils import month_key
from ..records.model import Record
from .model import minutes_to_hours


@dataclass(frozen=True)
class DateRange:
    """Inclusive date range filter."""

    start: date
    end: date

    def contains(self, value: date) -> bool:
        return self.start <= value <= self.end

    @classmethod
    def for_month(cls, year: int, month: int) -> "DateRange":
        last = calendar.monthrange(year, month)[1]
        return cls(start=date(year, month, 1), end=date(year, month, last))

    @classmethod
    def settlement_period(cls, year: int, month: int, settlement_day: int) -> "DateRange":
        """Pay period closing on ``settlement_day`` of the given month.

        Starts the day after the previous month's settlement day. A settlement
        day past the end of a short month falls on that month's last day.
        """
        end = _clamped_day(year, month, settlement_day)
        prev_year, prev_month = (year - 1, 12) if month == 1 else (year, month - 1)
        start = _clamped_day(prev_year, prev_month, settlement_day) + timedelta(days=1)
        return cls(start=start, end=end)


def _clamped_day(year: int, month: int, day: int) -> date:
    return date(year, month, min(day, calendar.monthrange(year, month)[1]))


@dataclass(frozen=True)
class Totals:
    count: int
    salary: int
    regular_minutes: int
    overtime_tier1_minutes: int
    overtime_tier2_minutes: int

    @classmethod
    def zero(cls) -> "Totals":
        return cls(count=0, salary=0, regular_minutes=0, overtime_tier1_minutes=0, overtime_tier2_minutes=0)

    def __add__(self, other: "Totals") -> "Totals":
        if not isinstance(other, Totals):
            return NotImplemented
        return Totals(
            count=self.count + other.count,
            salary=self.salary + other.salary,
            regular_minutes=self.regular_minutes + other.regular_minutes,
            overtime_tier1_minutes=self.overtime_tier1_minutes + other.overtime_tier1_minutes,
            overtime_tier2_minutes=self.overtime_tier2_minutes + other.overtime_tier2_minutes,
        )

    @property
    def regular_hours(self) -> Decimal:
        return minutes_to_hours(self.regular_minutes)

    @property
    def overtime_tier1_hours(self) -> Decimal:
        return minutes_to_hours(self.overtime_tier1_minutes)

    @property
    def overtime_tier2_hours(self) -> Decimal:
        return minutes_to_hours(self.overtime_tier2_minutes)

    @property
    def overtime_total_hours(self) -> Decimal:
        return self.overtime_tier1_hours + self.overtime_tier2_hours

    def to_display(self) -> dict:
        return {
            "count": self.count,
            "salary": self.salary,
            "regular_hours": f"{self.regular_hours:.2f}",
            "overtime_tier1_hours": f"{self.overtime_tier1_hours:.2f}",
            "overtime_tier2_hours": f"{self.overtime_tier2_hours:.2f}",
            "overtime_total_hours": f"{self.overtime_total_hours:.2f}",
        }


def filter_records(records: Iterable[Record], period: Optional[DateRange] = None) -> list[Record]:
    if period is None:
        return list(records)
    return [r for r in records if period.contains(r.date)]


def aggregate(records: Iterable[Record], period: Optional[DateRange] = None) -> Totals:
    totals = Totals.zero()
    for r in filter_records(records, period):
        b = r.breakdown
        totals += Totals(
            count=1,
            salary=b.salary,
            regular_minutes=b.regular_minutes,
            overtime_tier1_minutes=b.overtime_tier1_minutes,
            overtime_tier2_minutes=b.overtime_tier2_minutes,
        )
    return totals


def month_options(records: Iterable[Record]) -> list[str]:
    """Distinct YYYY-MM months present in ``records``, newest first."""
    return sorted({month_key(r.date) for r in records}, reverse=True)
