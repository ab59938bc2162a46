from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal

from ..core.enums import DayType

MINUTES_PER_HOUR = Decimal(60)


def minutes_to_hours(minutes: int) -> Decimal:
    return Decimal(minutes) / MINUTES_PER_HOUR


@dataclass(frozen=True)
class AttendanceEntry:
    """One day of attendance as entered by the worker.

    ``date`` is only used for sorting and filtering, never for pay.
    """

    date: date
    check_in: time
    check_out: time
    break_minutes: int
    day_type: DayType = DayType.NORMAL
    note: str = ""


@dataclass(frozen=True)
class PayBreakdown:
    """Hour buckets and salary for one entry.

    Buckets are stored in whole minutes so that sums across records stay
    exact; the ``*_hours`` properties convert on read.
    """

    regular_minutes: int
    overtime_tier1_minutes: int
    overtime_tier2_minutes: int
    salary: int

    @classmethod
    def zero(cls) -> "PayBreakdown":
        return cls(regular_minutes=0, overtime_tier1_minutes=0, overtime_tier2_minutes=0, salary=0)

    @property
    def overtime_total_minutes(self) -> int:
        return self.overtime_tier1_minutes + self.overtime_tier2_minutes

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
        # Sum of the tiers, not total minutes / 60, so the two always agree.
        return self.overtime_tier1_hours + self.overtime_tier2_hours

    def to_dict(self) -> dict:
        return {
            "regular_minutes": self.regular_minutes,
            "overtime_tier1_minutes": self.overtime_tier1_minutes,
            "overtime_tier2_minutes": self.overtime_tier2_minutes,
            "salary": self.salary,
        }

    def to_display(self) -> dict:
        """Hours with two decimals, as shown in the record table."""
        return {
            "regular_hours": f"{self.regular_hours:.2f}",
            "overtime_tier1_hours": f"{self.overtime_tier1_hours:.2f}",
            "overtime_tier2_hours": f"{self.overtime_tier2_hours:.2f}",
            "overtime_total_hours": f"{self.overtime_total_hours:.2f}",
            "salary": self.salary,
        }
