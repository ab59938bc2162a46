from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping

from ..common.datetime_utils import format_hhmm, parse_hhmm, parse_iso_date
from ..core.enums import DayType
from ..payroll.model import AttendanceEntry, PayBreakdown
from ..settings.model import RateConfig


@dataclass(frozen=True)
class Record:
    """Domain entity: a stored, immutable pay record.

    The ``applied_*`` fields are value copies of the rates in effect when
    the record was computed; later settings changes do not reach them.
    """

    record_id: int
    entry: AttendanceEntry
    breakdown: PayBreakdown
    applied_rate: Decimal
    applied_overtime_multiplier1: Decimal
    applied_overtime_multiplier2: Decimal

    @classmethod
    def create(cls, *, record_id: int, entry: AttendanceEntry, breakdown: PayBreakdown, rates: RateConfig) -> "Record":
        return cls(
            record_id=record_id,
            entry=entry,
            breakdown=breakdown,
            applied_rate=rates.hourly_rate,
            applied_overtime_multiplier1=rates.overtime_multiplier1,
            applied_overtime_multiplier2=rates.overtime_multiplier2,
        )

    @property
    def date(self):
        return self.entry.date

    @property
    def salary(self) -> int:
        return self.breakdown.salary

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "date": self.entry.date.isoformat(),
            "check_in": format_hhmm(self.entry.check_in),
            "check_out": format_hhmm(self.entry.check_out),
            "break_minutes": self.entry.break_minutes,
            "day_type": self.entry.day_type.value,
            "note": self.entry.note,
            **self.breakdown.to_dict(),
            "applied_rate": str(self.applied_rate),
            "applied_overtime_multiplier1": str(self.applied_overtime_multiplier1),
            "applied_overtime_multiplier2": str(self.applied_overtime_multiplier2),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Record":
        entry = AttendanceEntry(
            date=parse_iso_date(data["date"]),
            check_in=parse_hhmm(data["check_in"]),
            check_out=parse_hhmm(data["check_out"]),
            break_minutes=int(data["break_minutes"]),
            day_type=DayType(data["day_type"]),
            note=data.get("note") or "",
        )
        breakdown = PayBreakdown(
            regular_minutes=int(data["regular_minutes"]),
            overtime_tier1_minutes=int(data["overtime_tier1_minutes"]),
            overtime_tier2_minutes=int(data["overtime_tier2_minutes"]),
            salary=int(data["salary"]),
        )
        return cls(
            record_id=int(data["id"]),
            entry=entry,
            breakdown=breakdown,
            applied_rate=Decimal(str(data["applied_rate"])),
            applied_overtime_multiplier1=Decimal(str(data["applied_overtime_multiplier1"])),
            applied_overtime_multiplier2=Decimal(str(data["applied_overtime_multiplier2"])),
        )
