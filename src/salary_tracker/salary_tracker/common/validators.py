from __future__ import annotations

from datetime import date, time
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from ..core.enums import DayType
from ..core.exceptions import ValidationError
from ..payroll.model import AttendanceEntry
from .datetime_utils import parse_hhmm, parse_iso_date


def require_iso_date(value: Any, field_name: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value or "").strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def require_hhmm(value: Any, field_name: str) -> time:
    if isinstance(value, time):
        return value
    try:
        return parse_hhmm(str(value or "").strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a time (HH:MM)")


def require_decimal(value: Any, field_name: str, *, minimum: Decimal, inclusive: bool = True) -> Decimal:
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not number.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    if number < minimum or (not inclusive and number == minimum):
        op = ">=" if inclusive else ">"
        raise ValidationError(f"{field_name} must be {op} {minimum}")
    return number


def require_int_range(value: Any, field_name: str, *, minimum: int, maximum: int | None = None) -> int:
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
    if number < minimum or (maximum is not None and number > maximum):
        bound = f"between {minimum} and {maximum}" if maximum is not None else f">= {minimum}"
        raise ValidationError(f"{field_name} must be {bound}")
    return number


def require_day_type(value: Any) -> DayType:
    if isinstance(value, DayType):
        return value
    try:
        return DayType(str(value or DayType.NORMAL.value).strip().upper())
    except ValueError:
        allowed = ", ".join(d.value for d in DayType)
        raise ValidationError(f"day_type must be one of: {allowed}")


def parse_entry_form(data: Mapping[str, Any], *, default_break_minutes: int) -> AttendanceEntry:
    """Turn untrusted form/JSON input into an AttendanceEntry."""
    raw_break = data.get("break_minutes")
    break_minutes = default_break_minutes if raw_break in (None, "") else require_int_range(
        raw_break, "break_minutes", minimum=0
    )
    return AttendanceEntry(
        date=require_iso_date(data.get("date"), "date"),
        check_in=require_hhmm(data.get("check_in"), "check_in"),
        check_out=require_hhmm(data.get("check_out"), "check_out"),
        break_minutes=break_minutes,
        day_type=require_day_type(data.get("day_type")),
        note=str(data.get("note") or "").strip(),
    )
