from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Iterable, Mapping, Optional

from ..common.datetime_utils import next_day, now_millis
from ..common.validators import parse_entry_form
from ..core.exceptions import NotFoundError, ValidationError
from ..payroll.aggregator import DateRange, Totals, aggregate, filter_records, month_options
from ..payroll.calculator.base import WageCalculator
from ..payroll.calculator.standard_calculator import StandardWageCalculator
from ..payroll.model import AttendanceEntry
from ..settings.repository import SettingsRepository
from .model import Record
from .repository import RecordRepository

logger = logging.getLogger(__name__)


class RecordService:
    def __init__(
        self,
        records: RecordRepository,
        settings: SettingsRepository,
        *,
        calculator: Optional[WageCalculator] = None,
        clock: Callable[[], int] = now_millis,
    ):
        self._records = records
        self._settings = settings
        self._calculator = calculator or StandardWageCalculator()
        self._clock = clock

    def _new_record_id(self) -> int:
        taken = {r.record_id for r in self._records.list_all()}
        record_id = self._clock()
        while record_id in taken:
            record_id += 1
        return record_id

    def add_record(self, entry: AttendanceEntry) -> Record:
        rates = self._settings.get()
        breakdown = self._calculator.compute(entry, rates)
        record = Record.create(record_id=self._new_record_id(), entry=entry, breakdown=breakdown, rates=rates)
        self._records.add(record)
        logger.info(
            "Record %s added for %s (%s, salary=%s, rate=%s)",
            record.record_id,
            entry.date.isoformat(),
            entry.day_type.value,
            breakdown.salary,
            record.applied_rate,
        )
        return record

    def add_record_from_form(self, data: Mapping[str, Any]) -> Record:
        rates = self._settings.get()
        entry = parse_entry_form(data, default_break_minutes=rates.default_break_minutes)
        return self.add_record(entry)

    @staticmethod
    def next_entry_date(entry_date: date) -> date:
        """Date the entry form moves to after a successful add."""
        return next_day(entry_date)

    def list_records(self, period: Optional[DateRange] = None) -> list[Record]:
        rows = filter_records(self._records.list_all(), period)
        rows.sort(key=lambda r: (r.date, r.record_id), reverse=True)
        return rows

    def summarize(self, period: Optional[DateRange] = None) -> Totals:
        return aggregate(self._records.list_all(), period)

    def month_options(self) -> list[str]:
        return month_options(self._records.list_all())

    def settlement_period(self, year: int, month: int) -> DateRange:
        return DateRange.settlement_period(year, month, self._settings.get().settlement_day)

    def delete_record(self, record_id: int) -> None:
        if not self._records.delete_by_id(int(record_id)):
            raise NotFoundError(f"Record {record_id} does not exist")
        logger.info("Record %s deleted", record_id)

    def delete_records(self, record_ids: Iterable[int]) -> int:
        ids = [int(i) for i in record_ids]
        if not ids:
            raise ValidationError("No records selected")
        removed = self._records.delete_many(ids)
        logger.info("Bulk delete removed %d of %d selected records", removed, len(ids))
        return removed

    def delete_period(self, period: DateRange) -> int:
        if period.end < period.start:
            raise ValidationError("End date is before start date")
        removed = self._records.delete_in_range(period)
        logger.info("Removed %d records between %s and %s", removed, period.start, period.end)
        return removed
