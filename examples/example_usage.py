"""Example: use the service layer directly (no Flask).

Adds a few days in memory, changes the hourly rate half way, and prints the
totals and the clipboard table.
"""

from datetime import date, time

from salary_tracker.container import build_container
from salary_tracker.core.enums import DayType
from salary_tracker.payroll.aggregator import DateRange
from salary_tracker.payroll.model import AttendanceEntry
from salary_tracker.storage.key_value_store import MemoryKeyValueStore


def main():
    container = build_container(data_file="", store=MemoryKeyValueStore())
    records = container.record_service

    records.add_record(AttendanceEntry(date(2025, 3, 3), time(9, 0), time(18, 0), 60, DayType.NORMAL))
    records.add_record(AttendanceEntry(date(2025, 3, 4), time(9, 0), time(21, 0), 60, DayType.NORMAL))
    container.settings_service.update_rates(hourly_rate="220")
    records.add_record(AttendanceEntry(date(2025, 3, 8), time(9, 0), time(14, 0), 0, DayType.REST_DAY_WORK))
    records.add_record(AttendanceEntry(date(2025, 3, 10), time(9, 0), time(18, 0), 60, DayType.SICK_LEAVE, "flu"))

    march = DateRange.for_month(2025, 3)
    print(records.summarize(march).to_display())
    print(container.exporter.to_tsv(records.list_records(march)))


if __name__ == "__main__":
    main()
