from datetime import date, time

from salary_tracker.core.constants import RECORDS_KEY
from salary_tracker.core.enums import DayType
from salary_tracker.payroll.aggregator import DateRange
from salary_tracker.payroll.calculator.standard_calculator import compute
from salary_tracker.payroll.model import AttendanceEntry
from salary_tracker.records.json_record_repository import JsonRecordRepository
from salary_tracker.records.model import Record
from salary_tracker.settings.model import RateConfig
from salary_tracker.storage.key_value_store import JsonFileKeyValueStore, MemoryKeyValueStore


def make_record(record_id, d, day_type=DayType.NORMAL):
    rates = RateConfig()
    entry = AttendanceEntry(d, time(9, 0), time(19, 25), 45, day_type, "note")
    return Record.create(record_id=record_id, entry=entry, breakdown=compute(entry, rates), rates=rates)


def test_records_survive_a_new_repository_instance(tmp_path):
    path = tmp_path / "data.json"
    saved = [make_record(1, date(2025, 3, 3)), make_record(2, date(2025, 3, 8), DayType.REST_DAY_WORK)]

    repo = JsonRecordRepository(JsonFileKeyValueStore(path))
    for r in saved:
        repo.add(r)

    reopened = JsonRecordRepository(JsonFileKeyValueStore(path))
    assert list(reopened.list_all()) == saved


def test_delete_many_and_range():
    repo = JsonRecordRepository(MemoryKeyValueStore())
    for i in range(1, 5):
        repo.add(make_record(i, date(2025, 3, i)))

    assert repo.delete_by_id(1) is True
    assert repo.delete_by_id(1) is False
    assert repo.delete_many([2, 42]) == 1
    assert repo.delete_in_range(DateRange(date(2025, 3, 4), date(2025, 3, 4))) == 1
    assert [r.record_id for r in repo.list_all()] == [3]


def test_unreadable_records_start_empty_and_are_kept_aside():
    store = MemoryKeyValueStore({RECORDS_KEY: "not json"})
    repo = JsonRecordRepository(store)

    assert list(repo.list_all()) == []

    repo.add(make_record(1, date(2025, 3, 3)))

    assert store.get(RECORDS_KEY + ".corrupt") == "not json"
    assert [r.record_id for r in repo.list_all()] == [1]
