from datetime import date, time
from decimal import Decimal

from salary_tracker.core.enums import DayType
from salary_tracker.payroll.aggregator import DateRange, Totals, aggregate, month_options
from salary_tracker.payroll.calculator.standard_calculator import compute
from salary_tracker.payroll.model import AttendanceEntry
from salary_tracker.records.model import Record
from salary_tracker.settings.model import RateConfig

RATES = RateConfig()


def make_record(record_id, work_date, check_out=(18, 0), day_type=DayType.NORMAL, rates=RATES):
    entry = AttendanceEntry(
        date=work_date,
        check_in=time(9, 0),
        check_out=time(*check_out),
        break_minutes=60,
        day_type=day_type,
    )
    return Record.create(record_id=record_id, entry=entry, breakdown=compute(entry, rates), rates=rates)


def test_empty_input_gives_zero_totals():
    assert aggregate([]) == Totals.zero()
    assert aggregate([make_record(1, date(2025, 3, 3))], DateRange(date(2024, 1, 1), date(2024, 1, 31))) == Totals.zero()


def test_sums_every_field():
    records = [
        make_record(1, date(2025, 3, 3)),
        make_record(2, date(2025, 3, 4), check_out=(21, 0)),
        make_record(3, date(2025, 3, 5), day_type=DayType.SICK_LEAVE),
    ]

    totals = aggregate(records)

    assert totals.count == 3
    assert totals.salary == 1600 + 2470
    assert totals.regular_hours == 16
    assert totals.overtime_tier1_hours == 2
    assert totals.overtime_tier2_hours == 1
    assert totals.overtime_total_hours == 3


def test_filters_by_inclusive_range():
    records = [
        make_record(1, date(2025, 2, 28)),
        make_record(2, date(2025, 3, 1)),
        make_record(3, date(2025, 3, 31)),
        make_record(4, date(2025, 4, 1)),
    ]

    totals = aggregate(records, DateRange.for_month(2025, 3))

    assert totals.count == 2
    assert totals.salary == 3200


def test_additive_over_disjoint_sets():
    a = [make_record(1, date(2025, 3, 3), check_out=(19, 10)), make_record(2, date(2025, 3, 4), check_out=(13, 7))]
    b = [make_record(3, date(2025, 3, 5), check_out=(22, 50), day_type=DayType.REST_DAY_WORK)]
    period = DateRange(date(2025, 3, 1), date(2025, 3, 31))

    assert aggregate(a + b, period) == aggregate(a, period) + aggregate(b, period)
    assert aggregate(b + a) == aggregate(a + b)


def test_does_not_mutate_input():
    records = [make_record(2, date(2025, 3, 4)), make_record(1, date(2025, 3, 3))]
    snapshot = list(records)

    aggregate(records, DateRange.for_month(2025, 3))

    assert records == snapshot


def test_salary_sum_uses_each_records_own_rate():
    records = [
        make_record(1, date(2025, 3, 3), rates=RateConfig(hourly_rate=Decimal("200"))),
        make_record(2, date(2025, 3, 4), rates=RateConfig(hourly_rate=Decimal("250"))),
    ]

    assert aggregate(records).salary == 1600 + 2000


def test_settlement_period_runs_from_day_after_previous_settlement():
    period = DateRange.settlement_period(2025, 3, 25)

    assert period == DateRange(date(2025, 2, 26), date(2025, 3, 25))


def test_settlement_period_wraps_year_and_clamps_short_months():
    assert DateRange.settlement_period(2025, 1, 25) == DateRange(date(2024, 12, 26), date(2025, 1, 25))
    assert DateRange.settlement_period(2025, 3, 31) == DateRange(date(2025, 3, 1), date(2025, 3, 31))
    assert DateRange.settlement_period(2024, 2, 30) == DateRange(date(2024, 1, 31), date(2024, 2, 29))


def test_month_options_newest_first():
    records = [
        make_record(1, date(2025, 1, 9)),
        make_record(2, date(2025, 3, 3)),
        make_record(3, date(2025, 3, 4)),
        make_record(4, date(2024, 12, 31)),
    ]

    assert month_options(records) == ["2025-03", "2025-01", "2024-12"]


def test_totals_display_rounds_hours_for_output_only():
    records = [make_record(1, date(2025, 3, 3), check_out=(20, 10))]

    totals = aggregate(records)

    assert totals.overtime_tier1_minutes == 70
    assert totals.to_display()["overtime_tier1_hours"] == "1.17"
