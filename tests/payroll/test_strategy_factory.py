from decimal import Decimal

import pytest

from salary_tracker.core.enums import DayType
from salary_tracker.payroll.factory import WageStrategyFactory
from salary_tracker.payroll.strategies.regular_strategy import RegularDayStrategy
from salary_tracker.payroll.strategies.rest_day_strategy import RestDayWorkStrategy
from salary_tracker.payroll.strategies.sick_leave_strategy import SickLeaveStrategy


def test_factory_covers_every_day_type():
    factory = WageStrategyFactory()

    assert isinstance(factory.for_day_type(DayType.NORMAL), RegularDayStrategy)
    assert isinstance(factory.for_day_type(DayType.SICK_LEAVE), SickLeaveStrategy)
    assert isinstance(factory.for_day_type(DayType.REST_DAY_WORK), RestDayWorkStrategy)

    double = factory.for_day_type(DayType.DOUBLE_PAY)
    assert isinstance(double, RegularDayStrategy)
    assert double.regular_multiplier == Decimal("2")
    assert factory.for_day_type(DayType.NORMAL).regular_multiplier == Decimal("1")


def test_factory_rejects_incomplete_mapping():
    with pytest.raises(TypeError, match="SICK_LEAVE"):
        WageStrategyFactory(strategies={DayType.NORMAL: RegularDayStrategy()})
