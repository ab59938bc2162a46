from __future__ import annotations

from typing import Optional

from ...common.datetime_utils import minutes_of_day
from ...settings.model import RateConfig
from ..factory import WageStrategyFactory
from ..model import AttendanceEntry, PayBreakdown
from .base import WageCalculator


class StandardWageCalculator(WageCalculator):
    """Standard rule: (out - in) - break_minutes, not below 0, then the day-type rule.

    A check-out earlier than check-in is not wrapped to the next day; the
    entry simply counts as zero hours.
    """

    def __init__(self, *, strategy_factory: Optional[WageStrategyFactory] = None):
        self._factory = strategy_factory or WageStrategyFactory()

    def net_minutes(self, entry: AttendanceEntry) -> int:
        minutes = minutes_of_day(entry.check_out) - minutes_of_day(entry.check_in)
        minutes -= int(entry.break_minutes or 0)
        return max(minutes, 0)

    def compute(self, entry: AttendanceEntry, rates: RateConfig) -> PayBreakdown:
        strategy = self._factory.for_day_type(entry.day_type)
        return strategy.breakdown(net_minutes=self.net_minutes(entry), rates=rates)


_default_calculator = StandardWageCalculator()


def compute(entry: AttendanceEntry, rates: RateConfig) -> PayBreakdown:
    return _default_calculator.compute(entry, rates)
