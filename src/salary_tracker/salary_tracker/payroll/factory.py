from __future__ import annotations

from dataclasses import dataclass, field

from ..core.constants import DOUBLE_PAY_MULTIPLIER
from ..core.enums import DayType
from .strategies.base import WageStrategy
from .strategies.regular_strategy import RegularDayStrategy
from .strategies.rest_day_strategy import RestDayWorkStrategy
from .strategies.sick_leave_strategy import SickLeaveStrategy


def _default_strategies() -> dict[DayType, WageStrategy]:
    return {
        DayType.NORMAL: RegularDayStrategy(),
        DayType.DOUBLE_PAY: RegularDayStrategy(regular_multiplier=DOUBLE_PAY_MULTIPLIER),
        DayType.SICK_LEAVE: SickLeaveStrategy(),
        DayType.REST_DAY_WORK: RestDayWorkStrategy(),
    }


@dataclass
class WageStrategyFactory:
    """Factory Pattern: map every DayType to its wage strategy."""

    strategies: dict[DayType, WageStrategy] = field(default_factory=_default_strategies)

    def __post_init__(self) -> None:
        missing = [d.value for d in DayType if d not in self.strategies]
        if missing:
            raise TypeError(f"no wage strategy for day types: {', '.join(missing)}")

    def for_day_type(self, day_type: DayType) -> WageStrategy:
        return self.strategies[day_type]
