from __future__ import annotations

from decimal import Decimal

from ...core.constants import OVERTIME_TIER1_MINUTES, REGULAR_DAY_MINUTES
from ...settings.model import RateConfig
from ..model import PayBreakdown
from .base import WageStrategy, pay_for, round_salary, split_overtime


class RegularDayStrategy(WageStrategy):
    """Up to 8h regular time, then tiered overtime.

    ``regular_multiplier`` scales the regular-hour pay only (2 on double-pay days).
    """

    def __init__(self, regular_multiplier: Decimal = Decimal(1)):
        self.regular_multiplier = regular_multiplier

    def breakdown(self, *, net_minutes: int, rates: RateConfig) -> PayBreakdown:
        regular = min(net_minutes, REGULAR_DAY_MINUTES)
        overtime = max(net_minutes - REGULAR_DAY_MINUTES, 0)
        tier1, tier2 = split_overtime(overtime, OVERTIME_TIER1_MINUTES)

        regular_pay = pay_for(regular, rates.hourly_rate, self.regular_multiplier)
        overtime_pay = pay_for(tier1, rates.hourly_rate, rates.overtime_multiplier1) + pay_for(
            tier2, rates.hourly_rate, rates.overtime_multiplier2
        )
        return PayBreakdown(
            regular_minutes=regular,
            overtime_tier1_minutes=tier1,
            overtime_tier2_minutes=tier2,
            salary=round_salary(regular_pay + overtime_pay),
        )
