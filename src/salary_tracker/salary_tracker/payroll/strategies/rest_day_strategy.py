from __future__ import annotations

from ...core.constants import OVERTIME_TIER1_MINUTES
from ...settings.model import RateConfig
from ..model import PayBreakdown
from .base import WageStrategy, pay_for, round_salary, split_overtime


class RestDayWorkStrategy(WageStrategy):
    """All worked time is overtime: first 2h at tier 1, everything after at tier 2."""

    def breakdown(self, *, net_minutes: int, rates: RateConfig) -> PayBreakdown:
        tier1, tier2 = split_overtime(net_minutes, OVERTIME_TIER1_MINUTES)
        amount = pay_for(tier1, rates.hourly_rate, rates.overtime_multiplier1) + pay_for(
            tier2, rates.hourly_rate, rates.overtime_multiplier2
        )
        return PayBreakdown(
            regular_minutes=0,
            overtime_tier1_minutes=tier1,
            overtime_tier2_minutes=tier2,
            salary=round_salary(amount),
        )
