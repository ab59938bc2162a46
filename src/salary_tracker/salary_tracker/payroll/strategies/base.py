from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal

from ...settings.model import RateConfig
from ..model import MINUTES_PER_HOUR, PayBreakdown


def pay_for(minutes: int, hourly_rate: Decimal, multiplier: Decimal) -> Decimal:
    return Decimal(minutes) * hourly_rate * multiplier / MINUTES_PER_HOUR


def round_salary(amount: Decimal) -> int:
    """Round half up to a whole money unit. Applied once, to the final sum."""
    return int(amount.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def split_overtime(overtime_minutes: int, tier1_width: int) -> tuple[int, int]:
    """First ``tier1_width`` minutes go to tier 1, the rest (uncapped) to tier 2."""
    tier1 = min(overtime_minutes, tier1_width)
    return tier1, max(overtime_minutes - tier1_width, 0)


class WageStrategy(ABC):
    """Strategy Pattern: one wage rule per day type."""

    @abstractmethod
    def breakdown(self, *, net_minutes: int, rates: RateConfig) -> PayBreakdown:
        raise NotImplementedError
