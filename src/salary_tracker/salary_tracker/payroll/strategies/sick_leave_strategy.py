from __future__ import annotations

from ...settings.model import RateConfig
from ..model import PayBreakdown
from .base import WageStrategy


class SickLeaveStrategy(WageStrategy):
    """Unpaid: times and break are ignored."""

    def breakdown(self, *, net_minutes: int, rates: RateConfig) -> PayBreakdown:
        return PayBreakdown.zero()
