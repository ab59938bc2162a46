from __future__ import annotations

from abc import ABC, abstractmethod

from ...settings.model import RateConfig
from ..model import AttendanceEntry, PayBreakdown


class WageCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def net_minutes(self, entry: AttendanceEntry) -> int:
        raise NotImplementedError

    @abstractmethod
    def compute(self, entry: AttendanceEntry, rates: RateConfig) -> PayBreakdown:
        raise NotImplementedError
