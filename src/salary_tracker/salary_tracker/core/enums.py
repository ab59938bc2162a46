from __future__ import annotations

from enum import Enum


class DayType(str, Enum):
    """Day classification that selects the wage rule for an entry."""

    NORMAL = "NORMAL"
    SICK_LEAVE = "SICK_LEAVE"
    DOUBLE_PAY = "DOUBLE_PAY"
    REST_DAY_WORK = "REST_DAY_WORK"
