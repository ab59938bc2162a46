from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Mapping

from ..core.constants import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_HOURLY_RATE,
    DEFAULT_OVERTIME_MULTIPLIER1,
    DEFAULT_OVERTIME_MULTIPLIER2,
    DEFAULT_SETTLEMENT_DAY,
)


@dataclass(frozen=True)
class RateConfig:
    """Live pay configuration owned by the settings store.

    Records never hold a reference to this object; they copy the rate
    fields they need when they are created.
    """

    hourly_rate: Decimal = DEFAULT_HOURLY_RATE
    overtime_multiplier1: Decimal = DEFAULT_OVERTIME_MULTIPLIER1
    overtime_multiplier2: Decimal = DEFAULT_OVERTIME_MULTIPLIER2
    default_break_minutes: int = DEFAULT_BREAK_MINUTES
    settlement_day: int = DEFAULT_SETTLEMENT_DAY

    def __post_init__(self) -> None:
        # int/float rates are accepted; str() keeps 1.34 as Decimal("1.34")
        for name in ("hourly_rate", "overtime_multiplier1", "overtime_multiplier2"):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                object.__setattr__(self, name, Decimal(str(value)))

    def with_changes(self, **changes: Any) -> "RateConfig":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "hourly_rate": str(self.hourly_rate),
            "overtime_multiplier1": str(self.overtime_multiplier1),
            "overtime_multiplier2": str(self.overtime_multiplier2),
            "default_break_minutes": self.default_break_minutes,
            "settlement_day": self.settlement_day,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RateConfig":
        defaults = cls()
        return cls(
            hourly_rate=Decimal(str(data.get("hourly_rate", defaults.hourly_rate))),
            overtime_multiplier1=Decimal(str(data.get("overtime_multiplier1", defaults.overtime_multiplier1))),
            overtime_multiplier2=Decimal(str(data.get("overtime_multiplier2", defaults.overtime_multiplier2))),
            default_break_minutes=int(data.get("default_break_minutes", defaults.default_break_minutes)),
            settlement_day=int(data.get("settlement_day", defaults.settlement_day)),
        )
