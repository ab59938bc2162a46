from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from ..common.validators import require_decimal, require_int_range
from ..core.exceptions import ValidationError
from .model import RateConfig
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get_rates(self) -> RateConfig:
        return self._settings.get()

    def update_rates(self, **changes: Any) -> RateConfig:
        """Validate and persist new rates. Existing records keep their snapshot."""
        parsers = {
            "hourly_rate": lambda v: require_decimal(v, "hourly_rate", minimum=Decimal(0), inclusive=False),
            "overtime_multiplier1": lambda v: require_decimal(v, "overtime_multiplier1", minimum=Decimal(0)),
            "overtime_multiplier2": lambda v: require_decimal(v, "overtime_multiplier2", minimum=Decimal(0)),
            "default_break_minutes": lambda v: require_int_range(v, "default_break_minutes", minimum=0),
            "settlement_day": lambda v: require_int_range(v, "settlement_day", minimum=1, maximum=31),
        }
        unknown = sorted(set(changes) - set(parsers))
        if unknown:
            raise ValidationError(f"Unknown settings: {', '.join(unknown)}")

        parsed = {name: parsers[name](value) for name, value in changes.items()}
        rates = self._settings.get().with_changes(**parsed)
        self._settings.save(rates)
        logger.info("Rate settings updated: %s", ", ".join(sorted(parsed)) or "-")
        return rates
