from __future__ import annotations

import json
import logging
from decimal import InvalidOperation

from ..core.constants import SETTINGS_KEY
from ..storage.key_value_store import KeyValueStore, keep_unreadable
from .model import RateConfig

logger = logging.getLogger(__name__)


class JsonSettingsRepository:
    """Rate settings under one key; defaults when nothing is stored yet."""

    def __init__(self, store: KeyValueStore, *, key: str = SETTINGS_KEY, defaults: RateConfig | None = None):
        self._store = store
        self._key = key
        self._defaults = defaults or RateConfig()

    def get(self) -> RateConfig:
        raw = self._store.get(self._key)
        if not raw:
            return self._defaults
        try:
            return RateConfig.from_dict(json.loads(raw))
        except (ValueError, TypeError, AttributeError, InvalidOperation) as e:
            logger.warning("Stored settings under %r are unreadable (%s), using defaults", self._key, e)
            keep_unreadable(self._store, self._key, raw)
            return self._defaults

    def save(self, rates: RateConfig) -> None:
        self._store.set(self._key, json.dumps(rates.to_dict()))
