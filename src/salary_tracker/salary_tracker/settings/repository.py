from __future__ import annotations

from typing import Protocol

from .model import RateConfig


class SettingsRepository(Protocol):
    def get(self) -> RateConfig:
        raise NotImplementedError

    def save(self, rates: RateConfig) -> None:
        raise NotImplementedError
