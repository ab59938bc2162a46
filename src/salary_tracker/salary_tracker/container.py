from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .payroll.calculator.standard_calculator import StandardWageCalculator
from .payroll.export import ReportExporter
from .payroll.factory import WageStrategyFactory
from .records.json_record_repository import JsonRecordRepository
from .records.service import RecordService
from .settings.json_settings_repository import JsonSettingsRepository
from .settings.model import RateConfig
from .settings.service import SettingsService
from .storage.key_value_store import JsonFileKeyValueStore, KeyValueStore


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    records_repo: JsonRecordRepository
    settings_repo: JsonSettingsRepository

    record_service: RecordService
    settings_service: SettingsService
    exporter: ReportExporter


def build_container(*, data_file: str, store: Optional[KeyValueStore] = None, defaults: Optional[RateConfig] = None) -> Container:
    store = store if store is not None else JsonFileKeyValueStore(data_file)

    records_repo = JsonRecordRepository(store)
    settings_repo = JsonSettingsRepository(store, defaults=defaults)

    record_service = RecordService(
        records_repo,
        settings_repo,
        calculator=StandardWageCalculator(strategy_factory=WageStrategyFactory()),
    )
    settings_service = SettingsService(settings_repo)

    return Container(
        store=store,
        records_repo=records_repo,
        settings_repo=settings_repo,
        record_service=record_service,
        settings_service=settings_service,
        exporter=ReportExporter(),
    )
