from __future__ import annotations

import json
import logging
from decimal import InvalidOperation
from typing import Iterable, Optional, Sequence

from ..core.constants import RECORDS_KEY
from ..payroll.aggregator import DateRange
from ..storage.key_value_store import KeyValueStore, keep_unreadable
from .memory_record_repository import InMemoryRecordRepository
from .model import Record

logger = logging.getLogger(__name__)


class JsonRecordRepository:
    """Whole record list serialized under one key of a key-value store."""

    def __init__(self, store: KeyValueStore, *, key: str = RECORDS_KEY):
        self._store = store
        self._key = key

    def _load(self) -> InMemoryRecordRepository:
        raw = self._store.get(self._key)
        if not raw:
            return InMemoryRecordRepository()
        try:
            items = json.loads(raw)
            return InMemoryRecordRepository(Record.from_dict(item) for item in items)
        except (ValueError, KeyError, TypeError, InvalidOperation) as e:
            logger.warning("Stored records under %r are unreadable (%s), starting empty", self._key, e)
            keep_unreadable(self._store, self._key, raw)
            return InMemoryRecordRepository()

    def _save(self, records: InMemoryRecordRepository) -> None:
        payload = [r.to_dict() for r in records.list_all()]
        self._store.set(self._key, json.dumps(payload, ensure_ascii=False))

    def list_all(self) -> Sequence[Record]:
        return self._load().list_all()

    def get_by_id(self, record_id: int) -> Optional[Record]:
        return self._load().get_by_id(record_id)

    def add(self, record: Record) -> None:
        records = self._load()
        records.add(record)
        self._save(records)

    def delete_by_id(self, record_id: int) -> bool:
        return self.delete_many([record_id]) == 1

    def delete_many(self, record_ids: Iterable[int]) -> int:
        records = self._load()
        removed = records.delete_many(record_ids)
        if removed:
            self._save(records)
        return removed

    def delete_in_range(self, period: DateRange) -> int:
        records = self._load()
        removed = records.delete_in_range(period)
        if removed:
            self._save(records)
        return removed
