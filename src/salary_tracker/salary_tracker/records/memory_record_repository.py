from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..payroll.aggregator import DateRange
from .model import Record


class InMemoryRecordRepository:
    def __init__(self, records: Iterable[Record] = ()):
        self._records: list[Record] = list(records)

    def list_all(self) -> Sequence[Record]:
        return list(self._records)

    def get_by_id(self, record_id: int) -> Optional[Record]:
        return next((r for r in self._records if r.record_id == record_id), None)

    def add(self, record: Record) -> None:
        self._records.append(record)

    def delete_by_id(self, record_id: int) -> bool:
        return self.delete_many([record_id]) == 1

    def delete_many(self, record_ids: Iterable[int]) -> int:
        ids = set(record_ids)
        return self._remove_where(lambda r: r.record_id in ids)

    def delete_in_range(self, period: DateRange) -> int:
        return self._remove_where(lambda r: period.contains(r.date))

    def _remove_where(self, predicate) -> int:
        before = len(self._records)
        self._records = [r for r in self._records if not predicate(r)]
        return before - len(self._records)
