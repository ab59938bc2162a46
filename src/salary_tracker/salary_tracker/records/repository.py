from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from ..payroll.aggregator import DateRange
from .model import Record


class RecordRepository(Protocol):
    """Record collection interface.

    Note (DIP): services depend on this protocol, not on a concrete store.
    """

    def list_all(self) -> Sequence[Record]:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[Record]:
        raise NotImplementedError

    def add(self, record: Record) -> None:
        raise NotImplementedError

    def delete_by_id(self, record_id: int) -> bool:
        raise NotImplementedError

    def delete_many(self, record_ids: Iterable[int]) -> int:
        raise NotImplementedError

    def delete_in_range(self, period: DateRange) -> int:
        raise NotImplementedError
