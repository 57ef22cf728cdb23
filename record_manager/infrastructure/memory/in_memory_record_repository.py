"""Concrete repository implementation backed by a plain dict."""

import logging
import threading
from contextlib import nullcontext
from typing import ContextManager

from record_manager.application.interfaces import RecordRepository
from record_manager.application.interfaces.record_repository import RecordT

logger = logging.getLogger(__name__)


class InMemoryRecordRepository(RecordRepository[RecordT]):
    """Implements the RecordRepository port with a dict keyed by record id.

    With ``thread_safe=True`` every operation runs under one re-entrant lock;
    otherwise no locking is done.
    """

    def __init__(self, *, thread_safe: bool = False):
        self._records: dict[str, RecordT] = {}
        self._lock: ContextManager = threading.RLock() if thread_safe else nullcontext()

    def get_by_id(self, record_id: str) -> RecordT | None:
        with self._lock:
            return self._records.get(record_id)

    def get_all(self, skip: int = 0, limit: int = 100) -> list[RecordT]:
        if skip < 0 or limit < 0:
            raise ValueError(f"skip and limit must be non-negative, got skip={skip}, limit={limit}")
        with self._lock:
            records = list(self._records.values())
        return records[skip : skip + limit]

    def add(self, record: RecordT) -> bool:
        with self._lock:
            if record.id in self._records:
                return False
            self._records[record.id] = record
        logger.debug("Stored %s %s", record.entity_type, record.id)
        return True

    def delete(self, record_id: str) -> bool:
        with self._lock:
            removed = self._records.pop(record_id, None)
        if removed is None:
            return False
        logger.debug("Removed %s %s", removed.entity_type, record_id)
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._records)
