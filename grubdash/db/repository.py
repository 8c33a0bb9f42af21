"""
GrubDash — In-memory record store

One `InMemoryRepository` per collection per application instance.
Records are pydantic models keyed by their `id`; insertion order is the
list order. Every read-modify-write sequence runs under one lock.
"""
import logging
import threading
from typing import Generic, Iterable, Protocol, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class Repository(Protocol[RecordT]):
    def find(self, record_id: str) -> RecordT | None: ...
    def list(self) -> list[RecordT]: ...
    def insert(self, record: RecordT) -> RecordT: ...
    def update(self, record: RecordT) -> RecordT: ...
    def remove(self, record_id: str) -> RecordT | None: ...


class InMemoryRepository(Generic[RecordT]):
    """Process-local id → record mapping guarded by an RLock."""

    def __init__(self, name: str, records: Iterable[RecordT] = ()) -> None:
        self.name = name
        self._records: dict[str, RecordT] = {}
        self._lock = threading.RLock()
        for record in records:
            self.insert(record)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def find(self, record_id: str) -> RecordT | None:
        with self._lock:
            return self._records.get(record_id)

    def list(self) -> list[RecordT]:
        with self._lock:
            return list(self._records.values())

    def insert(self, record: RecordT) -> RecordT:
        with self._lock:
            if record.id in self._records:
                raise KeyError(f"duplicate {self.name} id: {record.id}")
            self._records[record.id] = record
        logger.debug("Inserted %s %s", self.name, record.id)
        return record

    def update(self, record: RecordT) -> RecordT:
        """Replace the stored record with the same id, keeping its position."""
        with self._lock:
            if record.id not in self._records:
                raise KeyError(f"unknown {self.name} id: {record.id}")
            self._records[record.id] = record
        return record

    def remove(self, record_id: str) -> RecordT | None:
        with self._lock:
            return self._records.pop(record_id, None)
