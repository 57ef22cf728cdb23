"""Abstract repository interface (port) for id-keyed record storage."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from record_manager.domain.entities import Record

RecordT = TypeVar("RecordT", bound=Record)


class RecordRepository(ABC, Generic[RecordT]):
    """Port for record storage — implemented in the infrastructure layer.

    ``add`` and ``delete`` are single atomic steps that report whether they
    changed anything, so callers never need a separate existence check.
    """

    @abstractmethod
    def get_by_id(self, record_id: str) -> RecordT | None:
        """Retrieve a single record by its id."""
        ...

    @abstractmethod
    def get_all(self, skip: int = 0, limit: int = 100) -> list[RecordT]:
        """Retrieve a paginated list of records."""
        ...

    @abstractmethod
    def add(self, record: RecordT) -> bool:
        """Store a record. Returns False, storing nothing, if the id is taken."""
        ...

    @abstractmethod
    def delete(self, record_id: str) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Number of stored records."""
        ...
