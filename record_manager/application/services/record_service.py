"""Application service (use case) shared by every record type."""

import logging
from typing import Any, Generic

from record_manager.application.interfaces import RecordRepository
from record_manager.application.interfaces.record_repository import RecordT
from record_manager.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidFieldError,
)

logger = logging.getLogger(__name__)


class RecordService(Generic[RecordT]):
    """Orchestrates id-keyed CRUD logic. Depends on the repository port (DI).

    Lookups return ``None`` for unknown ids; every other operation on an
    unknown id raises ``EntityNotFoundError``.
    """

    entity_type = "Record"

    def __init__(self, repository: RecordRepository[RecordT]):
        self._repository = repository

    def get(self, record_id: str) -> RecordT | None:
        return self._repository.get_by_id(record_id)

    def require(self, record_id: str) -> RecordT:
        record = self._repository.get_by_id(record_id)
        if record is None:
            logger.warning("%s %s not found", self.entity_type, record_id)
            raise EntityNotFoundError(self.entity_type, record_id)
        return record

    def list_all(self, skip: int = 0, limit: int = 100) -> list[RecordT]:
        return self._repository.get_all(skip=skip, limit=limit)

    def add(self, record: RecordT) -> None:
        if not self._repository.add(record):
            logger.warning("Rejected duplicate %s %s", self.entity_type, record.id)
            raise DuplicateEntityError(self.entity_type, "id", record.id)
        logger.info("Added %s %s", self.entity_type, record.id)

    def delete(self, record_id: str) -> None:
        if not self._repository.delete(record_id):
            logger.warning("Cannot delete %s %s: not found", self.entity_type, record_id)
            raise EntityNotFoundError(self.entity_type, record_id)
        logger.info("Deleted %s %s", self.entity_type, record_id)

    def _update_fields(self, record_id: str, **fields: Any) -> RecordT:
        record = self.require(record_id)
        try:
            record.update(**fields)
        except InvalidFieldError as exc:
            logger.warning("Rejected update of %s %s: %s", self.entity_type, record_id, exc)
            raise
        logger.info("Updated %s %s (%s)", self.entity_type, record_id, ", ".join(fields))
        return record

    def __len__(self) -> int:
        return self._repository.count()

    def __contains__(self, record_id: object) -> bool:
        return isinstance(record_id, str) and self._repository.get_by_id(record_id) is not None
