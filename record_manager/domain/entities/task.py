"""Domain entity for a to-do task."""

from typing import Any

from record_manager.domain.entities.record import Record
from record_manager.domain.validation import (
    TASK_DESCRIPTION_MAX_LENGTH,
    TASK_NAME_MAX_LENGTH,
    require_text,
)

_ENTITY = "Task"


def _check_name(value: Any) -> str:
    return require_text(_ENTITY, "name", value, TASK_NAME_MAX_LENGTH)


def _check_description(value: Any) -> str:
    return require_text(_ENTITY, "description", value, TASK_DESCRIPTION_MAX_LENGTH)


class Task(Record):
    """A named unit of work with a short description."""

    entity_type = _ENTITY
    _validators = {
        "name": _check_name,
        "description": _check_description,
    }

    def __init__(self, task_id: str, name: str, description: str):
        super().__init__(task_id)
        self._name = _check_name(name)
        self._description = _check_description(description)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _check_name(value)

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = _check_description(value)

    def _field_values(self) -> dict[str, Any]:
        return {"id": self._id, "name": self._name, "description": self._description}
