"""Base domain entity — an id-keyed object whose fields are validated on every write."""

from typing import Any, Callable

from record_manager.domain.validation import ID_MAX_LENGTH, require_text


class Record:
    """Common shape of Contact, Task and Appointment.

    The id is validated once and exposed read-only. Subclasses list their
    mutable fields in ``_validators`` so ``update()`` can check every value
    before any of them is assigned.
    """

    entity_type = "Record"
    _validators: dict[str, Callable[[Any], Any]] = {}

    def __init__(self, record_id: str):
        self._id = require_text(self.entity_type, "id", record_id, ID_MAX_LENGTH)

    @property
    def id(self) -> str:
        return self._id

    def update(self, **fields: Any) -> None:
        """Update several mutable fields at once; all-or-nothing.

        Every value is validated first, so a rejected value leaves the
        record exactly as it was.
        """
        accepted: dict[str, Any] = {}
        for name, value in fields.items():
            validator = self._validators.get(name)
            if validator is None:
                raise AttributeError(f"{self.entity_type} has no mutable field '{name}'")
            accepted[name] = validator(value)
        for name, value in accepted.items():
            setattr(self, f"_{name}", value)

    def _field_values(self) -> dict[str, Any]:
        return {"id": self._id}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._field_values() == other._field_values()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._field_values().items())
        return f"{type(self).__name__}({fields})"
