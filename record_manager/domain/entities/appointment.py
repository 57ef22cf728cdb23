"""Domain entity for a scheduled appointment."""

from datetime import datetime
from typing import Any

from record_manager.domain.entities.record import Record
from record_manager.domain.validation import (
    APPOINTMENT_DESCRIPTION_MAX_LENGTH,
    copy_datetime,
    require_future,
    require_text,
)


class Appointment(Record):
    """A future date with a description. Nothing is mutable after construction.

    The date must be strictly later than the moment the appointment is
    built. It is kept as supplied, copied on the way in and on the way out.
    """

    entity_type = "Appointment"

    def __init__(self, appointment_id: str, date: datetime, description: str):
        super().__init__(appointment_id)
        self._date = require_future(self.entity_type, "date", date)
        self._description = require_text(
            self.entity_type, "description", description, APPOINTMENT_DESCRIPTION_MAX_LENGTH
        )

    @property
    def date(self) -> datetime:
        return copy_datetime(self._date)

    @property
    def description(self) -> str:
        return self._description

    def _field_values(self) -> dict[str, Any]:
        return {"id": self._id, "date": self._date, "description": self._description}
