"""In-memory record managers for contacts, tasks and appointments."""

from record_manager.application.services import (
    AppointmentService,
    ContactService,
    TaskService,
)
from record_manager.domain.entities import Appointment, Contact, Task
from record_manager.domain.exceptions import (
    DomainError,
    DuplicateEntityError,
    EntityNotFoundError,
    ErrorKind,
    InvalidFieldError,
)

__all__ = [
    "Appointment",
    "AppointmentService",
    "Contact",
    "ContactService",
    "DomainError",
    "DuplicateEntityError",
    "EntityNotFoundError",
    "ErrorKind",
    "InvalidFieldError",
    "Task",
    "TaskService",
]
