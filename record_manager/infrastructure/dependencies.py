"""Dependency wiring — builds each service over its in-memory repository."""

from record_manager.config import Settings, get_settings
from record_manager.application.services import (
    AppointmentService,
    ContactService,
    TaskService,
)
from record_manager.infrastructure.memory import InMemoryRecordRepository


def _repository(settings: Settings | None) -> InMemoryRecordRepository:
    settings = settings or get_settings()
    return InMemoryRecordRepository(thread_safe=settings.registry_thread_safe)


def get_contact_service(settings: Settings | None = None) -> ContactService:
    """Provides a ContactService with an empty repository wired up."""
    return ContactService(_repository(settings))


def get_task_service(settings: Settings | None = None) -> TaskService:
    """Provides a TaskService with an empty repository wired up."""
    return TaskService(_repository(settings))


def get_appointment_service(settings: Settings | None = None) -> AppointmentService:
    """Provides an AppointmentService with an empty repository wired up."""
    return AppointmentService(_repository(settings))
