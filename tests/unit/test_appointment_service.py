"""Unit tests for the AppointmentService."""

from datetime import datetime, timedelta, timezone

import pytest

from record_manager.application.schemas import AppointmentCreate
from record_manager.application.services import AppointmentService
from record_manager.domain.entities import Appointment
from record_manager.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidFieldError,
)
from record_manager.infrastructure.memory import InMemoryRecordRepository


@pytest.fixture
def service() -> AppointmentService:
    return AppointmentService(InMemoryRecordRepository())


def next_week() -> datetime:
    return datetime.now(timezone.utc) + timedelta(days=7)


def test_add_get_delete(service: AppointmentService):
    appointment = Appointment("A1", next_week(), "Dentist")
    service.add(appointment)
    assert service.get("A1") is appointment

    service.delete("A1")
    assert service.get("A1") is None


def test_duplicate_id_fails(service: AppointmentService):
    service.add(Appointment("A1", next_week(), "Dentist"))
    with pytest.raises(DuplicateEntityError):
        service.add(Appointment("A1", next_week(), "Optician"))
    assert service.get("A1").description == "Dentist"


def test_delete_unknown_fails(service: AppointmentService):
    with pytest.raises(EntityNotFoundError):
        service.delete("A1")


def test_create_from_dto(service: AppointmentService):
    when = next_week()
    appointment = service.create(AppointmentCreate(id="A2", date=when, description="Checkup"))
    assert appointment.date == when
    assert service.get("A2") is appointment


def test_create_in_the_past_fails(service: AppointmentService):
    past = datetime.now(timezone.utc) - timedelta(days=2)
    with pytest.raises(InvalidFieldError):
        service.create(AppointmentCreate(id="A3", date=past, description="Too late"))
    assert len(service) == 0
