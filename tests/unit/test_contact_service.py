"""Unit tests for the ContactService."""

import logging

import pytest

from record_manager.application.schemas import ContactCreate, ContactUpdate
from record_manager.application.services import ContactService
from record_manager.domain.entities import Contact
from record_manager.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ErrorKind,
    InvalidFieldError,
)
from record_manager.infrastructure.memory import InMemoryRecordRepository


@pytest.fixture
def service() -> ContactService:
    return ContactService(InMemoryRecordRepository())


def alice() -> Contact:
    return Contact("ID123", "Alice", "Jones", "1234567890", "100 Elm Street")


def test_add_contact(service: ContactService):
    contact = alice()
    assert service.add(contact) is None
    assert service.get("ID123") is contact
    assert "ID123" in service
    assert len(service) == 1


def test_add_duplicate_id_fails(service: ContactService):
    service.add(alice())
    with pytest.raises(DuplicateEntityError) as exc_info:
        service.add(Contact("ID123", "Bob", "Smith", "0987654321", "1 Oak Rd"))
    assert exc_info.value.kind is ErrorKind.DUPLICATE_KEY
    assert service.get("ID123").first_name == "Alice"


def test_create_from_dto(service: ContactService):
    contact = service.create(
        ContactCreate(
            id="C1",
            first_name="Carol",
            last_name="White",
            phone="5551234567",
            address="9 Pine Lane",
        )
    )
    assert service.get("C1") is contact
    assert contact.last_name == "White"


def test_create_invalid_dto_stores_nothing(service: ContactService):
    with pytest.raises(InvalidFieldError):
        service.create(
            ContactCreate(
                id="C1", first_name="Carol", last_name="White", phone="555", address="9 Pine"
            )
        )
    assert service.get("C1") is None


def test_get_missing_returns_none(service: ContactService):
    assert service.get("nobody") is None


def test_delete_then_get_is_absent(service: ContactService):
    service.add(alice())
    service.delete("ID123")
    assert service.get("ID123") is None
    assert "ID123" not in service


def test_delete_missing_fails(service: ContactService):
    with pytest.raises(EntityNotFoundError) as exc_info:
        service.delete("nobody")
    assert exc_info.value.kind is ErrorKind.NOT_FOUND
    assert exc_info.value.entity_id == "nobody"


def test_field_updates(service: ContactService):
    service.add(alice())
    service.update_first_name("ID123", "Alicia")
    service.update_last_name("ID123", "Brown")
    service.update_phone("ID123", "1112223333")
    updated = service.update_address("ID123", "42 Main St")

    assert updated is service.get("ID123")
    assert updated.first_name == "Alicia"
    assert updated.last_name == "Brown"
    assert updated.phone == "1112223333"
    assert updated.address == "42 Main St"


@pytest.mark.parametrize(
    "method",
    ["update_first_name", "update_last_name", "update_phone", "update_address"],
)
def test_update_unknown_id_fails_without_creating(service: ContactService, method):
    with pytest.raises(EntityNotFoundError):
        getattr(service, method)("unknown", "X")
    assert service.get("unknown") is None
    assert len(service) == 0


def test_update_propagates_invalid_value(service: ContactService):
    service.add(alice())
    with pytest.raises(InvalidFieldError):
        service.update_phone("ID123", "not-digits")
    assert service.get("ID123").phone == "1234567890"


def test_update_with_dto_is_partial_and_atomic(service: ContactService):
    service.add(alice())

    service.update("ID123", ContactUpdate(address="7 New Road"))
    assert service.get("ID123").address == "7 New Road"
    assert service.get("ID123").first_name == "Alice"

    with pytest.raises(InvalidFieldError):
        service.update("ID123", ContactUpdate(first_name="Bob", last_name="x" * 11))
    assert service.get("ID123").first_name == "Alice"


def test_list_all(service: ContactService):
    service.add(alice())
    service.add(Contact("ID124", "Bob", "Smith", "0987654321", "1 Oak Rd"))
    assert [c.id for c in service.list_all()] == ["ID123", "ID124"]
    assert [c.id for c in service.list_all(skip=1)] == ["ID124"]


def test_require(service: ContactService):
    service.add(alice())
    assert service.require("ID123").first_name == "Alice"
    with pytest.raises(EntityNotFoundError):
        service.require("nobody")


def test_rejections_are_logged(service: ContactService, caplog):
    service.add(alice())
    with caplog.at_level(logging.WARNING, logger="record_manager.application.services"):
        with pytest.raises(DuplicateEntityError):
            service.add(alice())
    assert "Rejected duplicate Contact ID123" in caplog.text
