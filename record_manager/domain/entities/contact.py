"""Domain entity for an address-book contact."""

from typing import Any

from record_manager.domain.entities.record import Record
from record_manager.domain.validation import (
    CONTACT_ADDRESS_MAX_LENGTH,
    CONTACT_NAME_MAX_LENGTH,
    PHONE_LENGTH,
    require_digits,
    require_text,
)

_ENTITY = "Contact"


def _check_first_name(value: Any) -> str:
    return require_text(_ENTITY, "first_name", value, CONTACT_NAME_MAX_LENGTH)


def _check_last_name(value: Any) -> str:
    return require_text(_ENTITY, "last_name", value, CONTACT_NAME_MAX_LENGTH)


def _check_phone(value: Any) -> str:
    return require_digits(_ENTITY, "phone", value, PHONE_LENGTH)


def _check_address(value: Any) -> str:
    return require_text(_ENTITY, "address", value, CONTACT_ADDRESS_MAX_LENGTH)


class Contact(Record):
    """A person with a name, a 10-digit phone number and a postal address."""

    entity_type = _ENTITY
    _validators = {
        "first_name": _check_first_name,
        "last_name": _check_last_name,
        "phone": _check_phone,
        "address": _check_address,
    }

    def __init__(
        self,
        contact_id: str,
        first_name: str,
        last_name: str,
        phone: str,
        address: str,
    ):
        super().__init__(contact_id)
        self._first_name = _check_first_name(first_name)
        self._last_name = _check_last_name(last_name)
        self._phone = _check_phone(phone)
        self._address = _check_address(address)

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        self._first_name = _check_first_name(value)

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        self._last_name = _check_last_name(value)

    @property
    def phone(self) -> str:
        return self._phone

    @phone.setter
    def phone(self, value: str) -> None:
        self._phone = _check_phone(value)

    @property
    def address(self) -> str:
        return self._address

    @address.setter
    def address(self, value: str) -> None:
        self._address = _check_address(value)

    def _field_values(self) -> dict[str, Any]:
        return {
            "id": self._id,
            "first_name": self._first_name,
            "last_name": self._last_name,
            "phone": self._phone,
            "address": self._address,
        }
