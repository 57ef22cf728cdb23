"""Application service (use case) for Contact operations."""

from record_manager.application.schemas import ContactCreate, ContactUpdate
from record_manager.application.services.record_service import RecordService
from record_manager.domain.entities import Contact


class ContactService(RecordService[Contact]):
    """Keeps contacts by id and forwards field updates to the stored contact."""

    entity_type = Contact.entity_type

    def create(self, data: ContactCreate) -> Contact:
        contact = Contact(
            contact_id=data.id,
            first_name=data.first_name,
            last_name=data.last_name,
            phone=data.phone,
            address=data.address,
        )
        self.add(contact)
        return contact

    def update(self, contact_id: str, data: ContactUpdate) -> Contact:
        return self._update_fields(contact_id, **data.model_dump(exclude_none=True))

    def update_first_name(self, contact_id: str, first_name: str) -> Contact:
        return self._update_fields(contact_id, first_name=first_name)

    def update_last_name(self, contact_id: str, last_name: str) -> Contact:
        return self._update_fields(contact_id, last_name=last_name)

    def update_phone(self, contact_id: str, phone: str) -> Contact:
        return self._update_fields(contact_id, phone=phone)

    def update_address(self, contact_id: str, address: str) -> Contact:
        return self._update_fields(contact_id, address=address)
