"""Application service (use case) for Appointment operations."""

from record_manager.application.schemas import AppointmentCreate
from record_manager.application.services.record_service import RecordService
from record_manager.domain.entities import Appointment


class AppointmentService(RecordService[Appointment]):
    """Keeps appointments by id. Appointments are add/delete only."""

    entity_type = Appointment.entity_type

    def create(self, data: AppointmentCreate) -> Appointment:
        appointment = Appointment(
            appointment_id=data.id,
            date=data.date,
            description=data.description,
        )
        self.add(appointment)
        return appointment
