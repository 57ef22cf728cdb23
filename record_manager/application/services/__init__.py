from .record_service import RecordService
from .contact_service import ContactService
from .task_service import TaskService
from .appointment_service import AppointmentService

__all__ = [
    "RecordService",
    "ContactService",
    "TaskService",
    "AppointmentService",
]
