from .record import Record
from .contact import Contact
from .task import Task
from .appointment import Appointment

__all__ = [
    "Record",
    "Contact",
    "Task",
    "Appointment",
]
