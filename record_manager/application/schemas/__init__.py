from .contact import ContactCreate, ContactUpdate
from .task import TaskCreate, TaskUpdate
from .appointment import AppointmentCreate

__all__ = [
    "ContactCreate",
    "ContactUpdate",
    "TaskCreate",
    "TaskUpdate",
    "AppointmentCreate",
]
