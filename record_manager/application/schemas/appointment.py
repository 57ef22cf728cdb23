"""Pydantic DTOs for the Appointment feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class AppointmentCreate(BaseModel):
    """Schema for creating a new appointment. Appointments have no update DTO."""

    id: str = Field(..., examples=["A1"])
    date: datetime = Field(..., examples=["2030-01-15T09:30:00Z"])
    description: str = Field(..., examples=["Dentist check-up"])
