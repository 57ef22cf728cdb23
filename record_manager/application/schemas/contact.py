"""Pydantic DTOs (Data Transfer Objects) for the Contact feature.

DTOs carry shape only. Length and format rules belong to the Contact
entity, so a rejected value always surfaces as ``InvalidFieldError``.
"""

from pydantic import BaseModel, Field


class ContactCreate(BaseModel):
    """Schema for creating a new contact."""

    id: str = Field(..., examples=["ID123"])
    first_name: str = Field(..., examples=["Alice"])
    last_name: str = Field(..., examples=["Jones"])
    phone: str = Field(..., examples=["1234567890"])
    address: str = Field(..., examples=["100 Elm Street"])


class ContactUpdate(BaseModel):
    """Schema for updating an existing contact — all fields optional."""

    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    address: str | None = None
