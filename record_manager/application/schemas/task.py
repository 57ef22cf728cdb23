"""Pydantic DTOs for the Task feature."""

from pydantic import BaseModel, Field


class TaskCreate(BaseModel):
    """Schema for creating a new task."""

    id: str = Field(..., examples=["2"])
    name: str = Field(..., examples=["Write report"])
    description: str = Field(..., examples=["Quarterly numbers for the board"])


class TaskUpdate(BaseModel):
    """Schema for updating an existing task — all fields optional."""

    name: str | None = None
    description: str | None = None
