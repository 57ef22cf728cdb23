"""Domain-specific exceptions — framework-independent."""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Machine-readable category of a domain failure."""

    INVALID_ARGUMENT = "invalid_argument"
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"


class DomainError(Exception):
    """Base class for every failure raised by entities and services."""

    kind: ErrorKind

    def __init__(self, entity_type: str, message: str):
        self.entity_type = entity_type
        super().__init__(message)


class InvalidFieldError(DomainError, ValueError):
    """Raised when a field value fails its validation rule."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, entity_type: str, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(entity_type, f"{entity_type}.{field} {reason}")


class EntityNotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_id = entity_id
        super().__init__(entity_type, f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(DomainError):
    """Raised when attempting to create a duplicate entity."""

    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, entity_type: str, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(entity_type, f"{entity_type} with {field}='{value}' already exists")
