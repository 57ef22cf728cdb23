"""Field rules shared by every entity.

Each helper returns the accepted value (normalised where noted) or raises
``InvalidFieldError`` naming the entity and field that was rejected.
"""

from datetime import datetime, timezone
from typing import Any

from record_manager.domain.exceptions import InvalidFieldError

# ── Field limits ─────────────────────────────────────────────────────

ID_MAX_LENGTH = 10

CONTACT_NAME_MAX_LENGTH = 10
CONTACT_ADDRESS_MAX_LENGTH = 30
PHONE_LENGTH = 10

TASK_NAME_MAX_LENGTH = 20
TASK_DESCRIPTION_MAX_LENGTH = 50

APPOINTMENT_DESCRIPTION_MAX_LENGTH = 50

_DIGITS = frozenset("0123456789")


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def local_now() -> datetime:
    """Current wall-clock time as a naive local datetime."""
    return datetime.now()


def require_text(entity_type: str, field: str, value: Any, max_length: int) -> str:
    """Accept a non-empty string no longer than ``max_length`` characters."""
    if value is None:
        raise InvalidFieldError(entity_type, field, value, "is required")
    if not isinstance(value, str):
        raise InvalidFieldError(entity_type, field, value, "must be a string")
    if not value:
        raise InvalidFieldError(entity_type, field, value, "must not be empty")
    if len(value) > max_length:
        raise InvalidFieldError(
            entity_type, field, value, f"must be at most {max_length} characters"
        )
    return value


def require_digits(entity_type: str, field: str, value: Any, length: int) -> str:
    """Accept a string of exactly ``length`` ASCII decimal digits."""
    if value is None:
        raise InvalidFieldError(entity_type, field, value, "is required")
    if not isinstance(value, str):
        raise InvalidFieldError(entity_type, field, value, "must be a string")
    if len(value) != length or not _DIGITS.issuperset(value):
        raise InvalidFieldError(
            entity_type, field, value, f"must be exactly {length} digits"
        )
    return value


def require_future(entity_type: str, field: str, value: Any) -> datetime:
    """Accept a datetime strictly later than now; returns a copy of it.

    Naive values are compared with local time, aware values with UTC.
    """
    if value is None:
        raise InvalidFieldError(entity_type, field, value, "is required")
    if not isinstance(value, datetime):
        raise InvalidFieldError(entity_type, field, value, "must be a datetime")
    now = local_now() if value.tzinfo is None else utc_now()
    if value <= now:
        raise InvalidFieldError(entity_type, field, value, "must be in the future")
    return copy_datetime(value)


def copy_datetime(value: datetime) -> datetime:
    """Equal datetime that is a distinct object from ``value``."""
    return datetime(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond,
        tzinfo=value.tzinfo,
        fold=value.fold,
    )
