"""Field-level validation for event form data.

Errors are keyed by dotted field path (``location.city``) so a form can
show each message next to its input.
"""

import re
from collections.abc import Mapping
from typing import Any

import pydantic

from eventdesk.errors import ValidationError
from eventdesk.models import EventFormData
from eventdesk.models.event import TIME_PATTERN

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
_TIME = re.compile(TIME_PATTERN)

_REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("title", "Title is required"),
    ("short_description", "Short description is required"),
    ("description", "Description is required"),
    ("start_date", "Start date is required"),
    ("end_date", "End date is required"),
    ("start_time", "Start time is required"),
    ("end_time", "End time is required"),
    ("category", "Category is required"),
    ("location.address", "Address is required"),
    ("location.city", "City is required"),
    ("location.country", "Country is required"),
    ("contact.name", "Contact name is required"),
    ("contact.email", "Contact email is required"),
)


def _lookup(data: EventFormData, path: str) -> Any:
    value: Any = data
    for part in path.split("."):
        value = getattr(value, part)
    return value


def validate_event_form(data: EventFormData) -> dict[str, str]:
    """Check required fields and formats.

    Args:
        data: Form data to check

    Returns:
        Mapping of field path to message; empty when the form is valid
    """
    errors: dict[str, str] = {}
    for path, message in _REQUIRED_FIELDS:
        if not _lookup(data, path):
            errors[path] = message

    for path in ("start_time", "end_time"):
        value = getattr(data, path)
        if value and not _TIME.match(value):
            errors[path] = "Invalid time format"

    email = data.contact.email
    if email and not EMAIL_PATTERN.search(email):
        errors["contact.email"] = "Invalid email format"

    if data.start_date and data.end_date and data.start_date > data.end_date:
        errors["end_date"] = "End date cannot be before start date"

    return errors


def errors_from_pydantic(exc: pydantic.ValidationError) -> dict[str, str]:
    """Flatten a pydantic error into dotted-path messages."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"]) or "payload"
        errors.setdefault(path, error["msg"])
    return errors


def coerce_form(data: EventFormData | Mapping[str, Any]) -> EventFormData:
    """Parse ``data`` into EventFormData.

    Raises:
        ValidationError: If the payload has wrong types or unknown fields
    """
    if isinstance(data, EventFormData):
        return data
    try:
        return EventFormData.model_validate(dict(data))
    except pydantic.ValidationError as e:
        raise ValidationError(errors_from_pydantic(e)) from e


def ensure_valid(data: EventFormData) -> EventFormData:
    """Return ``data`` unchanged or raise with every field error found.

    Raises:
        ValidationError: If any required field is missing or malformed
    """
    errors = validate_event_form(data)
    if errors:
        raise ValidationError(errors)
    return data
