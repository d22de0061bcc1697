"""Error taxonomy for the event data layer.

Every failure raised by the mutation service is one of these types so
callers (form and page layer) can decide how to present it.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Stable error codes for presentation and logging."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    TRANSIENT_FAILURE = "TRANSIENT_FAILURE"
    CONCURRENT_WRITE = "CONCURRENT_WRITE"


class EventDeskError(Exception):
    """Base error with a code and a user-safe message."""

    code: ErrorCode

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(EventDeskError):
    """Raised when an operation references an id absent from the store."""

    code = ErrorCode.EVENT_NOT_FOUND

    def __init__(self, event_id: str):
        super().__init__("Event not found")
        self.event_id = event_id


class ValidationError(EventDeskError):
    """Raised when a create/update payload violates a field constraint.

    Attributes:
        errors: Mapping of dotted field path to message,
            e.g. {"contact.email": "Invalid email format"}
    """

    code = ErrorCode.VALIDATION_FAILED

    def __init__(self, errors: dict[str, str]):
        fields = ", ".join(sorted(errors)) or "payload"
        super().__init__(f"Invalid event data: {fields}")
        self.errors = dict(errors)


class TransientFailure(EventDeskError):
    """Raised by a backend when an operation may succeed if retried."""

    code = ErrorCode.TRANSIENT_FAILURE


class ConcurrencyError(EventDeskError):
    """Raised when a commit is attempted against a stale snapshot."""

    code = ErrorCode.CONCURRENT_WRITE

    def __init__(self, expected_version: int, current_version: int):
        super().__init__(
            f"Expected version {expected_version}, got {current_version}"
        )
        self.expected_version = expected_version
        self.current_version = current_version
