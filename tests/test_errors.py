"""Tests for the error taxonomy."""

from eventdesk.errors import (
    ConcurrencyError,
    ErrorCode,
    EventDeskError,
    NotFoundError,
    TransientFailure,
    ValidationError,
)


def test_not_found_carries_id():
    err = NotFoundError("evt-7")
    assert err.event_id == "evt-7"
    assert err.code == ErrorCode.EVENT_NOT_FOUND
    assert str(err) == "EVENT_NOT_FOUND: Event not found"


def test_validation_error_lists_fields():
    err = ValidationError({"title": "Title is required", "contact.email": "Invalid email format"})
    assert err.message == "Invalid event data: contact.email, title"
    assert err.errors["title"] == "Title is required"


def test_concurrency_error_versions():
    err = ConcurrencyError(expected_version=2, current_version=3)
    assert (err.expected_version, err.current_version) == (2, 3)
    assert err.code == ErrorCode.CONCURRENT_WRITE


def test_all_errors_share_base():
    for err in (
        NotFoundError("x"),
        ValidationError({}),
        TransientFailure("flaky"),
        ConcurrencyError(0, 1),
    ):
        assert isinstance(err, EventDeskError)
