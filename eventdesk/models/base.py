"""Shared model configuration and identity/timestamp helpers."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for immutable nested values (location, contact, ...)."""

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        extra="forbid",
    )


def new_record_id() -> str:
    """Return a fresh opaque identifier for a record or nested item."""
    return uuid4().hex


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def next_timestamp(previous: datetime | None = None) -> datetime:
    """Return now, nudged forward so it is strictly after ``previous``.

    Two mutations inside the same clock tick must still produce an
    advancing ``updated_at``.
    """
    now = utc_now()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now
