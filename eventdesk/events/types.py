"""Typed domain events for store changes.

- EventCreated: a new event record was appended
- EventUpdated: fields of a record were merged
- EventDeleted: a record was removed
- EventStatusChanged: a record's status was set
- EventFeatureToggled: a record's featured flag was flipped
"""

from pydantic import Field

from eventdesk.events.base import DomainEvent
from eventdesk.models import EventStatus


class EventCreated(DomainEvent):
    """Emitted when an event record is created."""

    title: str
    slug: str


class EventUpdated(DomainEvent):
    """Emitted when an event record is updated."""

    changed_fields: tuple[str, ...] = Field(
        default=(), description="Top-level fields supplied in the update"
    )


class EventDeleted(DomainEvent):
    """Emitted when an event record is deleted."""

    title: str


class EventStatusChanged(DomainEvent):
    """Emitted when an event's status is set."""

    previous_status: EventStatus
    status: EventStatus


class EventFeatureToggled(DomainEvent):
    """Emitted when an event's featured flag flips."""

    is_featured: bool
