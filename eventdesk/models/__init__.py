"""Canonical data models for the event data layer.

- EventRecord: stored event with id, slug and timestamps
- EventFormData: caller-supplied event fields
- EventUpdate: partial payload for shallow-merge updates
- EventLocation, EventContact, EventImage, EventTicket: nested values
"""

from eventdesk.models.base import new_record_id, next_timestamp, utc_now
from eventdesk.models.event import (
    EVENT_CATEGORIES,
    EventContact,
    EventFormData,
    EventImage,
    EventLocation,
    EventRecord,
    EventStatus,
    EventTicket,
    EventUpdate,
    slugify,
)

__all__ = [
    # Records
    "EventRecord",
    "EventFormData",
    "EventUpdate",
    "EventStatus",
    # Value objects
    "EventLocation",
    "EventContact",
    "EventImage",
    "EventTicket",
    # Helpers
    "EVENT_CATEGORIES",
    "slugify",
    "new_record_id",
    "next_timestamp",
    "utc_now",
]
