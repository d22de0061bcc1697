"""EventDesk: event data and query layer for the admin dashboard."""

from eventdesk.errors import (
    ConcurrencyError,
    EventDeskError,
    NotFoundError,
    TransientFailure,
    ValidationError,
)
from eventdesk.models import (
    EVENT_CATEGORIES,
    EventFormData,
    EventRecord,
    EventStatus,
    EventUpdate,
    slugify,
)
from eventdesk.search import EventFilter, query
from eventdesk.services import EventService
from eventdesk.store import EventStore

__version__ = "0.1.0"

__all__ = [
    "EventService",
    "EventStore",
    "EventRecord",
    "EventFormData",
    "EventUpdate",
    "EventStatus",
    "EventFilter",
    "EVENT_CATEGORIES",
    "query",
    "slugify",
    "EventDeskError",
    "NotFoundError",
    "ValidationError",
    "TransientFailure",
    "ConcurrencyError",
]
