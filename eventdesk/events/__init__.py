"""Domain event infrastructure.

Provides:
- DomainEvent: Base class for all store-change events
- EventBus: In-process pub/sub for event routing
"""

from eventdesk.events.base import DomainEvent
from eventdesk.events.bus import EventBus
from eventdesk.events.types import (
    EventCreated,
    EventDeleted,
    EventFeatureToggled,
    EventStatusChanged,
    EventUpdated,
)

__all__ = [
    # Base
    "DomainEvent",
    # Infrastructure
    "EventBus",
    # Event types
    "EventCreated",
    "EventUpdated",
    "EventDeleted",
    "EventStatusChanged",
    "EventFeatureToggled",
]
