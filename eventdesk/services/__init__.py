"""Mutation service and its execution backends."""

from eventdesk.services.backend import Backend, SimulatedBackend, execute_with_retry
from eventdesk.services.event_service import COLLECTION_KEY, EventService
from eventdesk.services.status import ensure_transition_allowed

__all__ = [
    "EventService",
    "COLLECTION_KEY",
    "Backend",
    "SimulatedBackend",
    "execute_with_retry",
    "ensure_transition_allowed",
]
