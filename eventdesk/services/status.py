"""Status transition policy and status-change wording.

Transitions are currently unrestricted: any status may move to any other
(including completed back to draft). ``ensure_transition_allowed`` is the
single place a transition table would be enforced.
"""

from eventdesk.errors import ValidationError
from eventdesk.integration.schemas import NotificationKind
from eventdesk.models import EventStatus

_STATUS_PHRASES: dict[EventStatus, str] = {
    EventStatus.PUBLISHED: "published",
    EventStatus.DRAFT: "moved to drafts",
    EventStatus.CANCELLED: "cancelled",
    EventStatus.COMPLETED: "completed",
}


def parse_status(value: EventStatus | str) -> EventStatus:
    """Coerce a status value.

    Raises:
        ValidationError: If ``value`` is not a known status
    """
    try:
        return EventStatus(value)
    except ValueError as e:
        raise ValidationError({"status": f"Unknown status: {value}"}) from e


def ensure_transition_allowed(current: EventStatus, new: EventStatus) -> None:
    """Reject a disallowed status transition.

    Every transition is allowed for now.
    """


def status_phrase(status: EventStatus) -> str:
    """Past-tense phrase for a status change, e.g. "moved to drafts"."""
    return _STATUS_PHRASES[status]


def status_notification_kind(status: EventStatus) -> NotificationKind:
    """Cancellation warns; every other status change is a success."""
    if status == EventStatus.CANCELLED:
        return NotificationKind.WARNING
    return NotificationKind.SUCCESS
