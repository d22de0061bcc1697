"""Outbound integrations: user-facing notifications."""

from eventdesk.integration.notification_service import NotificationService, Notifier
from eventdesk.integration.schemas import NotificationKind, NotificationRecord

__all__ = [
    "NotificationService",
    "Notifier",
    "NotificationKind",
    "NotificationRecord",
]
