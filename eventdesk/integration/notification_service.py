"""Notification sink for mutation feedback.

The mutation service reports every successful change through
``notify(kind, title, message)``; the presentation layer decides how to
render it (toast, banner, ...).
"""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Protocol

import structlog

from eventdesk.integration.schemas import NotificationKind, NotificationRecord

logger = structlog.get_logger()

NotificationCallback = Callable[[NotificationRecord], None]


class Notifier(Protocol):
    """Anything that can receive a fire-and-forget notification."""

    def notify(self, kind: NotificationKind | str, title: str, message: str) -> None: ...


class NotificationService:
    """Notifier that logs, audits and optionally forwards notifications.

    Keeps an in-memory audit log of everything emitted so tests and the
    dashboard can inspect recent feedback.
    """

    def __init__(self, callback: NotificationCallback | None = None):
        """Initialize the service.

        Args:
            callback: Optional presentation hook invoked per notification
        """
        self._callback = callback
        self._audit_log: list[NotificationRecord] = []

    def notify(self, kind: NotificationKind | str, title: str, message: str) -> None:
        """Emit a notification.

        Args:
            kind: success, warning or danger
            title: Short headline
            message: Human-readable description

        Raises:
            ValueError: If ``kind`` is not a known notification kind
        """
        record = NotificationRecord(
            kind=NotificationKind(kind),
            title=title,
            message=message,
            sent_at=datetime.now(UTC),
        )
        self._audit_log.append(record)
        logger.info(
            "notification sent",
            kind=record.kind.value,
            title=record.title,
        )
        if self._callback is not None:
            self._callback(record)

    def get_audit_log(self) -> list[NotificationRecord]:
        """Return copy of audit log."""
        return list(self._audit_log)

    def clear_audit_log(self) -> None:
        """Clear audit log."""
        self._audit_log.clear()
