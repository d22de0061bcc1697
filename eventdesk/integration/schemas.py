"""Notification schemas for user-facing mutation feedback."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class NotificationKind(str, Enum):
    """Severity/color of a notification toast."""

    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"


class NotificationRecord(BaseModel):
    """Audit record for a sent notification."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    kind: NotificationKind = Field(description="Toast kind")
    title: str = Field(description="Short headline, e.g. 'Event Created'")
    message: str = Field(description="Human-readable description")
    sent_at: datetime = Field(description="When the notification was emitted")
