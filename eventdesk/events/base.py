"""Base class for domain events emitted by the mutation service."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class DomainEvent(BaseModel):
    """Immutable record of a change applied to the event store.

    Attributes:
        event_id: Unique identifier for this domain event instance
        timestamp: When the change was committed
        record_id: Id of the event record the change concerns
        snapshot_version: Store version produced by the change
    """

    model_config = ConfigDict(frozen=True)

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique domain event identifier",
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the change was committed",
    )
    record_id: str = Field(description="Id of the affected event record")
    snapshot_version: int = Field(ge=0, description="Store version after the change")

    @property
    def event_type(self) -> str:
        """Return the domain event type name (class name)."""
        return self.__class__.__name__

    def to_log_dict(self) -> dict[str, Any]:
        """Flatten the event for structured logging."""
        return {
            "event_id": str(self.event_id),
            "event_type": self.event_type,
            "timestamp": self.timestamp.isoformat(),
            "data": self.model_dump(mode="json", exclude={"event_id", "timestamp"}),
        }
