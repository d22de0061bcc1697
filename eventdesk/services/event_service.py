"""Event mutation service - the only writer of the event store.

Every mutation:
- runs through a pluggable Backend (simulated latency by default)
- is serialized with the other writes, reading the snapshot under the lock
- computes the complete new snapshot before a single commit (all-or-nothing)
- notifies the user exactly once on success and publishes a domain event
- surfaces failures as typed errors, never as silent no-ops
"""

import asyncio
from collections import Counter
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any, TypeVar

import pydantic
import structlog

from eventdesk.config import Settings, get_settings
from eventdesk.errors import NotFoundError, ValidationError
from eventdesk.events import (
    DomainEvent,
    EventBus,
    EventCreated,
    EventDeleted,
    EventFeatureToggled,
    EventStatusChanged,
    EventUpdated,
)
from eventdesk.forms.validation import coerce_form, ensure_valid, errors_from_pydantic
from eventdesk.integration import NotificationKind, Notifier
from eventdesk.models import (
    EventFormData,
    EventRecord,
    EventStatus,
    EventUpdate,
    new_record_id,
    next_timestamp,
    slugify,
    utc_now,
)
from eventdesk.search.query import EventFilter, query
from eventdesk.services.backend import Backend, SimulatedBackend, execute_with_retry
from eventdesk.services.status import (
    ensure_transition_allowed,
    parse_status,
    status_notification_kind,
    status_phrase,
)
from eventdesk.store import EventStore, Snapshot

logger = structlog.get_logger()

R = TypeVar("R")

# Busy key for operations that affect the collection rather than one id
COLLECTION_KEY = "*"


def _index_of(snapshot: Snapshot, event_id: str) -> int:
    for index, record in enumerate(snapshot):
        if record.id == event_id:
            return index
    raise NotFoundError(event_id)


def _replace_at(snapshot: Snapshot, index: int, record: EventRecord) -> Snapshot:
    return (*snapshot[:index], record, *snapshot[index + 1 :])


def _build_record(fields: dict[str, Any]) -> EventRecord:
    try:
        return EventRecord.model_validate(fields)
    except pydantic.ValidationError as e:
        raise ValidationError(errors_from_pydantic(e)) from e


def _coerce_update(changes: EventUpdate | Mapping[str, Any]) -> dict[str, Any]:
    if not isinstance(changes, EventUpdate):
        try:
            changes = EventUpdate.model_validate(dict(changes))
        except pydantic.ValidationError as e:
            raise ValidationError(errors_from_pydantic(e)) from e
    return changes.changes()


class EventService:
    """Create, read, update, delete and transition event records.

    Operations are async so callers never block on the (simulated)
    backend; ``is_busy`` exposes which ids have an operation in flight.
    """

    def __init__(
        self,
        store: EventStore,
        notifier: Notifier,
        backend: Backend | None = None,
        event_bus: EventBus | None = None,
        settings: Settings | None = None,
    ):
        """Initialize the service.

        Args:
            store: Store holding the event collection
            notifier: Sink for user-facing notifications
            backend: Execution backend (default: simulated latency from settings)
            event_bus: Optional bus receiving a domain event per change
            settings: Retry/latency configuration (default: global settings)
        """
        self._settings = settings or get_settings()
        self._store = store
        self._notifier = notifier
        self._backend = backend or SimulatedBackend(self._settings.operation_delays())
        self._bus = event_bus
        self._write_lock = asyncio.Lock()
        self._pending: Counter[str] = Counter()
        self.last_error: str | None = None

    # ------------------------------------------------------------------
    # Busy state
    # ------------------------------------------------------------------

    @contextmanager
    def _track(self, key: str) -> Iterator[None]:
        self._pending[key] += 1
        try:
            yield
        finally:
            self._pending[key] -= 1
            if self._pending[key] <= 0:
                del self._pending[key]

    def is_busy(self, event_id: str | None = None) -> bool:
        """Whether an operation is in flight.

        Args:
            event_id: Check one record; None checks for any pending operation
        """
        if event_id is None:
            return bool(self._pending)
        return self._pending[event_id] > 0

    @property
    def is_loading(self) -> bool:
        """True while any operation is pending."""
        return self.is_busy()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def events(self) -> list[EventRecord]:
        """Current snapshot as a new list."""
        return list(self._store.snapshot())

    def get_by_id(self, event_id: str, strict: bool = False) -> EventRecord | None:
        """Look up a record by id.

        Raises:
            NotFoundError: If ``strict`` and the id is absent
        """
        record = self._store.get(event_id)
        if record is None and strict:
            raise NotFoundError(event_id)
        return record

    async def list_events(
        self,
        filters: EventFilter | Mapping[str, Any] | None = None,
    ) -> list[EventRecord]:
        """Filter the current snapshot through the backend's list latency.

        Raises:
            ValidationError: If ``filters`` has unknown keys or a bad status
        """
        with self._track(COLLECTION_KEY):
            return await self._run(
                "list",
                lambda: query(self._store.snapshot(), filters),
                failure="Failed to fetch events",
            )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def create(self, data: EventFormData | Mapping[str, Any]) -> EventRecord:
        """Validate and append a new event.

        Assigns a fresh id, derives the slug from the title and sets
        created_at = updated_at = now.

        Raises:
            ValidationError: If required fields are missing or malformed
        """

        def apply(snapshot: Snapshot) -> tuple[Snapshot, EventRecord]:
            form = ensure_valid(coerce_form(data))
            existing = {record.id for record in snapshot}
            event_id = new_record_id()
            while event_id in existing:
                event_id = new_record_id()
            now = utc_now()
            record = _build_record(
                {
                    **form.model_dump(),
                    "id": event_id,
                    "slug": slugify(form.title),
                    "created_at": now,
                    "updated_at": now,
                }
            )
            return (*snapshot, record), record

        record, version = await self._mutate(
            "create", COLLECTION_KEY, apply, failure="Failed to create event"
        )
        logger.info("event created", event_id=record.id, slug=record.slug)
        self._notify(
            NotificationKind.SUCCESS,
            "Event Created",
            f'"{record.title}" has been created successfully.',
        )
        await self._publish(
            EventCreated(
                record_id=record.id,
                snapshot_version=version,
                title=record.title,
                slug=record.slug,
            )
        )
        return record

    async def update(
        self,
        event_id: str,
        changes: EventUpdate | Mapping[str, Any],
    ) -> EventRecord:
        """Shallow-merge ``changes`` over an existing event.

        Top-level fields provided replace the stored ones; nested objects
        (location, contact, images, tickets) are replaced wholesale. The
        slug is kept from creation even when the title changes.

        Raises:
            NotFoundError: If the id is absent
            ValidationError: If the merged event is invalid
        """
        provided: tuple[str, ...] = ()

        def apply(snapshot: Snapshot) -> tuple[Snapshot, EventRecord]:
            nonlocal provided
            index = _index_of(snapshot, event_id)
            current = snapshot[index]
            fields = _coerce_update(changes)
            provided = tuple(fields)
            form = coerce_form({**current.to_form_data().model_dump(), **fields})
            ensure_valid(form)
            record = _build_record(
                {
                    **form.model_dump(),
                    "id": current.id,
                    "slug": current.slug,
                    "created_at": current.created_at,
                    "updated_at": next_timestamp(current.updated_at),
                }
            )
            return _replace_at(snapshot, index, record), record

        record, version = await self._mutate(
            "update", event_id, apply, failure="Failed to update event"
        )
        logger.info("event updated", event_id=event_id, fields=list(provided))
        self._notify(
            NotificationKind.SUCCESS,
            "Event Updated",
            f'"{record.title}" has been updated successfully.',
        )
        await self._publish(
            EventUpdated(
                record_id=event_id,
                snapshot_version=version,
                changed_fields=provided,
            )
        )
        return record

    async def delete(self, event_id: str) -> None:
        """Remove an event and everything embedded in it.

        Raises:
            NotFoundError: If the id is absent
        """

        def apply(snapshot: Snapshot) -> tuple[Snapshot, EventRecord]:
            index = _index_of(snapshot, event_id)
            return (*snapshot[:index], *snapshot[index + 1 :]), snapshot[index]

        removed, version = await self._mutate(
            "delete", event_id, apply, failure="Failed to delete event"
        )
        logger.info("event deleted", event_id=event_id)
        self._notify(
            NotificationKind.DANGER,
            "Event Deleted",
            f'"{removed.title}" has been deleted.',
        )
        await self._publish(
            EventDeleted(record_id=event_id, snapshot_version=version, title=removed.title)
        )

    async def change_status(
        self,
        event_id: str,
        status: EventStatus | str,
    ) -> EventRecord:
        """Set an event's status.

        Raises:
            NotFoundError: If the id is absent
            ValidationError: If the status is unknown or the transition is refused
        """
        previous: EventStatus | None = None

        def apply(snapshot: Snapshot) -> tuple[Snapshot, EventRecord]:
            nonlocal previous
            index = _index_of(snapshot, event_id)
            current = snapshot[index]
            new_status = parse_status(status)
            ensure_transition_allowed(current.status, new_status)
            previous = current.status
            record = current.model_copy(
                update={
                    "status": new_status,
                    "updated_at": next_timestamp(current.updated_at),
                }
            )
            return _replace_at(snapshot, index, record), record

        record, version = await self._mutate(
            "change_status",
            event_id,
            apply,
            failure=f"Failed to change event status to {getattr(status, 'value', status)}",
        )
        logger.info("event status changed", event_id=event_id, status=record.status.value)
        self._notify(
            status_notification_kind(record.status),
            "Event Status Updated",
            f'"{record.title}" has been {status_phrase(record.status)}.',
        )
        await self._publish(
            EventStatusChanged(
                record_id=event_id,
                snapshot_version=version,
                previous_status=previous,
                status=record.status,
            )
        )
        return record

    async def toggle_featured(self, event_id: str) -> EventRecord:
        """Flip an event's featured flag.

        Raises:
            NotFoundError: If the id is absent
        """

        def apply(snapshot: Snapshot) -> tuple[Snapshot, EventRecord]:
            index = _index_of(snapshot, event_id)
            current = snapshot[index]
            record = current.model_copy(
                update={
                    "is_featured": not current.is_featured,
                    "updated_at": next_timestamp(current.updated_at),
                }
            )
            return _replace_at(snapshot, index, record), record

        record, version = await self._mutate(
            "toggle_featured",
            event_id,
            apply,
            failure="Failed to toggle featured status",
        )
        state = "featured" if record.is_featured else "unfeatured"
        logger.info("event feature toggled", event_id=event_id, is_featured=record.is_featured)
        self._notify(
            NotificationKind.SUCCESS,
            "Event Featured" if record.is_featured else "Event Unfeatured",
            f'"{record.title}" has been {state}.',
        )
        await self._publish(
            EventFeatureToggled(
                record_id=event_id,
                snapshot_version=version,
                is_featured=record.is_featured,
            )
        )
        return record

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------

    async def _run(self, operation: str, action: Callable[[], R], failure: str) -> R:
        try:
            result = await execute_with_retry(
                self._backend,
                operation,
                action,
                attempts=self._settings.retry_attempts,
                wait_min=self._settings.retry_wait_min,
                wait_max=self._settings.retry_wait_max,
            )
        except Exception as e:
            self.last_error = failure
            logger.warning("event operation failed", operation=operation, error=str(e))
            raise
        self.last_error = None
        return result

    async def _mutate(
        self,
        operation: str,
        key: str,
        apply: Callable[[Snapshot], tuple[Snapshot, R]],
        failure: str,
    ) -> tuple[R, int]:
        """Apply one write under the lock and commit it atomically.

        The snapshot is read inside the backend action, after any latency,
        while the write lock is held, so concurrent writers never work
        from the same stale snapshot.
        """

        def action() -> tuple[R, int]:
            version = self._store.version
            snapshot, result = apply(self._store.snapshot())
            return result, self._store.commit(snapshot, expected_version=version)

        with self._track(key):
            async with self._write_lock:
                return await self._run(operation, action, failure)

    def _notify(self, kind: NotificationKind, title: str, message: str) -> None:
        """Hand a notification to the sink; sink errors never fail the mutation."""
        try:
            self._notifier.notify(kind, title, message)
        except Exception as e:
            logger.error("notification failed", title=title, error=str(e))

    async def _publish(self, event: DomainEvent) -> None:
        logger.debug("domain event", **event.to_log_dict())
        if self._bus is not None:
            await self._bus.publish(event)
