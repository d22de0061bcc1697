"""In-memory copy-on-write store for event records.

The store holds the single authoritative ordered collection as an
immutable tuple. Writers replace the whole tuple through ``commit``;
readers holding an older snapshot keep seeing a consistent old view.
"""

import logging
from collections.abc import Iterable

from eventdesk.errors import ConcurrencyError
from eventdesk.models import EventRecord

logger = logging.getLogger(__name__)

Snapshot = tuple[EventRecord, ...]


class EventStore:
    """Process-wide holder of the event collection.

    Features:
    - Injectable initial snapshot (seed data by default)
    - Version counter for compare-and-swap commits
    - reset() back to the initial snapshot for isolated tests
    """

    def __init__(self, initial: Iterable[EventRecord] | None = None):
        """Initialize the store.

        Args:
            initial: Starting records. Defaults to the built-in seed set.
        """
        if initial is None:
            from eventdesk.seed import build_seed_events

            initial = build_seed_events()
        self._initial: Snapshot = self._checked(initial)
        self._records: Snapshot = self._initial
        self._version = 0

    @staticmethod
    def _checked(records: Iterable[EventRecord]) -> Snapshot:
        snapshot = tuple(records)
        ids = [record.id for record in snapshot]
        if len(ids) != len(set(ids)):
            raise ValueError("Event ids must be unique within the store")
        return snapshot

    @property
    def version(self) -> int:
        """Monotonic counter bumped by every commit and reset."""
        return self._version

    def snapshot(self) -> Snapshot:
        """Return the current collection value."""
        return self._records

    def get(self, event_id: str) -> EventRecord | None:
        """Return the record with ``event_id`` or None."""
        for record in self._records:
            if record.id == event_id:
                return record
        return None

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, event_id: object) -> bool:
        return any(record.id == event_id for record in self._records)

    def commit(self, records: Iterable[EventRecord], expected_version: int) -> int:
        """Replace the collection with a new snapshot.

        Args:
            records: The complete new collection
            expected_version: Version the writer read its snapshot at

        Returns:
            The new version number

        Raises:
            ConcurrencyError: If another commit landed since expected_version
            ValueError: If the new snapshot contains duplicate ids
        """
        if expected_version != self._version:
            raise ConcurrencyError(expected_version, self._version)
        self._records = self._checked(records)
        self._version += 1
        logger.debug(f"Committed snapshot v{self._version} ({len(self._records)} events)")
        return self._version

    def reset(self, records: Iterable[EventRecord] | None = None) -> None:
        """Restore the initial snapshot, or install ``records`` as the new one."""
        if records is not None:
            self._initial = self._checked(records)
        self._records = self._initial
        self._version += 1
        logger.info(f"Event store reset ({len(self._records)} events)")
