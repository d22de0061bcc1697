"""Derived dashboard views over event snapshots.

Provides the aggregations the dashboard charts and stat cards render:
- upcoming_events: next published events by start date
- category_distribution: most common categories
- status_distribution: zero-filled tally per status
- overview_stats: headline counters
"""

from collections import Counter
from collections.abc import Iterable
from datetime import UTC, date, datetime

from pydantic import BaseModel, Field

from eventdesk.models import EventRecord, EventStatus

UPCOMING_LIMIT = 5
CATEGORY_LIMIT = 6

# Chart order for the status pie
STATUS_ORDER: tuple[EventStatus, ...] = (
    EventStatus.PUBLISHED,
    EventStatus.DRAFT,
    EventStatus.CANCELLED,
    EventStatus.COMPLETED,
)


class CategoryCount(BaseModel):
    """Number of events in one category."""

    name: str = Field(description="Category name")
    count: int = Field(ge=0)


class StatusCount(BaseModel):
    """Number of events with one status."""

    status: EventStatus
    count: int = Field(ge=0)

    @property
    def label(self) -> str:
        """Display label, e.g. "Published"."""
        return self.status.value.capitalize()


class OverviewStats(BaseModel):
    """Headline counters for the dashboard stat cards."""

    total: int = Field(description="All events")
    published: int = Field(description="Events with status published")
    upcoming: int = Field(description="Published events starting today or later")
    featured: int = Field(description="Events flagged as featured")


def _today(today: date | None) -> date:
    return today or datetime.now(UTC).date()


def is_upcoming(event: EventRecord, today: date) -> bool:
    """Published and not yet started (starting today counts as upcoming)."""
    return event.status == EventStatus.PUBLISHED and event.start_date >= today


def upcoming_events(
    records: Iterable[EventRecord],
    today: date | None = None,
    limit: int = UPCOMING_LIMIT,
) -> list[EventRecord]:
    """Return the next ``limit`` upcoming events, soonest first."""
    day = _today(today)
    upcoming = [event for event in records if is_upcoming(event, day)]
    upcoming.sort(key=lambda event: event.start_date)
    return upcoming[:limit]


def category_distribution(
    records: Iterable[EventRecord],
    limit: int = CATEGORY_LIMIT,
) -> list[CategoryCount]:
    """Count events per category, largest first, top ``limit``.

    Ties keep the order in which categories were first seen.
    """
    counts = Counter(event.category for event in records)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [CategoryCount(name=name, count=count) for name, count in ranked[:limit]]


def status_distribution(records: Iterable[EventRecord]) -> list[StatusCount]:
    """Tally events per status in chart order, including zero counts."""
    counts = Counter(event.status for event in records)
    return [StatusCount(status=status, count=counts[status]) for status in STATUS_ORDER]


def overview_stats(
    records: Iterable[EventRecord],
    today: date | None = None,
) -> OverviewStats:
    """Compute the four dashboard stat-card counters."""
    day = _today(today)
    events = list(records)
    return OverviewStats(
        total=len(events),
        published=sum(1 for e in events if e.status == EventStatus.PUBLISHED),
        upcoming=sum(1 for e in events if is_upcoming(e, day)),
        featured=sum(1 for e in events if e.is_featured),
    )
