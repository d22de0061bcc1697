"""Pytest configuration and fixtures."""

from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta
from typing import Any

import pytest

from eventdesk.config import Settings
from eventdesk.events import EventBus
from eventdesk.integration import NotificationService
from eventdesk.models import EventRecord, slugify
from eventdesk.services import EventService, SimulatedBackend
from eventdesk.store import EventStore

TODAY = date(2026, 3, 1)
CREATED_AT = datetime(2026, 1, 1, 9, 0, tzinfo=UTC)

RecordFactory = Callable[..., EventRecord]


def _record(title: str = "Sample Event", **overrides: Any) -> EventRecord:
    fields: dict[str, Any] = {
        "title": title,
        "slug": slugify(title),
        "short_description": f"{title} in short",
        "description": f"All about {title}",
        "start_date": TODAY + timedelta(days=7),
        "end_date": TODAY + timedelta(days=8),
        "start_time": "09:00",
        "end_time": "17:00",
        "location": {
            "address": "1 Main Street",
            "city": "Springfield",
            "state": "IL",
            "zip_code": "62701",
            "country": "USA",
        },
        "category": "Community",
        "tags": [],
        "status": "published",
        "is_public": True,
        "is_featured": False,
        "contact": {"name": "Organizer", "email": "organizer@example.com"},
        "created_at": CREATED_AT,
        "updated_at": CREATED_AT,
    }
    fields.update(overrides)
    return EventRecord.model_validate(fields)


@pytest.fixture
def today() -> date:
    """Reference date the fixture events are scheduled around."""
    return TODAY


@pytest.fixture
def make_record() -> RecordFactory:
    """Factory for valid EventRecord instances with overridable fields."""
    return _record


@pytest.fixture
def five_events() -> list[EventRecord]:
    """Three published, one draft and one cancelled event.

    "tech" hits: title of #1, description of #3, short description of #4
    and a tag of #5. #2 mentions it nowhere.
    """
    return [
        _record(
            "Tech Summit",
            id="evt-1",
            category="Technology",
            tags=["ai", "cloud"],
            is_featured=True,
            start_date=TODAY + timedelta(days=10),
            end_date=TODAY + timedelta(days=11),
        ),
        _record(
            "Jazz Night",
            id="evt-2",
            category="Music",
            description="Live jazz downtown",
            short_description="An evening of jazz",
            tags=["music", "jazz"],
            start_date=TODAY + timedelta(days=3),
            end_date=TODAY + timedelta(days=3),
        ),
        _record(
            "Startup Pitch Day",
            id="evt-3",
            category="Business",
            description="Founders pitch to fintech investors",
            status="draft",
        ),
        _record(
            "Garden Fair",
            id="evt-4",
            short_description="Gardening Techniques for beginners",
            start_date=TODAY - timedelta(days=2),
            end_date=TODAY - timedelta(days=1),
        ),
        _record(
            "Charity Gala",
            id="evt-5",
            tags=["charity", "HighTech"],
            status="cancelled",
            is_featured=True,
        ),
    ]


@pytest.fixture
def form_data() -> dict[str, Any]:
    """A complete, valid create payload."""
    return {
        "title": "Annual Tech Conference 2024!",
        "short_description": "Biggest tech conference of the year",
        "description": "Keynotes, workshops and networking.",
        "start_date": "2026-05-10",
        "end_date": "2026-05-12",
        "start_time": "09:00",
        "end_time": "17:30",
        "location": {
            "address": "123 Convention Center Way",
            "city": "San Francisco",
            "state": "CA",
            "zip_code": "94103",
            "country": "USA",
            "venue_details": "Main Hall",
        },
        "category": "Technology",
        "tags": ["tech", "conference"],
        "status": "draft",
        "is_public": True,
        "is_featured": False,
        "capacity": 1500,
        "contact": {
            "name": "Event Organizer",
            "email": "organizer@techconference.com",
            "phone": "+1 (555) 123-4567",
        },
        "tickets": [{"name": "Regular", "price": 399.99, "available_quantity": 800}],
    }


@pytest.fixture
def settings() -> Settings:
    """Settings with no latency and instant retries."""
    return Settings(
        create_delay=0,
        update_delay=0,
        delete_delay=0,
        status_delay=0,
        featured_delay=0,
        list_delay=0,
        retry_attempts=3,
        retry_wait_min=0,
        retry_wait_max=0,
    )


@pytest.fixture
def store(five_events: list[EventRecord]) -> EventStore:
    return EventStore(five_events)


@pytest.fixture
def notifier() -> NotificationService:
    return NotificationService()


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def service(
    store: EventStore,
    notifier: NotificationService,
    event_bus: EventBus,
    settings: Settings,
) -> EventService:
    """EventService over the five-event store with zero latency."""
    return EventService(
        store=store,
        notifier=notifier,
        backend=SimulatedBackend(),
        event_bus=event_bus,
        settings=settings,
    )
