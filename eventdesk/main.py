"""Composition root: wires store, backend, bus and notifications."""

import logging

import structlog

from eventdesk.config import Settings, get_settings
from eventdesk.events.bus import EventBus
from eventdesk.integration.notification_service import (
    NotificationCallback,
    NotificationService,
)
from eventdesk.seed import build_seed_events, load_seed_file
from eventdesk.services.backend import SimulatedBackend
from eventdesk.services.event_service import EventService
from eventdesk.store import EventStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure stdlib logging and route structlog through it."""
    level = getattr(logging, settings.log_level.upper())
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


def create_store(settings: Settings) -> EventStore:
    """Build the store from the configured seed file or the built-in samples."""
    if settings.seed_file is not None:
        records = load_seed_file(settings.seed_file)
        logger.info(f"Loaded {len(records)} seed events from {settings.seed_file}")
    else:
        records = build_seed_events()
    return EventStore(records)


def create_event_service(
    settings: Settings | None = None,
    on_notification: NotificationCallback | None = None,
) -> EventService:
    """Assemble a ready-to-use EventService.

    Args:
        settings: Configuration (default: global settings)
        on_notification: Presentation hook called for every notification

    Returns:
        EventService backed by a simulated-latency in-memory store
    """
    settings = settings or get_settings()
    store = create_store(settings)
    service = EventService(
        store=store,
        notifier=NotificationService(callback=on_notification),
        backend=SimulatedBackend(settings.operation_delays()),
        event_bus=EventBus(),
        settings=settings,
    )
    logger.info(f"{settings.app_name} event service ready ({len(store)} events)")
    return service
