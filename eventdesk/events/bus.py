"""Async event bus for in-process pub/sub.

The mutation service publishes a domain event after every committed
change; view-layer code subscribes to learn that a new snapshot exists.
"""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from eventdesk.events.base import DomainEvent

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=DomainEvent)
EventHandler = Callable[[DomainEvent], None] | Callable[[DomainEvent], Awaitable[None]]


class EventBus:
    """Simple async event bus for in-process pub/sub.

    Features:
    - Type-safe subscriptions
    - Subscribing to a base class receives all of its subclasses
    - Async and sync handler support
    - Error isolation (one handler failure doesn't affect others)
    """

    def __init__(self):
        self._subscribers: dict[type[DomainEvent], list[EventHandler]] = {}

    def subscribe(
        self,
        event_type: type[T],
        handler: Callable[[T], None] | Callable[[T], Awaitable[None]],
    ) -> None:
        """Subscribe a handler to an event type.

        Args:
            event_type: The domain event class to subscribe to
            handler: Function to call when a matching event is published
        """
        self._subscribers.setdefault(event_type, []).append(handler)
        logger.debug(f"Subscribed handler to {event_type.__name__}")

    def unsubscribe(self, event_type: type[T], handler: EventHandler) -> None:
        """Unsubscribe a handler from an event type."""
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(handler)
                logger.debug(f"Unsubscribed handler from {event_type.__name__}")
            except ValueError:
                pass  # Handler wasn't subscribed

    def _handlers_for(self, event: DomainEvent) -> list[EventHandler]:
        handlers: list[EventHandler] = []
        for cls in type(event).__mro__:
            handlers.extend(self._subscribers.get(cls, []))
        return handlers

    async def publish(self, event: DomainEvent) -> None:
        """Publish an event to all subscribers.

        Handler errors are logged, never raised to the publisher: the
        change the event describes has already been committed.
        """
        handlers = self._handlers_for(event)
        logger.debug(f"Publishing {event.event_type} to {len(handlers)} handler(s)")

        tasks = []
        for handler in handlers:
            if inspect.iscoroutinefunction(handler):
                tasks.append(self._run_async_handler(handler, event))
            else:
                tasks.append(self._run_sync_handler(handler, event))

        if tasks:
            results = await asyncio.gather(*tasks, return_exceptions=True)
            for result in results:
                if isinstance(result, Exception):
                    logger.error(f"Handler error for {event.event_type}: {result}")

    async def _run_async_handler(
        self,
        handler: Callable[[DomainEvent], Awaitable[None]],
        event: DomainEvent,
    ) -> None:
        try:
            await handler(event)
        except Exception as e:
            logger.error(f"Async handler error: {e}")
            raise

    async def _run_sync_handler(
        self,
        handler: Callable[[DomainEvent], None],
        event: DomainEvent,
    ) -> None:
        """Run a sync handler in thread pool."""
        try:
            await asyncio.to_thread(handler, event)
        except Exception as e:
            logger.error(f"Sync handler error: {e}")
            raise

    def subscriber_count(self, event_type: type[DomainEvent]) -> int:
        """Get number of handlers subscribed directly to an event type."""
        return len(self._subscribers.get(event_type, []))
