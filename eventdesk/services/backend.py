"""Execution backends for store operations.

A backend decides *how* an operation reaches the data: the simulated
backend waits a fixed latency and then applies the change in memory. A
real backend can replace it (raising TransientFailure on I/O hiccups)
without changing the mutation service's contract.
"""

import asyncio
from collections.abc import Callable, Mapping
from typing import Protocol, TypeVar

import structlog
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from eventdesk.errors import TransientFailure

logger = structlog.get_logger()

T = TypeVar("T")


class Backend(Protocol):
    """Runs one named operation and returns its result."""

    async def execute(self, operation: str, action: Callable[[], T]) -> T: ...


class SimulatedBackend:
    """In-memory backend with per-operation artificial latency.

    Operations without a configured delay use ``default_delay``.
    """

    def __init__(
        self,
        delays: Mapping[str, float] | None = None,
        default_delay: float = 0.0,
    ):
        self._delays = dict(delays or {})
        self._default_delay = default_delay

    def delay_for(self, operation: str) -> float:
        return self._delays.get(operation, self._default_delay)

    async def execute(self, operation: str, action: Callable[[], T]) -> T:
        delay = self.delay_for(operation)
        if delay > 0:
            await asyncio.sleep(delay)
        return action()


async def execute_with_retry(
    backend: Backend,
    operation: str,
    action: Callable[[], T],
    *,
    attempts: int = 3,
    wait_min: float = 0.5,
    wait_max: float = 8.0,
) -> T:
    """Run ``action`` through ``backend``, retrying transient failures.

    Retries with exponential backoff only on TransientFailure; any other
    error propagates immediately.

    Raises:
        TransientFailure: If every attempt failed transiently
    """
    result: T
    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=wait_min, min=wait_min, max=wait_max),
        retry=retry_if_exception_type(TransientFailure),
        before_sleep=before_sleep_log(logger, log_level=20),  # INFO level
        reraise=True,
    ):
        with attempt:
            result = await backend.execute(operation, action)
    return result
