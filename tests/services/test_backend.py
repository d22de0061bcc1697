"""Tests for execution backends and transient-failure retry."""

import pytest

from eventdesk.errors import NotFoundError, TransientFailure
from eventdesk.services import SimulatedBackend, execute_with_retry


class CountingBackend:
    """Backend raising a queued sequence of errors before succeeding."""

    def __init__(self, *errors: Exception):
        self.errors = list(errors)
        self.operations: list[str] = []

    async def execute(self, operation, action):
        self.operations.append(operation)
        if self.errors:
            raise self.errors.pop(0)
        return action()


class TestSimulatedBackend:
    """Tests for SimulatedBackend."""

    def test_delay_lookup(self) -> None:
        backend = SimulatedBackend({"create": 1.0}, default_delay=0.2)
        assert backend.delay_for("create") == 1.0
        assert backend.delay_for("list") == 0.2

    @pytest.mark.asyncio
    async def test_execute_returns_action_result(self) -> None:
        backend = SimulatedBackend({"list": 0.01})
        assert await backend.execute("list", lambda: [1, 2]) == [1, 2]

    @pytest.mark.asyncio
    async def test_action_errors_propagate(self) -> None:
        backend = SimulatedBackend()

        def action():
            raise NotFoundError("evt-1")

        with pytest.raises(NotFoundError):
            await backend.execute("delete", action)


class TestExecuteWithRetry:
    """Tests for execute_with_retry()."""

    @pytest.mark.asyncio
    async def test_retries_transient_failures(self) -> None:
        backend = CountingBackend(TransientFailure("a"), TransientFailure("b"))
        result = await execute_with_retry(
            backend, "update", lambda: "ok", attempts=3, wait_min=0, wait_max=0
        )
        assert result == "ok"
        assert backend.operations == ["update"] * 3

    @pytest.mark.asyncio
    async def test_gives_up_after_attempts(self) -> None:
        backend = CountingBackend(*(TransientFailure(str(i)) for i in range(5)))
        with pytest.raises(TransientFailure) as exc_info:
            await execute_with_retry(
                backend, "update", lambda: "ok", attempts=2, wait_min=0, wait_max=0
            )
        assert exc_info.value.message == "1"
        assert len(backend.operations) == 2

    @pytest.mark.asyncio
    async def test_other_errors_not_retried(self) -> None:
        backend = CountingBackend(ValueError("bad"))
        with pytest.raises(ValueError):
            await execute_with_retry(backend, "create", lambda: "ok", wait_min=0, wait_max=0)
        assert len(backend.operations) == 1
