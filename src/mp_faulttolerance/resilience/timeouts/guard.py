"""Resilience – TimeoutGuard."""
from __future__ import annotations

import asyncio
from typing import Any, Callable, TypeVar

from mp_faulttolerance.kernel.time import MonotonicClock, SystemMonotonicClock
from mp_faulttolerance.kernel.types import Err, Ok
from mp_faulttolerance.observability.logging import get_logger
from mp_faulttolerance.resilience.errors import RemoteFailure, TimeoutFailure, as_invocation_failure
from mp_faulttolerance.resilience.outcome import CallAttempt, Invoker, Outcome

T = TypeVar("T")
logger = get_logger(__name__)


def _discard(task: asyncio.Future[Any]) -> None:
    # Abandoned attempts still finish; consume their result so asyncio
    # does not report an unretrieved exception.
    if not task.cancelled():
        task.exception()


def from_blocking(fn: Callable[[], T]) -> Invoker[T]:
    """Adapt a blocking zero-argument call into an invoker.

    The call runs on the default executor. When the guard gives up on it the
    worker thread is left to finish on its own.
    """

    async def invoke() -> T:
        return await asyncio.to_thread(fn)

    return invoke


class TimeoutGuard:
    """Bound one attempt to ``timeout_seconds``.

    The guard never waits past the deadline: an overrunning attempt is
    cancelled and abandoned, and the attempt is reported as a
    :class:`TimeoutFailure`.
    """

    def __init__(self, timeout_seconds: float, clock: MonotonicClock | None = None) -> None:
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        self.timeout_seconds = timeout_seconds
        self._clock = clock or SystemMonotonicClock()

    async def attempt(self, op: Invoker[T]) -> Outcome[T]:
        return (await self.run(op)).outcome

    async def run(self, op: Invoker[T]) -> CallAttempt:
        started = self._clock.monotonic()
        outcome = await self._execute(op)
        return CallAttempt(
            started_at=started,
            outcome=outcome,
            elapsed_seconds=self._clock.monotonic() - started,
        )

    async def _execute(self, op: Invoker[T]) -> Outcome[T]:
        task = asyncio.ensure_future(op())
        try:
            done, _ = await asyncio.wait({task}, timeout=self.timeout_seconds)
        except asyncio.CancelledError:
            task.cancel()
            task.add_done_callback(_discard)
            raise

        if not done:
            task.cancel()
            task.add_done_callback(_discard)
            logger.warning("timeout.exceeded", timeout_seconds=self.timeout_seconds)
            return Err(TimeoutFailure(timeout_seconds=self.timeout_seconds))

        if task.cancelled():
            return Err(RemoteFailure("Remote call was cancelled"))
        exc = task.exception()
        if exc is None:
            return Ok(task.result())
        if not isinstance(exc, Exception):
            raise exc
        return Err(as_invocation_failure(exc))


__all__ = ["TimeoutGuard", "from_blocking"]
