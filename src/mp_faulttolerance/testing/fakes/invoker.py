"""Testing fakes – ScriptedInvoker, a stand-in remote backend."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Any, Iterable

from mp_faulttolerance.resilience.errors import RemoteFailure


@dataclasses.dataclass(frozen=True)
class Reply:
    """One scripted backend response."""
    value: Any = None
    error: Exception | None = None
    delay: float = 0.0

    @classmethod
    def ok(cls, value: Any, delay: float = 0.0) -> "Reply":
        return cls(value=value, delay=delay)

    @classmethod
    def server_error(cls, status_code: int = 500, delay: float = 0.0) -> "Reply":
        return cls(error=RemoteFailure(f"HTTP {status_code}", status_code=status_code), delay=delay)

    @classmethod
    def raising(cls, error: Exception, delay: float = 0.0) -> "Reply":
        return cls(error=error, delay=delay)


class ScriptedInvoker:
    """Counts calls and replays replies in order; the last one repeats.

    ``calls`` counts every invocation, ``completed`` only those that ran to
    the end (abandoned, timed-out attempts are cancelled mid-delay).
    """

    def __init__(self, replies: Iterable[Reply] | Reply) -> None:
        script = [replies] if isinstance(replies, Reply) else list(replies)
        if not script:
            raise ValueError("at least one reply is required")
        self._script = script
        self.calls = 0
        self.completed = 0
        self.cancelled = 0

    def script(self, replies: Iterable[Reply] | Reply) -> None:
        """Replace the remaining script, e.g. when the backend recovers."""
        self._script = [replies] if isinstance(replies, Reply) else list(replies)
        self.calls = 0
        self.completed = 0
        self.cancelled = 0

    def _next(self) -> Reply:
        index = min(self.calls, len(self._script) - 1)
        self.calls += 1
        return self._script[index]

    async def __call__(self) -> Any:
        reply = self._next()
        if reply.delay:
            try:
                await asyncio.sleep(reply.delay)
            except asyncio.CancelledError:
                self.cancelled += 1
                raise
        self.completed += 1
        if reply.error is not None:
            raise reply.error
        return reply.value


__all__ = ["Reply", "ScriptedInvoker"]
