"""Resilience – FallbackDispatcher."""
from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, TypeAlias, TypeVar

from mp_faulttolerance.kernel.types import Ok
from mp_faulttolerance.observability.logging import get_logger
from mp_faulttolerance.resilience.fallback.errors import FallbackFailure
from mp_faulttolerance.resilience.outcome import Attempt
from mp_faulttolerance.resilience.retry import RetryExecutor

T = TypeVar("T")
logger = get_logger(__name__)

Fallback: TypeAlias = Callable[[], T] | Callable[[], Awaitable[T]] | T


async def resolve_fallback(fallback: Fallback[T]) -> T:
    """Produce the degraded value: call *fallback* if callable, await if needed."""
    if not callable(fallback):
        return fallback  # type: ignore[return-value]
    value = fallback()
    if inspect.isawaitable(value):
        value = await value
    return value  # type: ignore[return-value]


class FallbackDispatcher:
    """Run the retry loop; substitute the fallback for any terminal failure."""

    def __init__(self, retry: RetryExecutor) -> None:
        self._retry = retry

    async def invoke(self, attempt: Attempt[T], fallback: Fallback[T]) -> T:
        outcome = await self._retry.run(attempt)
        if isinstance(outcome, Ok):
            return outcome.value

        failure = outcome.error
        logger.info("fallback.applied", kind=failure.kind, code=failure.code)
        try:
            return await resolve_fallback(fallback)
        except Exception as exc:
            logger.error("fallback.failed", kind=failure.kind, error=repr(exc))
            raise FallbackFailure(failure, exc) from exc


__all__ = ["Fallback", "FallbackDispatcher", "resolve_fallback"]
