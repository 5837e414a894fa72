"""Resilience – PipelineComposer."""
from __future__ import annotations

from typing import Generic, TypeVar

from mp_faulttolerance.kernel.time import MonotonicClock
from mp_faulttolerance.observability.logging import get_logger
from mp_faulttolerance.observability.tracing import NoopTracer, SpanKind, Tracer
from mp_faulttolerance.resilience.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerRegistry,
    CircuitBreakerState,
)
from mp_faulttolerance.resilience.fallback import Fallback, FallbackDispatcher
from mp_faulttolerance.resilience.outcome import Invoker, Outcome
from mp_faulttolerance.resilience.pipeline.config import PolicyConfig
from mp_faulttolerance.resilience.retry import RetryExecutor
from mp_faulttolerance.resilience.retry.policy import Sleep
from mp_faulttolerance.resilience.timeouts import TimeoutGuard

T = TypeVar("T")
logger = get_logger(__name__)


class PipelineComposer(Generic[T]):
    """One operation's resilience envelope.

    Nesting, outermost first::

        FallbackDispatcher -> RetryExecutor -> CircuitBreaker -> TimeoutGuard -> invoker

    Each retry attempt passes through the breaker again, so the breaker's
    window sees attempts, not logical calls. The composer holds no mutable
    state of its own; concurrent :meth:`call` invocations only share the
    breaker.

    Parameters
    ----------
    name:
        Operation identifier; also the breaker and span name.
    invoker:
        Zero-argument coroutine function performing the remote call.
    fallback:
        Degraded value, or a zero-argument (sync or async) callable producing it.
    config:
        Policy bundle; defaults to :class:`PolicyConfig` defaults.
    breaker:
        Pre-built breaker to share; built from *config* when omitted.
    clock:
        Monotonic clock for the breaker's open timer.
    tracer:
        Span source for logical calls (:class:`NoopTracer` by default).
    sleep:
        Coroutine used for the inter-attempt delay (``asyncio.sleep``).
    registry:
        When given, the breaker is registered under *name*.
    """

    def __init__(
        self,
        name: str,
        invoker: Invoker[T],
        fallback: Fallback[T],
        config: PolicyConfig | None = None,
        *,
        breaker: CircuitBreaker | None = None,
        clock: MonotonicClock | None = None,
        tracer: Tracer | None = None,
        sleep: Sleep | None = None,
        registry: CircuitBreakerRegistry | None = None,
    ) -> None:
        self.name = name
        self.config = config or PolicyConfig()
        self._invoker = invoker
        self._fallback = fallback
        self._guard = TimeoutGuard(self.config.timeout_seconds, clock)
        self._breaker = breaker or CircuitBreaker(name, self.config.circuit_breaker_policy(), clock)
        self._retry = RetryExecutor(self.config.retry_policy(), sleep, clock)
        self._dispatcher = FallbackDispatcher(self._retry)
        self._tracer = tracer or NoopTracer()
        if registry is not None:
            registry.register(self._breaker)

    @property
    def breaker(self) -> CircuitBreaker:
        return self._breaker

    def current_state(self) -> CircuitBreakerState:
        return self._breaker.current_state()

    def reset(self) -> None:
        self._breaker.reset()

    async def call(self) -> T:
        """Return the remote value, or the fallback value on any failure.

        Raises :class:`FallbackFailure` only when the fallback itself fails.
        """
        async with self._tracer.start_span(
            self.name,
            SpanKind.CLIENT,
            attributes={"operation": self.name, "max_attempts": self._retry.policy.max_attempts},
        ) as span:
            result = await self._dispatcher.invoke(self._attempt, self._fallback)
            span.set_attribute("circuit_breaker.state", self._breaker.current_state().value)
            return result

    async def _attempt(self) -> Outcome[T]:
        return await self._breaker.call(self._guarded)

    async def _guarded(self) -> Outcome[T]:
        attempt = await self._guard.run(self._invoker)
        logger.debug(
            "pipeline.attempt",
            operation=self.name,
            succeeded=attempt.succeeded,
            elapsed_seconds=round(attempt.elapsed_seconds, 4),
        )
        return attempt.outcome


__all__ = ["PipelineComposer"]
