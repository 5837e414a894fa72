"""Resilience – timeout guard, sliding-window circuit breaker, retry, fallback, pipeline."""

from mp_faulttolerance.resilience.errors import (
    FailureKind,
    InvocationFailure,
    RemoteFailure,
    TimeoutFailure,
)
from mp_faulttolerance.resilience.outcome import CallAttempt, Outcome
from mp_faulttolerance.resilience.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerOpenFailure,
    CircuitBreakerPolicy,
    CircuitBreakerRegistry,
    CircuitBreakerState,
)
from mp_faulttolerance.resilience.retry import RetryExecutor, RetryPolicy
from mp_faulttolerance.resilience.timeouts import TimeoutGuard, from_blocking
from mp_faulttolerance.resilience.fallback import FallbackDispatcher, FallbackFailure
from mp_faulttolerance.resilience.pipeline import PipelineComposer, PolicyConfig

__all__ = [
    "CallAttempt",
    "CircuitBreaker",
    "CircuitBreakerOpenFailure",
    "CircuitBreakerPolicy",
    "CircuitBreakerRegistry",
    "CircuitBreakerState",
    "FailureKind",
    "FallbackDispatcher",
    "FallbackFailure",
    "InvocationFailure",
    "Outcome",
    "PipelineComposer",
    "PolicyConfig",
    "RemoteFailure",
    "RetryExecutor",
    "RetryPolicy",
    "TimeoutFailure",
    "TimeoutGuard",
    "from_blocking",
]
