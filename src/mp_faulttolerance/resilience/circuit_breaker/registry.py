"""Resilience – CircuitBreakerRegistry.

An application-owned mapping from operation name to breaker. There is no
module-level default registry: whoever builds the pipelines owns one and
hands it to operators and tests.
"""
from __future__ import annotations

import threading
from typing import Iterator

from mp_faulttolerance.kernel.errors import ConflictError, NotFoundError
from mp_faulttolerance.observability.logging import get_logger
from mp_faulttolerance.resilience.circuit_breaker.breaker import CircuitBreaker, CircuitBreakerMetrics
from mp_faulttolerance.resilience.circuit_breaker.state import CircuitBreakerState

logger = get_logger(__name__)


class CircuitBreakerRegistry:
    """Administrative access to a set of named breakers."""

    def __init__(self) -> None:
        self._breakers: dict[str, CircuitBreaker] = {}
        self._lock = threading.Lock()

    def register(self, breaker: CircuitBreaker) -> CircuitBreaker:
        with self._lock:
            if breaker.name in self._breakers:
                raise ConflictError(f"Circuit breaker '{breaker.name}' is already registered")
            self._breakers[breaker.name] = breaker
        return breaker

    def get(self, name: str) -> CircuitBreaker:
        with self._lock:
            breaker = self._breakers.get(name)
        if breaker is None:
            raise NotFoundError("Circuit breaker", name)
        return breaker

    def current_state(self, name: str) -> CircuitBreakerState:
        return self.get(name).current_state()

    def metrics(self) -> list[CircuitBreakerMetrics]:
        return [breaker.metrics() for breaker in self]

    def reset(self, name: str) -> None:
        self.get(name).reset()

    def reset_all(self) -> None:
        """Force every managed breaker back to CLOSED with an empty window."""
        breakers = list(self)
        for breaker in breakers:
            breaker.reset()
        logger.info("circuit_breaker.reset_all", count=len(breakers))

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._breakers)

    def __iter__(self) -> Iterator[CircuitBreaker]:
        with self._lock:
            breakers = list(self._breakers.values())
        return iter(breakers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._breakers)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._breakers


__all__ = ["CircuitBreakerRegistry"]
