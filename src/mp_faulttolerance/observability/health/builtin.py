from __future__ import annotations

from mp_faulttolerance.observability.health.check import HealthCheck, HealthStatus
from mp_faulttolerance.resilience.circuit_breaker import CircuitBreakerRegistry, CircuitBreakerState

__all__ = ["CircuitBreakerHealthCheck"]


class CircuitBreakerHealthCheck(HealthCheck):
    """Unhealthy while any registered breaker is OPEN.

    HALF_OPEN counts as healthy: the breaker is already probing recovery.
    """

    def __init__(self, registry: CircuitBreakerRegistry, name: str = "circuit_breakers") -> None:
        self._registry = registry
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    async def check(self) -> HealthStatus:
        states = {breaker.name: breaker.current_state() for breaker in self._registry}
        open_names = sorted(n for n, s in states.items() if s == CircuitBreakerState.OPEN)
        return HealthStatus(
            healthy=not open_names,
            detail=f"open: {', '.join(open_names)}" if open_names else None,
            data={name: state.value for name, state in states.items()},
        )
