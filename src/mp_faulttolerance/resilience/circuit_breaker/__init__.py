"""Resilience – sliding-window Circuit Breaker."""
from mp_faulttolerance.resilience.circuit_breaker.errors import CircuitBreakerOpenFailure
from mp_faulttolerance.resilience.circuit_breaker.state import CircuitBreakerState
from mp_faulttolerance.resilience.circuit_breaker.policy import CircuitBreakerPolicy
from mp_faulttolerance.resilience.circuit_breaker.window import SlidingWindow
from mp_faulttolerance.resilience.circuit_breaker.breaker import CircuitBreaker, CircuitBreakerMetrics, Permit
from mp_faulttolerance.resilience.circuit_breaker.registry import CircuitBreakerRegistry

__all__ = [
    "CircuitBreaker",
    "CircuitBreakerMetrics",
    "CircuitBreakerOpenFailure",
    "CircuitBreakerPolicy",
    "CircuitBreakerRegistry",
    "CircuitBreakerState",
    "Permit",
    "SlidingWindow",
]
