"""Observability – Health Checks."""
from mp_faulttolerance.observability.health.builtin import CircuitBreakerHealthCheck
from mp_faulttolerance.observability.health.check import HealthCheck, HealthStatus

__all__ = [
    "CircuitBreakerHealthCheck",
    "HealthCheck",
    "HealthStatus",
]
