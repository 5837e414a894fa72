"""Resilience – circuit-breaker specific errors."""
from __future__ import annotations

from typing import Any

from mp_faulttolerance.resilience.errors import FailureKind, InvocationFailure


class CircuitBreakerOpenFailure(InvocationFailure):
    """Raised (or returned as an outcome) when a breaker refuses admission.

    Attributes
    ----------
    circuit_name:
        Name of the circuit breaker that rejected the attempt.
    """

    default_code = "circuit_breaker_open"
    kind = FailureKind.CIRCUIT_OPEN

    def __init__(self, circuit_name: str, message: str | None = None) -> None:
        self.circuit_name = circuit_name
        super().__init__(
            message or f"{circuit_name} circuit breaker is open",
            detail={"circuit_name": circuit_name},
        )

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["circuit_name"] = self.circuit_name
        return base


__all__ = ["CircuitBreakerOpenFailure"]
