"""Resilience – CircuitBreakerState enum."""
from __future__ import annotations
from enum import Enum


class CircuitBreakerState(str, Enum):
    """Breaker states; only the breaker's own transition rules change them."""

    CLOSED = "CLOSED"
    OPEN = "OPEN"
    HALF_OPEN = "HALF_OPEN"


__all__ = ["CircuitBreakerState"]
