"""Kernel time – MonotonicClock protocol + implementation.

Durations (open-circuit timers, attempt timing) are measured on a monotonic
clock so wall-clock adjustments never shorten or extend them.
"""
from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class MonotonicClock(Protocol):
    """Port: monotonic seconds source for deterministic testing."""

    def monotonic(self) -> float: ...


class SystemMonotonicClock:
    """Production clock that delegates to :func:`time.monotonic`."""

    def monotonic(self) -> float:
        return time.monotonic()


__all__ = ["MonotonicClock", "SystemMonotonicClock"]
