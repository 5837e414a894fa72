"""Kernel time – monotonic clock port + system implementation."""
from mp_faulttolerance.kernel.time.clock import MonotonicClock, SystemMonotonicClock

__all__ = ["MonotonicClock", "SystemMonotonicClock"]
