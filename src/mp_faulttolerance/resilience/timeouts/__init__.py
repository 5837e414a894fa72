"""Resilience – per-attempt timeout guard."""
from mp_faulttolerance.resilience.timeouts.guard import TimeoutGuard, from_blocking

__all__ = ["TimeoutGuard", "from_blocking"]
