"""Resilience – degraded-value substitution for terminal failures."""
from mp_faulttolerance.resilience.fallback.errors import FallbackFailure
from mp_faulttolerance.resilience.fallback.policy import Fallback, FallbackDispatcher, resolve_fallback

__all__ = ["Fallback", "FallbackDispatcher", "FallbackFailure", "resolve_fallback"]
