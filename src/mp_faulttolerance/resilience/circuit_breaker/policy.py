"""Resilience – CircuitBreakerPolicy."""
from __future__ import annotations

import dataclasses

from mp_faulttolerance.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class CircuitBreakerPolicy:
    """Configuration for a sliding-window circuit breaker.

    ``window_size`` is also the minimum number of recorded attempts before the
    failure ratio is evaluated. The breaker trips when
    ``failures / window_size >= failure_ratio``.
    """
    window_size: int = 20
    failure_ratio: float = 0.5
    open_duration_seconds: float = 5.0
    half_open_trials: int = 1

    def __post_init__(self) -> None:
        if self.window_size <= 0:
            raise InvalidSettingValueError("window_size", self.window_size, "must be > 0")
        if not 0 < self.failure_ratio <= 1:
            raise InvalidSettingValueError("failure_ratio", self.failure_ratio, "must be in (0, 1]")
        if self.open_duration_seconds < 0:
            raise InvalidSettingValueError(
                "open_duration_seconds", self.open_duration_seconds, "must be >= 0"
            )
        if self.half_open_trials <= 0:
            raise InvalidSettingValueError("half_open_trials", self.half_open_trials, "must be > 0")


__all__ = ["CircuitBreakerPolicy"]
