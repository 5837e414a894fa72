"""Resilience – PolicyConfig."""
from __future__ import annotations

import dataclasses

from mp_faulttolerance.config.validation.errors import InvalidSettingValueError
from mp_faulttolerance.resilience.circuit_breaker.policy import CircuitBreakerPolicy
from mp_faulttolerance.resilience.retry import RetryPolicy


@dataclasses.dataclass(frozen=True)
class PolicyConfig:
    """Immutable policy bundle for one pipeline.

    Defaults follow the MicroProfile Fault Tolerance defaults.
    """
    timeout_seconds: float = 1.0
    max_retries: int = 3
    retry_delay_seconds: float = 0.0
    window_size: int = 20
    failure_ratio: float = 0.5
    open_duration_seconds: float = 5.0
    half_open_trials: int = 1

    def __post_init__(self) -> None:
        if self.timeout_seconds <= 0:
            raise InvalidSettingValueError("timeout_seconds", self.timeout_seconds, "must be > 0")
        # Remaining ranges are enforced by the derived policies.
        self.retry_policy()
        self.circuit_breaker_policy()

    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(max_retries=self.max_retries, delay_seconds=self.retry_delay_seconds)

    def circuit_breaker_policy(self) -> CircuitBreakerPolicy:
        return CircuitBreakerPolicy(
            window_size=self.window_size,
            failure_ratio=self.failure_ratio,
            open_duration_seconds=self.open_duration_seconds,
            half_open_trials=self.half_open_trials,
        )


__all__ = ["PolicyConfig"]
