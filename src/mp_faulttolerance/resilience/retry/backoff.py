"""Resilience – backoff strategies."""
from __future__ import annotations

import abc


class BackoffStrategy(abc.ABC):
    """Compute wait duration (seconds) after the *attempt*-th failure (1-based)."""

    @abc.abstractmethod
    def compute(self, attempt: int) -> float: ...


class ConstantBackoff(BackoffStrategy):
    """Fixed delay between attempts."""

    def __init__(self, delay: float = 0.0) -> None:
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self._delay = delay

    @property
    def delay(self) -> float:
        return self._delay

    def compute(self, attempt: int) -> float:  # noqa: ARG002
        return self._delay


class ExponentialBackoff(BackoffStrategy):
    """Delay doubles after each failure: ``base_delay * 2^(attempt - 1)``, capped."""

    def __init__(self, base_delay: float = 0.1, max_delay: float = 30.0) -> None:
        self._base = base_delay
        self._max = max_delay

    def compute(self, attempt: int) -> float:
        return min(self._base * (2 ** max(attempt - 1, 0)), self._max)


__all__ = ["BackoffStrategy", "ConstantBackoff", "ExponentialBackoff"]
