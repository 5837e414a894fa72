"""Resilience – jitter strategies."""
from __future__ import annotations

import abc
import random


class JitterStrategy(abc.ABC):
    """Apply randomness to a backoff delay."""

    @abc.abstractmethod
    def apply(self, delay: float) -> float: ...


class NoJitter(JitterStrategy):
    def apply(self, delay: float) -> float:
        return delay


class FullJitter(JitterStrategy):
    """Uniform random in [0, delay]."""

    def apply(self, delay: float) -> float:
        return random.uniform(0, delay)


__all__ = ["FullJitter", "JitterStrategy", "NoJitter"]
