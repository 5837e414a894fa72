"""Resilience – fixed-capacity outcome window."""
from __future__ import annotations

from collections import deque


class SlidingWindow:
    """Ring buffer of the last ``size`` attempt results (``True`` = failed).

    Not thread-safe; the owning breaker serialises access.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be > 0")
        self._entries: deque[bool] = deque(maxlen=size)
        self._failures = 0

    @property
    def size(self) -> int:
        return self._entries.maxlen or 0

    @property
    def is_full(self) -> bool:
        return len(self._entries) == self.size

    @property
    def failures(self) -> int:
        return self._failures

    @property
    def failure_ratio(self) -> float:
        if not self._entries:
            return 0.0
        return self._failures / len(self._entries)

    def record(self, failed: bool) -> None:
        if self.is_full and self._entries[0]:
            self._failures -= 1
        self._entries.append(failed)
        if failed:
            self._failures += 1

    def clear(self) -> None:
        self._entries.clear()
        self._failures = 0

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["SlidingWindow"]
