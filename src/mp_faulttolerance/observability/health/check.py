from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

__all__ = ["HealthCheck", "HealthStatus"]


@dataclass
class HealthStatus:
    healthy: bool
    detail: str | None = None
    latency_ms: float = 0.0
    data: dict[str, Any] = field(default_factory=dict)


class HealthCheck(ABC):
    """Base class for health checks exposed to readiness probes."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    async def check(self) -> HealthStatus: ...

    async def timed_check(self) -> HealthStatus:
        start = time.monotonic()
        try:
            status = await self.check()
        except Exception as exc:  # noqa: BLE001
            status = HealthStatus(healthy=False, detail=f"exception: {exc}")
        status.latency_ms = (time.monotonic() - start) * 1000
        return status
