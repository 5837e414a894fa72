"""Config settings – environment-driven policy and REST client settings."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, ClassVar

from mp_faulttolerance.config.settings.base import Settings

if TYPE_CHECKING:
    from mp_faulttolerance.resilience.pipeline.config import PolicyConfig


@dataclasses.dataclass
class ResilienceSettings(Settings):
    """One policy bundle, e.g. ``FAULT_TOLERANCE_MAX_RETRIES=2``.

    Range checks are delegated to :class:`PolicyConfig` so that both
    construction paths reject the same values.
    """

    _prefix: ClassVar[str] = "FAULT_TOLERANCE"

    timeout_seconds: float = 1.0
    max_retries: int = 3
    retry_delay_seconds: float = 0.0
    window_size: int = 20
    failure_ratio: float = 0.5
    open_duration_seconds: float = 5.0
    half_open_trials: int = 1

    def _validate(self) -> None:
        self.to_policy_config()

    def to_policy_config(self) -> "PolicyConfig":
        from mp_faulttolerance.resilience.pipeline.config import PolicyConfig

        return PolicyConfig(
            timeout_seconds=self.timeout_seconds,
            max_retries=self.max_retries,
            retry_delay_seconds=self.retry_delay_seconds,
            window_size=self.window_size,
            failure_ratio=self.failure_ratio,
            open_duration_seconds=self.open_duration_seconds,
            half_open_trials=self.half_open_trials,
        )


@dataclasses.dataclass
class RestClientSettings(Settings):
    """Location of the remote service, e.g. ``REST_CLIENT_URL=http://localhost:8089``."""

    _prefix: ClassVar[str] = "REST_CLIENT"

    url: str
    connect_timeout_seconds: float = 5.0

    def _validate(self) -> None:
        self._require(
            "url", self.url,
            self.url.startswith(("http://", "https://")),
            "must be an absolute http(s) URL",
        )
        self._require(
            "connect_timeout_seconds", self.connect_timeout_seconds,
            self.connect_timeout_seconds > 0,
            "must be positive",
        )


__all__ = ["ResilienceSettings", "RestClientSettings"]
