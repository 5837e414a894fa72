"""Resilience – failure taxonomy shared by every policy.

Each failure carries a :class:`FailureKind`. Retry and fallback treat all
kinds alike; the kind exists for logging, metrics and callers that want to
tell a slow backend from a broken one.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from mp_faulttolerance.kernel.errors import InfrastructureError


class FailureKind(str, Enum):
    REMOTE = "remote"
    TIMEOUT = "timeout"
    CIRCUIT_OPEN = "circuit_open"


class InvocationFailure(InfrastructureError):
    """One attempt (or admission for it) did not produce a value."""

    default_code = "invocation_failure"
    kind: FailureKind = FailureKind.REMOTE

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["kind"] = self.kind.value
        return base


class RemoteFailure(InvocationFailure):
    """The remote call completed but reported an error (e.g. a non-2xx status)."""

    default_code = "remote_failure"
    kind = FailureKind.REMOTE

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code

    @classmethod
    def from_exception(cls, exc: Exception) -> "RemoteFailure":
        return cls(f"Remote call failed: {exc!r}", cause=exc)


class TimeoutFailure(InvocationFailure):
    """An attempt exceeded its deadline."""

    default_code = "timeout_failure"
    kind = FailureKind.TIMEOUT

    def __init__(
        self,
        message: str | None = None,
        *,
        timeout_seconds: float | None = None,
        **kwargs: Any,
    ) -> None:
        if message is None:
            message = f"Operation timed out after {timeout_seconds}s"
        super().__init__(message, **kwargs)
        self.timeout_seconds = timeout_seconds


def as_invocation_failure(exc: Exception) -> InvocationFailure:
    """Keep taxonomy failures as they are; classify anything else as remote."""
    if isinstance(exc, InvocationFailure):
        return exc
    return RemoteFailure.from_exception(exc)


__all__ = [
    "FailureKind",
    "InvocationFailure",
    "RemoteFailure",
    "TimeoutFailure",
    "as_invocation_failure",
]
