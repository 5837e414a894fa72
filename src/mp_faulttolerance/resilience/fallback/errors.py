"""Resilience – fallback errors."""
from __future__ import annotations

from typing import Any

from mp_faulttolerance.kernel.errors import ApplicationError
from mp_faulttolerance.resilience.errors import InvocationFailure


class FallbackFailure(ApplicationError):
    """The fallback itself raised.

    There is no further degradation path, so this is surfaced to the caller
    as a configuration error and never retried.

    Attributes
    ----------
    failure:
        The terminal invocation failure the fallback was meant to replace.
    """

    default_code = "fallback_failure"

    def __init__(self, failure: InvocationFailure, cause: Exception) -> None:
        super().__init__(
            f"Fallback failed after {failure.kind.value} failure: {cause!r}",
            detail={"failure": failure.to_dict()},
            cause=cause,
        )
        self.failure = failure

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["failure_kind"] = self.failure.kind.value
        return base


__all__ = ["FallbackFailure"]
