"""Infrastructure errors — I/O failures, remote integrations."""

from __future__ import annotations

from mp_faulttolerance.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation.

    Every failure an invocation pipeline can absorb (remote error, timeout,
    open circuit) derives from this class.
    """

    default_code = "infrastructure_error"


__all__ = ["InfrastructureError"]
