"""Domain errors — lookups and conflicts on owned state (e.g. registries)."""

from __future__ import annotations

from typing import Any

from mp_faulttolerance.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a rule on owned state is violated."""

    default_code = "domain_error"


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


__all__ = [
    "ConflictError",
    "DomainError",
    "NotFoundError",
]
