"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── NotFoundError
    │   └── ConflictError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)

Resilience failures (``RemoteFailure``, ``TimeoutFailure``,
``CircuitBreakerOpenFailure``) extend :class:`InfrastructureError`;
``FallbackFailure`` and the config errors extend :class:`ApplicationError`.
"""

from mp_faulttolerance.kernel.errors.application import ApplicationError
from mp_faulttolerance.kernel.errors.base import BaseError
from mp_faulttolerance.kernel.errors.domain import (
    ConflictError,
    DomainError,
    NotFoundError,
)
from mp_faulttolerance.kernel.errors.infrastructure import InfrastructureError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "NotFoundError",
]
