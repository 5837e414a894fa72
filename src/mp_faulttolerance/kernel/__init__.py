"""Kernel – framework-agnostic building blocks (errors, result type, clocks)."""

from mp_faulttolerance.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
)
from mp_faulttolerance.kernel.time import MonotonicClock, SystemMonotonicClock
from mp_faulttolerance.kernel.types import Err, Ok, Result

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "Err",
    "InfrastructureError",
    "MonotonicClock",
    "NotFoundError",
    "Ok",
    "Result",
    "SystemMonotonicClock",
]
