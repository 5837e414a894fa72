"""Resilience – attempt outcomes."""
from __future__ import annotations

import dataclasses
from typing import Any, Awaitable, Callable, TypeAlias, TypeVar

from mp_faulttolerance.kernel.types import Err, Ok
from mp_faulttolerance.resilience.errors import FailureKind, InvocationFailure

T = TypeVar("T")

Outcome: TypeAlias = Ok[T] | Err[InvocationFailure]
Invoker: TypeAlias = Callable[[], Awaitable[T]]
Attempt: TypeAlias = Callable[[], Awaitable[Outcome[T]]]


def failure_kind(outcome: Outcome[Any]) -> FailureKind | None:
    """``None`` for a success, otherwise the failure's kind."""
    if isinstance(outcome, Err):
        return outcome.error.kind
    return None


@dataclasses.dataclass(frozen=True)
class CallAttempt:
    """One pass through the timeout guard and the invoker."""

    started_at: float
    outcome: Outcome[Any]
    elapsed_seconds: float

    @property
    def succeeded(self) -> bool:
        return self.outcome.is_ok()


__all__ = ["Attempt", "CallAttempt", "Invoker", "Outcome", "failure_kind"]
