"""Resilience – CircuitBreaker implementation."""
from __future__ import annotations

import dataclasses
import threading
from typing import TypeVar

from mp_faulttolerance.kernel.time import MonotonicClock, SystemMonotonicClock
from mp_faulttolerance.kernel.types import Err
from mp_faulttolerance.observability.logging import get_logger
from mp_faulttolerance.resilience.circuit_breaker.errors import CircuitBreakerOpenFailure
from mp_faulttolerance.resilience.circuit_breaker.policy import CircuitBreakerPolicy
from mp_faulttolerance.resilience.circuit_breaker.state import CircuitBreakerState
from mp_faulttolerance.resilience.circuit_breaker.window import SlidingWindow
from mp_faulttolerance.resilience.outcome import Attempt, Outcome

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Permit:
    """Admission ticket for one attempt.

    ``generation`` identifies the breaker state that granted the permit; an
    outcome recorded after a later transition is discarded.
    """
    generation: int
    trial: bool = False


@dataclasses.dataclass(frozen=True)
class CircuitBreakerMetrics:
    """Point-in-time view of a breaker for operators."""
    name: str
    state: CircuitBreakerState
    buffered_calls: int
    failed_calls: int
    failure_ratio: float
    trials_in_flight: int


class CircuitBreaker:
    """Thread-safe sliding-window circuit breaker.

    CLOSED: every completed attempt is pushed into the window; once it is
    full, a failure ratio at or above the threshold opens the breaker.
    OPEN: every admission is rejected until ``open_duration_seconds`` has
    elapsed, then the breaker is HALF_OPEN.
    HALF_OPEN: at most ``half_open_trials`` permits are granted. One failed
    trial re-opens the breaker, all trials succeeding closes it.

    The lock is only held for bookkeeping, never across an attempt.
    """

    def __init__(
        self,
        name: str,
        policy: CircuitBreakerPolicy | None = None,
        clock: MonotonicClock | None = None,
    ) -> None:
        self.name = name
        self._policy = policy or CircuitBreakerPolicy()
        self._clock = clock or SystemMonotonicClock()
        self._lock = threading.Lock()
        self._state = CircuitBreakerState.CLOSED
        self._window = SlidingWindow(self._policy.window_size)
        self._opened_at: float | None = None
        self._generation = 0
        self._trials_granted = 0
        self._trial_successes = 0
        self._log = get_logger(__name__, circuit=name)

    @property
    def policy(self) -> CircuitBreakerPolicy:
        return self._policy

    @property
    def state(self) -> CircuitBreakerState:
        return self.current_state()

    def current_state(self) -> CircuitBreakerState:
        with self._lock:
            self._maybe_transition_half_open()
            return self._state

    def metrics(self) -> CircuitBreakerMetrics:
        with self._lock:
            self._maybe_transition_half_open()
            return CircuitBreakerMetrics(
                name=self.name,
                state=self._state,
                buffered_calls=len(self._window),
                failed_calls=self._window.failures,
                failure_ratio=self._window.failure_ratio,
                trials_in_flight=self._trials_granted - self._trial_successes,
            )

    # ------------------------------------------------------------------
    # Admission protocol
    # ------------------------------------------------------------------

    def admit(self) -> Permit:
        """Grant a permit or raise :class:`CircuitBreakerOpenFailure`."""
        with self._lock:
            self._maybe_transition_half_open()
            if self._state == CircuitBreakerState.CLOSED:
                return Permit(self._generation)
            if (
                self._state == CircuitBreakerState.HALF_OPEN
                and self._trials_granted < self._policy.half_open_trials
            ):
                self._trials_granted += 1
                return Permit(self._generation, trial=True)
        self._log.debug("circuit_breaker.rejected")
        raise CircuitBreakerOpenFailure(self.name)

    def record(self, permit: Permit, outcome: Outcome[object]) -> None:
        """Apply the outcome of an admitted attempt."""
        failed = outcome.is_err()
        with self._lock:
            if permit.generation != self._generation:
                self._log.debug("circuit_breaker.stale_outcome", failed=failed)
                return
            if self._state == CircuitBreakerState.CLOSED:
                self._window.record(failed)
                if self._window.is_full and self._window.failure_ratio >= self._policy.failure_ratio:
                    self._open(self._window.failure_ratio)
            elif self._state == CircuitBreakerState.HALF_OPEN:
                self._window.record(failed)
                if failed:
                    self._open(self._window.failure_ratio)
                    return
                self._trial_successes += 1
                if self._trial_successes >= self._policy.half_open_trials:
                    self._close()

    def release(self, permit: Permit) -> None:
        """Return a permit whose attempt never completed."""
        with self._lock:
            if (
                permit.trial
                and permit.generation == self._generation
                and self._state == CircuitBreakerState.HALF_OPEN
            ):
                self._trials_granted -= 1

    async def call(self, attempt: Attempt[T]) -> Outcome[T]:
        """Run *attempt* under admission control.

        A rejection is returned as an ``Err`` without running *attempt*.
        """
        try:
            permit = self.admit()
        except CircuitBreakerOpenFailure as exc:
            return Err(exc)
        try:
            outcome = await attempt()
        except BaseException:
            self.release(permit)
            raise
        self.record(permit, outcome)
        return outcome

    def reset(self) -> None:
        """Administrative reset: CLOSED with an empty window."""
        with self._lock:
            self._transition(CircuitBreakerState.CLOSED)
            self._opened_at = None
        self._log.info("circuit_breaker.reset")

    # ------------------------------------------------------------------
    # Transitions (caller holds the lock)
    # ------------------------------------------------------------------

    def _transition(self, state: CircuitBreakerState) -> None:
        self._state = state
        self._generation += 1
        self._window.clear()
        self._trials_granted = 0
        self._trial_successes = 0

    def _open(self, failure_ratio: float) -> None:
        self._transition(CircuitBreakerState.OPEN)
        self._opened_at = self._clock.monotonic()
        self._log.error(
            "circuit_breaker.opened",
            failure_ratio=round(failure_ratio, 3),
            threshold=self._policy.failure_ratio,
            open_duration_seconds=self._policy.open_duration_seconds,
        )

    def _close(self) -> None:
        self._transition(CircuitBreakerState.CLOSED)
        self._opened_at = None
        self._log.info("circuit_breaker.closed")

    def _maybe_transition_half_open(self) -> None:
        if (
            self._state == CircuitBreakerState.OPEN
            and self._opened_at is not None
            and self._clock.monotonic() - self._opened_at >= self._policy.open_duration_seconds
        ):
            self._transition(CircuitBreakerState.HALF_OPEN)
            self._log.info("circuit_breaker.half_open")


__all__ = ["CircuitBreaker", "CircuitBreakerMetrics", "Permit"]
