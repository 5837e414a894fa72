"""Resilience – RetryPolicy, RetryContext and RetryExecutor."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Any, Awaitable, Callable, TypeVar

import tenacity

from mp_faulttolerance.config.validation.errors import InvalidSettingValueError
from mp_faulttolerance.kernel.time import MonotonicClock, SystemMonotonicClock
from mp_faulttolerance.observability.logging import get_logger
from mp_faulttolerance.resilience.outcome import Attempt, CallAttempt, Outcome, failure_kind
from mp_faulttolerance.resilience.retry.backoff import BackoffStrategy, ConstantBackoff
from mp_faulttolerance.resilience.retry.jitter import JitterStrategy, NoJitter

T = TypeVar("T")
logger = get_logger(__name__)

Sleep = Callable[[float], Awaitable[Any]]


class RetryPolicy:
    """How many times to re-attempt, and how long to wait in between.

    ``max_retries`` counts re-attempts, so a logical call makes at most
    ``max_retries + 1`` attempts.
    """

    def __init__(
        self,
        max_retries: int = 3,
        delay_seconds: float = 0.0,
        backoff: BackoffStrategy | None = None,
        jitter: JitterStrategy | None = None,
    ) -> None:
        if max_retries < 0:
            raise InvalidSettingValueError("max_retries", max_retries, "must be >= 0")
        if delay_seconds < 0:
            raise InvalidSettingValueError("retry_delay_seconds", delay_seconds, "must be >= 0")
        self.max_retries = max_retries
        self.backoff = backoff or ConstantBackoff(delay_seconds)
        self.jitter = jitter or NoJitter()

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def delay_after(self, attempt: int) -> float:
        """Seconds to wait after the *attempt*-th (1-based) failed attempt."""
        return self.jitter.apply(self.backoff.compute(attempt))


@dataclasses.dataclass
class RetryContext:
    """Attempt bookkeeping for one logical call.

    ``call_attempts`` holds one timed record per attempt, rejected
    admissions included, in the order they ran.
    """
    max_attempts: int
    call_attempts: list[CallAttempt] = dataclasses.field(default_factory=list)
    delays: list[float] = dataclasses.field(default_factory=list)

    @property
    def attempts(self) -> int:
        return len(self.call_attempts)

    @property
    def outcomes(self) -> list[Outcome[Any]]:
        return [attempt.outcome for attempt in self.call_attempts]

    @property
    def last_outcome(self) -> Outcome[Any] | None:
        return self.call_attempts[-1].outcome if self.call_attempts else None

    @property
    def exhausted(self) -> bool:
        return self.attempts >= self.max_attempts


class RetryExecutor:
    """Re-run an attempt until it succeeds or the budget is spent.

    Every failure kind is retried, including an open circuit: a rejected
    admission costs an attempt like any other failure. The first success
    ends the loop; otherwise the last outcome is returned.
    """

    def __init__(
        self,
        policy: RetryPolicy,
        sleep: Sleep | None = None,
        clock: MonotonicClock | None = None,
    ) -> None:
        self._policy = policy
        self._sleep = sleep or asyncio.sleep
        self._clock = clock or SystemMonotonicClock()

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    async def run(self, attempt: Attempt[T]) -> Outcome[T]:
        outcome, _ = await self.run_with_context(attempt)
        return outcome

    async def run_with_context(self, attempt: Attempt[T]) -> tuple[Outcome[T], RetryContext]:
        context = RetryContext(max_attempts=self._policy.max_attempts)

        async def tracked() -> Outcome[T]:
            started = self._clock.monotonic()
            outcome = await attempt()
            context.call_attempts.append(
                CallAttempt(
                    started_at=started,
                    outcome=outcome,
                    elapsed_seconds=self._clock.monotonic() - started,
                )
            )
            if outcome.is_err():
                logger.debug(
                    "retry.attempt_failed",
                    attempt=context.attempts,
                    max_attempts=context.max_attempts,
                    kind=failure_kind(outcome),
                )
            return outcome

        async def sleep(delay: float) -> None:
            context.delays.append(delay)
            await self._sleep(delay)

        retrying = tenacity.AsyncRetrying(
            stop=tenacity.stop_after_attempt(self._policy.max_attempts),
            wait=self._wait,
            retry=tenacity.retry_if_result(lambda outcome: outcome.is_err()),
            retry_error_callback=self._last_outcome,
            sleep=sleep,
        )
        outcome = await retrying(tracked)
        if outcome.is_err():
            logger.info(
                "retry.exhausted",
                attempts=context.attempts,
                kind=failure_kind(outcome),
            )
        return outcome, context

    def _wait(self, retry_state: tenacity.RetryCallState) -> float:
        return self._policy.delay_after(retry_state.attempt_number)

    @staticmethod
    def _last_outcome(retry_state: tenacity.RetryCallState) -> Outcome[Any]:
        return retry_state.outcome.result()  # type: ignore[union-attr]


__all__ = ["RetryContext", "RetryExecutor", "RetryPolicy", "Sleep"]
