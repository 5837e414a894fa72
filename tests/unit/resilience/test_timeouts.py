"""Unit tests for TimeoutGuard."""

from __future__ import annotations

import asyncio
import time

import pytest

from mp_faulttolerance.kernel.types import Err, Ok
from mp_faulttolerance.resilience import FailureKind, RemoteFailure, TimeoutFailure
from mp_faulttolerance.resilience.timeouts import TimeoutGuard, from_blocking
from mp_faulttolerance.testing import ManualClock, Reply, ScriptedInvoker


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestTimeoutGuardConstruction:
    @pytest.mark.parametrize("timeout", [0, -1.0])
    def test_rejects_non_positive_timeout(self, timeout: float) -> None:
        with pytest.raises(ValueError):
            TimeoutGuard(timeout)

    def test_keeps_timeout(self) -> None:
        assert TimeoutGuard(2.5).timeout_seconds == 2.5


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------


class TestTimeoutGuardOutcomes:
    def test_fast_success_is_ok(self) -> None:
        invoker = ScriptedInvoker(Reply.ok("hello"))
        outcome = asyncio.run(TimeoutGuard(1.0).attempt(invoker))
        assert outcome == Ok("hello")
        assert invoker.calls == 1

    def test_remote_failure_passes_through(self) -> None:
        failure = RemoteFailure("HTTP 500", status_code=500)
        outcome = asyncio.run(TimeoutGuard(1.0).attempt(ScriptedInvoker(Reply.raising(failure))))
        assert isinstance(outcome, Err)
        assert outcome.error is failure

    def test_plain_exception_becomes_remote_failure(self) -> None:
        boom = ConnectionError("refused")
        outcome = asyncio.run(TimeoutGuard(1.0).attempt(ScriptedInvoker(Reply.raising(boom))))
        assert isinstance(outcome, Err)
        assert outcome.error.kind is FailureKind.REMOTE
        assert outcome.error.cause is boom

    def test_slow_call_times_out(self) -> None:
        invoker = ScriptedInvoker(Reply.ok("late", delay=1.0))

        async def run() -> None:
            start = time.monotonic()
            outcome = await TimeoutGuard(0.05).attempt(invoker)
            elapsed = time.monotonic() - start
            assert isinstance(outcome, Err)
            assert isinstance(outcome.error, TimeoutFailure)
            assert outcome.error.timeout_seconds == 0.05
            assert elapsed < 0.5
            # the abandoned attempt is cancelled, not awaited
            await asyncio.sleep(0.01)
            assert invoker.cancelled == 1
            assert invoker.completed == 0

        asyncio.run(run())

    def test_timeout_failure_message(self) -> None:
        invoker = ScriptedInvoker(Reply.ok("late", delay=1.0))
        outcome = asyncio.run(TimeoutGuard(0.05).attempt(invoker))
        assert str(outcome.error) == "Operation timed out after 0.05s"

    def test_abandoned_failure_is_not_reported(self) -> None:
        invoker = ScriptedInvoker(Reply.raising(RuntimeError("after deadline"), delay=0.1))

        async def run() -> None:
            outcome = await TimeoutGuard(0.02).attempt(invoker)
            assert isinstance(outcome.error, TimeoutFailure)

        asyncio.run(run())

    def test_invoker_cancelled_by_itself(self) -> None:
        async def cancels_itself() -> str:
            raise asyncio.CancelledError

        outcome = asyncio.run(TimeoutGuard(1.0).attempt(cancels_itself))
        assert isinstance(outcome.error, RemoteFailure)


# ---------------------------------------------------------------------------
# Caller cancellation and CallAttempt
# ---------------------------------------------------------------------------


class TestTimeoutGuardCancellation:
    def test_caller_cancellation_cancels_attempt(self) -> None:
        invoker = ScriptedInvoker(Reply.ok("late", delay=1.0))

        async def run() -> None:
            task = asyncio.create_task(TimeoutGuard(5.0).attempt(invoker))
            await asyncio.sleep(0.01)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task
            await asyncio.sleep(0)
            assert invoker.cancelled == 1

        asyncio.run(run())


class TestCallAttempt:
    def test_run_reports_elapsed_from_clock(self) -> None:
        clock = ManualClock()

        async def slow_on_clock() -> str:
            clock.advance(0.25)
            return "ok"

        attempt = asyncio.run(TimeoutGuard(1.0, clock).run(slow_on_clock))
        assert attempt.started_at == 1000.0
        assert attempt.elapsed_seconds == pytest.approx(0.25)
        assert attempt.succeeded is True

    def test_failed_attempt_not_succeeded(self) -> None:
        invoker = ScriptedInvoker(Reply.server_error())
        attempt = asyncio.run(TimeoutGuard(1.0).run(invoker))
        assert attempt.succeeded is False


# ---------------------------------------------------------------------------
# Blocking callables
# ---------------------------------------------------------------------------


class TestFromBlocking:
    def test_blocking_call_result(self) -> None:
        outcome = asyncio.run(TimeoutGuard(1.0).attempt(from_blocking(lambda: 42)))
        assert outcome == Ok(42)

    def test_blocking_call_is_not_waited_for(self) -> None:
        async def run() -> float:
            start = time.monotonic()
            outcome = await TimeoutGuard(0.05).attempt(from_blocking(lambda: time.sleep(0.3)))
            assert isinstance(outcome.error, TimeoutFailure)
            return time.monotonic() - start

        assert asyncio.run(run()) < 0.25
