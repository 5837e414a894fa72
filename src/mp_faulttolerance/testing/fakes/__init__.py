"""Testing fakes – in-memory doubles for clocks, sleeps and remote backends."""
from mp_faulttolerance.testing.fakes.clock import ManualClock
from mp_faulttolerance.testing.fakes.invoker import Reply, ScriptedInvoker
from mp_faulttolerance.testing.fakes.sleep import RecordingSleep
from mp_faulttolerance.testing.fakes.tracer import RecordedSpan, RecordingTracer

__all__ = [
    "ManualClock",
    "RecordedSpan",
    "RecordingSleep",
    "RecordingTracer",
    "Reply",
    "ScriptedInvoker",
]
