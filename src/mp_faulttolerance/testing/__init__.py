"""Testing support – fakes for exercising resilience pipelines deterministically."""

from mp_faulttolerance.testing.fakes import (
    ManualClock,
    RecordedSpan,
    RecordingSleep,
    RecordingTracer,
    Reply,
    ScriptedInvoker,
)

__all__ = [
    "ManualClock",
    "RecordedSpan",
    "RecordingSleep",
    "RecordingTracer",
    "Reply",
    "ScriptedInvoker",
]
