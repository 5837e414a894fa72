"""Observability – distributed tracing ports."""
from mp_faulttolerance.observability.tracing.ports import Span, SpanKind, Tracer
from mp_faulttolerance.observability.tracing.noop import NoopTracer

__all__ = ["NoopTracer", "Span", "SpanKind", "Tracer"]
