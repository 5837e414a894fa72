"""Observability – structured logging, tracing and health checks.

``observability.health`` is imported explicitly; it depends on the
resilience package, which itself logs through this package.
"""

from mp_faulttolerance.observability.logging import JsonLoggerFactory, get_logger
from mp_faulttolerance.observability.tracing import NoopTracer, Span, SpanKind, Tracer

__all__ = [
    "JsonLoggerFactory",
    "NoopTracer",
    "Span",
    "SpanKind",
    "Tracer",
    "get_logger",
]
