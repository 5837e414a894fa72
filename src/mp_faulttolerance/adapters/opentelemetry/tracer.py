"""OpenTelemetry adapter – OtelTracer."""
from __future__ import annotations

import contextlib
from typing import Any, AsyncIterator

from opentelemetry import trace
from opentelemetry.trace import SpanKind as OtelKind
from opentelemetry.trace import StatusCode

from mp_faulttolerance.observability.tracing import Span, SpanKind, Tracer

_KIND_MAP = {
    SpanKind.INTERNAL: OtelKind.INTERNAL,
    SpanKind.CLIENT: OtelKind.CLIENT,
}


class _OtelSpan(Span):
    def __init__(self, span: Any) -> None:
        self._span = span

    def set_attribute(self, key: str, value: Any) -> None:
        self._span.set_attribute(key, value)

    def add_event(self, name: str, attributes: dict[str, Any] | None = None) -> None:
        self._span.add_event(name, attributes=attributes or {})

    def set_status_ok(self) -> None:
        self._span.set_status(StatusCode.OK)

    def record_exception(self, exc: BaseException) -> None:
        self._span.record_exception(exc)
        self._span.set_status(StatusCode.ERROR, str(exc))


class OtelTracer(Tracer):
    """OpenTelemetry tracer adapter.

    Uses the globally configured tracer provider; without an SDK installed
    the spans are non-recording.
    """

    def __init__(self, service_name: str = "mp-faulttolerance", tracer: Any = None) -> None:
        self._tracer = tracer or trace.get_tracer(service_name)

    @contextlib.asynccontextmanager
    async def start_span(
        self,
        name: str,
        kind: SpanKind = SpanKind.INTERNAL,
        attributes: dict[str, Any] | None = None,
    ) -> AsyncIterator[Span]:
        with self._tracer.start_as_current_span(
            name,
            kind=_KIND_MAP.get(kind, OtelKind.INTERNAL),
            attributes=attributes,
            record_exception=False,
            set_status_on_exception=False,
        ) as otel_span:
            span = _OtelSpan(otel_span)
            try:
                yield span
            except BaseException as exc:
                span.record_exception(exc)
                raise
            span.set_status_ok()


__all__ = ["OtelTracer"]
