"""Observability – NoopTracer."""
from __future__ import annotations

import contextlib
from typing import Any, AsyncIterator

from mp_faulttolerance.observability.tracing.ports import Span, SpanKind, Tracer


class _NoopSpan(Span):
    def set_attribute(self, key: str, value: Any) -> None:
        pass

    def add_event(self, name: str, attributes: dict[str, Any] | None = None) -> None:
        pass

    def set_status_ok(self) -> None:
        pass

    def record_exception(self, exc: BaseException) -> None:
        pass


class NoopTracer(Tracer):
    """Silent no-op tracer, the default for pipelines built without one."""

    @contextlib.asynccontextmanager
    async def start_span(
        self,
        name: str,  # noqa: ARG002
        kind: SpanKind = SpanKind.INTERNAL,  # noqa: ARG002
        attributes: dict[str, Any] | None = None,  # noqa: ARG002
    ) -> AsyncIterator[Span]:
        yield _NoopSpan()


__all__ = ["NoopTracer"]
