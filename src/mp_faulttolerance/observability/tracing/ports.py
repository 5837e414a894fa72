"""Observability – Tracer, Span and SpanKind ports."""
from __future__ import annotations

import abc
import contextlib
from enum import Enum
from typing import Any, AsyncIterator


class SpanKind(str, Enum):
    INTERNAL = "INTERNAL"
    CLIENT = "CLIENT"


class Span(abc.ABC):
    """Represents an active trace span."""

    @abc.abstractmethod
    def set_attribute(self, key: str, value: Any) -> None: ...

    @abc.abstractmethod
    def add_event(self, name: str, attributes: dict[str, Any] | None = None) -> None: ...

    @abc.abstractmethod
    def set_status_ok(self) -> None: ...

    @abc.abstractmethod
    def record_exception(self, exc: BaseException) -> None: ...


class Tracer(abc.ABC):
    """Port: open spans around logical calls.

    Implementations record any exception escaping the ``async with`` block
    and mark the span OK otherwise.
    """

    @abc.abstractmethod
    @contextlib.asynccontextmanager
    async def start_span(
        self,
        name: str,
        kind: SpanKind = SpanKind.INTERNAL,
        attributes: dict[str, Any] | None = None,
    ) -> AsyncIterator[Span]: ...


__all__ = ["Span", "SpanKind", "Tracer"]
