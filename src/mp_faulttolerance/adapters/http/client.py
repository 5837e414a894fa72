"""HTTP adapter – ResilientHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from mp_faulttolerance.adapters.http.invoker import HttpxInvoker
from mp_faulttolerance.config.settings import RestClientSettings
from mp_faulttolerance.kernel.errors import ConflictError, NotFoundError
from mp_faulttolerance.kernel.time import MonotonicClock
from mp_faulttolerance.observability.tracing import Tracer
from mp_faulttolerance.resilience.circuit_breaker import CircuitBreakerRegistry
from mp_faulttolerance.resilience.fallback import Fallback
from mp_faulttolerance.resilience.pipeline import PipelineComposer, PolicyConfig
from mp_faulttolerance.resilience.retry.policy import Sleep


class ResilientHttpClient:
    """Named, resilient operations against one base URL.

    Each :meth:`operation` builds its own :class:`PipelineComposer` and
    registers its breaker in :attr:`registry`::

        client = ResilientHttpClient("http://localhost:8089")
        hello = client.operation(
            "hello", "/api/test",
            fallback="fallback hello",
            config=PolicyConfig(timeout_seconds=2, max_retries=2, window_size=8),
        )
        text = await hello.call()

    The transport read timeout is left unbounded; each attempt is bounded by
    the pipeline's timeout guard instead.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        connect_timeout_seconds: float = 5.0,
        client: httpx.AsyncClient | None = None,
        registry: CircuitBreakerRegistry | None = None,
        tracer: Tracer | None = None,
        clock: MonotonicClock | None = None,
        sleep: Sleep | None = None,
        **client_kwargs: Any,
    ) -> None:
        # A caller-supplied client stays open; its owner closes it.
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(None, connect=connect_timeout_seconds),
            **client_kwargs,
        )
        self.registry = registry or CircuitBreakerRegistry()
        self._tracer = tracer
        self._clock = clock
        self._sleep = sleep
        self._operations: dict[str, PipelineComposer[Any]] = {}

    @classmethod
    def from_settings(cls, settings: RestClientSettings, **kwargs: Any) -> "ResilientHttpClient":
        return cls(settings.url, connect_timeout_seconds=settings.connect_timeout_seconds, **kwargs)

    async def __aenter__(self) -> "ResilientHttpClient":
        if self._owns_client:
            await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._owns_client:
            await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def operation(
        self,
        name: str,
        path: str,
        *,
        fallback: Fallback[Any],
        config: PolicyConfig | None = None,
        method: str = "GET",
        accept: str = "text/plain",
        **request_kwargs: Any,
    ) -> PipelineComposer[Any]:
        if name in self._operations:
            raise ConflictError(f"Operation '{name}' is already defined")
        invoker = HttpxInvoker(self._client, method, path, accept=accept, **request_kwargs)
        pipeline: PipelineComposer[Any] = PipelineComposer(
            name,
            invoker,
            fallback,
            config,
            clock=self._clock,
            tracer=self._tracer,
            sleep=self._sleep,
            registry=self.registry,
        )
        self._operations[name] = pipeline
        return pipeline

    def __getitem__(self, name: str) -> PipelineComposer[Any]:
        try:
            return self._operations[name]
        except KeyError:
            raise NotFoundError("Operation", name) from None

    async def call(self, name: str) -> Any:
        return await self[name].call()


__all__ = ["ResilientHttpClient"]
