"""Unit tests – HTTP adapter (HttpxInvoker and ResilientHttpClient)."""
from __future__ import annotations

import asyncio

import httpx
import pytest
import respx

from mp_faulttolerance.adapters.http import HttpxInvoker, ResilientHttpClient
from mp_faulttolerance.config import RestClientSettings
from mp_faulttolerance.kernel.errors import ConflictError, NotFoundError
from mp_faulttolerance.resilience import (
    CircuitBreakerState,
    PolicyConfig,
    RemoteFailure,
    TimeoutFailure,
)
from mp_faulttolerance.testing import ManualClock, RecordingSleep

BASE_URL = "http://localhost:8089"
CONFIG = PolicyConfig(
    timeout_seconds=2.0,
    max_retries=2,
    retry_delay_seconds=0.2,
    window_size=8,
    failure_ratio=0.5,
    open_duration_seconds=2.0,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _client(**kwargs) -> ResilientHttpClient:
    clock = ManualClock()
    return ResilientHttpClient(BASE_URL, clock=clock, sleep=RecordingSleep(clock), **kwargs)


# ---------------------------------------------------------------------------
# HttpxInvoker
# ---------------------------------------------------------------------------

class TestHttpxInvoker:
    @respx.mock
    def test_returns_text_and_sends_accept(self) -> None:
        route = respx.get(f"{BASE_URL}/api/test").mock(return_value=httpx.Response(200, text="hello"))

        async def run() -> None:
            async with httpx.AsyncClient(base_url=BASE_URL) as client:
                assert await HttpxInvoker(client, "get", "/api/test")() == "hello"
            assert route.calls.last.request.headers["accept"] == "text/plain"

        asyncio.run(run())

    @respx.mock
    def test_json_accept_decodes_body(self) -> None:
        respx.get(f"{BASE_URL}/api/items").mock(return_value=httpx.Response(200, json={"id": 1}))

        async def run() -> None:
            async with httpx.AsyncClient(base_url=BASE_URL) as client:
                invoker = HttpxInvoker(client, "GET", "/api/items", accept="application/json")
                assert await invoker() == {"id": 1}

        asyncio.run(run())

    @respx.mock
    def test_server_error_is_remote_failure(self) -> None:
        respx.get(f"{BASE_URL}/api/test").mock(return_value=httpx.Response(500))

        async def run() -> None:
            async with httpx.AsyncClient(base_url=BASE_URL) as client:
                with pytest.raises(RemoteFailure) as exc_info:
                    await HttpxInvoker(client, "GET", "/api/test")()
            assert exc_info.value.status_code == 500
            assert isinstance(exc_info.value.cause, httpx.HTTPStatusError)

        asyncio.run(run())

    @respx.mock
    def test_transport_timeout_is_timeout_failure(self) -> None:
        respx.get(f"{BASE_URL}/api/test").mock(side_effect=httpx.ReadTimeout("slow"))

        async def run() -> None:
            async with httpx.AsyncClient(base_url=BASE_URL) as client:
                with pytest.raises(TimeoutFailure):
                    await HttpxInvoker(client, "GET", "/api/test")()

        asyncio.run(run())

    @respx.mock
    def test_connect_error_is_remote_failure(self) -> None:
        respx.get(f"{BASE_URL}/api/test").mock(side_effect=httpx.ConnectError("refused"))

        async def run() -> None:
            async with httpx.AsyncClient(base_url=BASE_URL) as client:
                with pytest.raises(RemoteFailure) as exc_info:
                    await HttpxInvoker(client, "GET", "/api/test")()
            assert exc_info.value.status_code is None

        asyncio.run(run())

    @respx.mock
    def test_extra_headers_merged(self) -> None:
        route = respx.post(f"{BASE_URL}/api/test").mock(return_value=httpx.Response(200, text="ok"))

        async def run() -> None:
            async with httpx.AsyncClient(base_url=BASE_URL) as client:
                await HttpxInvoker(client, "POST", "/api/test", headers={"X-Trace": "1"}, content=b"x")()
            request = route.calls.last.request
            assert request.headers["x-trace"] == "1"
            assert request.headers["accept"] == "text/plain"
            assert request.content == b"x"

        asyncio.run(run())


# ---------------------------------------------------------------------------
# ResilientHttpClient
# ---------------------------------------------------------------------------

class TestResilientHttpClient:
    @respx.mock
    def test_all_good(self) -> None:
        route = respx.get(f"{BASE_URL}/api/test").mock(return_value=httpx.Response(200, text="hello"))

        async def run() -> None:
            async with _client() as client:
                client.operation("hello", "/api/test", fallback="fallback hello", config=CONFIG)
                assert await client.call("hello") == "hello"

        asyncio.run(run())
        assert route.call_count == 1

    @respx.mock
    def test_doesnt_recover_from_500(self) -> None:
        route = respx.get(f"{BASE_URL}/api/test").mock(return_value=httpx.Response(500))

        async def run() -> None:
            async with _client() as client:
                client.operation("hello", "/api/test", fallback="fallback hello", config=CONFIG)
                assert await client.call("hello") == "fallback hello"

        asyncio.run(run())
        assert route.call_count == 3

    @respx.mock
    def test_breaker_opens_after_eight_attempts(self) -> None:
        route = respx.get(f"{BASE_URL}/api/test").mock(return_value=httpx.Response(500))

        async def run() -> ResilientHttpClient:
            async with _client() as client:
                hello = client.operation("hello", "/api/test", fallback="fallback hello", config=CONFIG)
                for _ in range(5):
                    assert await hello.call() == "fallback hello"
                return client

        client = asyncio.run(run())
        assert route.call_count == 8
        assert client.registry.current_state("hello") == CircuitBreakerState.OPEN

    def test_timeout_triggers_fallback(self) -> None:
        hits = 0

        async def slow(request: httpx.Request) -> httpx.Response:
            nonlocal hits
            hits += 1
            await asyncio.sleep(1.0)
            return httpx.Response(200, text="too late")

        config = PolicyConfig(timeout_seconds=0.05, max_retries=2, window_size=8)

        async def run() -> None:
            async with _client(transport=httpx.MockTransport(slow)) as client:
                client.operation("hello", "/api/test", fallback="fallback hello", config=config)
                assert await client.call("hello") == "fallback hello"

        asyncio.run(run())
        assert hits == 3

    @respx.mock
    def test_reset_all_after_outage(self) -> None:
        route = respx.get(f"{BASE_URL}/api/test")
        route.mock(return_value=httpx.Response(500))

        async def run() -> None:
            async with _client() as client:
                hello = client.operation("hello", "/api/test", fallback="fallback hello", config=CONFIG)
                for _ in range(3):
                    await hello.call()
                assert hello.current_state() == CircuitBreakerState.OPEN
                client.registry.reset_all()
                route.mock(return_value=httpx.Response(200, text="hello"))
                assert await hello.call() == "hello"

        asyncio.run(run())
        assert route.call_count == 9

    def test_duplicate_operation_conflicts(self) -> None:
        client = _client()
        client.operation("hello", "/api/test", fallback="x")
        with pytest.raises(ConflictError):
            client.operation("hello", "/api/other", fallback="x")
        asyncio.run(client.aclose())

    def test_unknown_operation_not_found(self) -> None:
        client = _client()
        with pytest.raises(NotFoundError):
            client["missing"]
        asyncio.run(client.aclose())

    def test_operation_breaker_registered(self) -> None:
        client = _client()
        hello = client.operation("hello", "/api/test", fallback="x")
        assert client.registry.get("hello") is hello.breaker
        assert client["hello"] is hello
        asyncio.run(client.aclose())

    def test_from_settings(self) -> None:
        settings = RestClientSettings(url="http://svc:8080", connect_timeout_seconds=1.5)
        client = ResilientHttpClient.from_settings(settings)
        assert client._client.base_url.host == "svc"
        assert client._client.timeout.connect == 1.5
        assert client._client.timeout.read is None
        asyncio.run(client.aclose())

    @respx.mock
    def test_supplied_client_left_open(self) -> None:
        respx.get(f"{BASE_URL}/api/test").mock(return_value=httpx.Response(200, text="hello"))

        async def run() -> httpx.AsyncClient:
            external = httpx.AsyncClient(base_url=BASE_URL)
            async with _client(client=external) as client:
                client.operation("hello", "/api/test", fallback="fallback hello", config=CONFIG)
                assert await client.call("hello") == "hello"
            await client.aclose()
            assert not external.is_closed
            response = await external.get("/api/test")
            await external.aclose()
            assert response.text == "hello"
            return external

        assert asyncio.run(run()).is_closed

    def test_owned_client_closed_on_exit(self) -> None:
        async def run() -> ResilientHttpClient:
            async with _client() as client:
                assert not client._client.is_closed
            return client

        assert asyncio.run(run())._client.is_closed
