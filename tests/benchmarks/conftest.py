"""conftest.py for benchmarks.

The ``event_loop`` fixture is session-scoped so every benchmark shares a
single asyncio event loop, which keeps loop start-up out of the timings.
"""

from __future__ import annotations

import asyncio

import pytest


@pytest.fixture(scope="session")
def event_loop():
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture(scope="session")
def run_async(event_loop):
    """Execute a coroutine in the session event loop."""

    def _run(coro):
        return event_loop.run_until_complete(coro)

    return _run
