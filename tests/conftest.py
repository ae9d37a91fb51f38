"""Shared fixtures. HTTP is served by httpx.MockTransport, no network needed."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

ECOSYSTEMS_HOST = "packages.ecosyste.ms"
LIBRARIESIO_HOST = "libraries.io"


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        async def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            result = handler(request)
            if not isinstance(result, httpx.Response):
                result = await result
            return result

        super().__init__(_record)

    def hosts(self) -> list[str]:
        return [r.url.host for r in self.requests]


@pytest.fixture
def make_client():
    """Return a factory building an AsyncClient over a RecordingTransport."""

    def _make(handler) -> tuple[httpx.AsyncClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        return httpx.AsyncClient(transport=transport), transport

    return _make


@pytest.fixture
def route():
    """Build a handler dispatching by host; an unrouted request fails the test."""

    def _route(ecosystems=None, librariesio=None):
        def _handler(request: httpx.Request):
            if request.url.host == ECOSYSTEMS_HOST and ecosystems is not None:
                return ecosystems(request)
            if request.url.host == LIBRARIESIO_HOST and librariesio is not None:
                return librariesio(request)
            raise AssertionError(f"unexpected request to {request.url}")

        return _handler

    return _route
