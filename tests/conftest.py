"""Shared test configuration and fixtures for all tests."""

import asyncio
from typing import Dict, List, Optional

import httpx
import pytest

from src.api_tester.models import RunConfig
from .test_const import CONNECTION_REFUSED, HTTP_SUCCESS, RESPONSE_BODY, TEST_URL


class TrackingStream(httpx.AsyncByteStream):
    """Response body that remembers whether anyone read it."""

    def __init__(self, body: bytes = RESPONSE_BODY, error: Optional[Exception] = None, delay: float = 0.0):
        self.body = body
        self.error = error
        self.delay = delay
        self.consumed = False
        self.closed = False

    async def __aiter__(self):
        self.consumed = True
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        yield self.body

    async def aclose(self) -> None:
        self.closed = True


class MockTransportBuilder:
    """Builder for httpx.MockTransport instances that record every request."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.streams: List[TrackingStream] = []
        self._status_code = HTTP_SUCCESS
        self._error = None
        self._head_delay = 0.0
        self._body_error = None
        self._body_delay = 0.0
        self._redirects: Dict[str, str] = {}

    def with_status(self, status_code: int):
        self._status_code = status_code
        return self

    def with_error(self, error_cls=httpx.ConnectError, message: str = CONNECTION_REFUSED):
        self._error = (error_cls, message)
        return self

    def with_head_delay(self, seconds: float):
        """Hold the response head back, like a server that answers slowly."""
        self._head_delay = seconds
        return self

    def with_body_error(self, error: Exception):
        self._body_error = error
        return self

    def with_body_delay(self, seconds: float):
        self._body_delay = seconds
        return self

    def with_redirect(self, from_path: str, to_path: str):
        self._redirects[from_path] = to_path
        return self

    async def _handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._head_delay:
            await asyncio.sleep(self._head_delay)
        if self._error is not None:
            error_cls, message = self._error
            raise error_cls(message, request=request)
        if request.url.path in self._redirects:
            return httpx.Response(302, headers={"Location": self._redirects[request.url.path]})
        stream = TrackingStream(error=self._body_error, delay=self._body_delay)
        self.streams.append(stream)
        return httpx.Response(self._status_code, stream=stream)

    def build(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handler)


@pytest.fixture
def transport_builder():
    """Builder fixture for recording mock transports."""
    return MockTransportBuilder()


@pytest.fixture
def run_config():
    """Factory fixture for RunConfig with test defaults."""
    def _make(**overrides) -> RunConfig:
        values = {"url": TEST_URL, "total_calls": 4, "num_threads": 2}
        values.update(overrides)
        return RunConfig(**values)
    return _make
