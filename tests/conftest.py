"""Pytest configuration: adds src/ to sys.path and provides transport fakes."""

import os
import sys
import time
from types import SimpleNamespace
from typing import Any

import pytest

# Add src/ to Python path so tests can import from azrest
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from azure.core.credentials import AccessToken  # noqa: E402
from azure.core.utils import CaseInsensitiveDict  # noqa: E402

FAKE_TOKEN = "fake-token-abc"


class FakeHttpResponse:
    """Minimal stand-in for an azure-core async transport response."""

    def __init__(
        self,
        status_code: int = 200,
        body: bytes = b"",
        headers: dict[str, str] | None = None,
        reason: str = "OK",
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.headers = CaseInsensitiveDict(headers or {})
        self.content = body

    async def read(self) -> bytes:
        return self.content

    def text(self, encoding: str | None = None) -> str:
        return self.content.decode(encoding or "utf-8", errors="replace")


class FakePipeline:
    """Records every request and answers with queued responses in order."""

    def __init__(self, *responses: FakeHttpResponse) -> None:
        self.responses = list(responses)
        self.requests: list[Any] = []
        self.closed = False

    def queue(self, *responses: FakeHttpResponse) -> None:
        self.responses.extend(responses)

    async def run(self, request: Any, **kwargs: Any) -> Any:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"unexpected request: {request.method} {request.url}")
        return SimpleNamespace(http_response=self.responses.pop(0))

    async def __aenter__(self) -> "FakePipeline":
        return self

    async def __aexit__(self, *exc_details: Any) -> None:
        self.closed = True


class FakeCredential:
    """Async credential returning a fixed token and recording requested scopes."""

    def __init__(self, token: str = FAKE_TOKEN) -> None:
        self.token = token
        self.scopes: list[tuple[str, ...]] = []

    async def get_token(self, *scopes: str, **kwargs: Any) -> AccessToken:
        self.scopes.append(scopes)
        return AccessToken(self.token, int(time.time()) + 3600)


@pytest.fixture
def pipeline() -> FakePipeline:
    return FakePipeline()


@pytest.fixture
def credential() -> FakeCredential:
    return FakeCredential()


@pytest.fixture
def make_response() -> Any:
    """Factory for fake transport responses: ``make_response(status, body, headers)``."""
    return FakeHttpResponse
