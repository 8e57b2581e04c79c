"""Shared fixtures for the Aurora SDK test suite."""

import json
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from aurora_sdk.client import AuroraClient
from aurora_sdk.config.settings import get_settings

BASE_URL = "https://api.example.com"
API_KEY = "aur_test_abc123"

CAPABILITIES = {
    "tenantSlug": "acme",
    "features": {"store": True, "site": True, "holmes": True},
}

SPEC = {
    "openapi": "3.0.3",
    "servers": [{"url": f"{BASE_URL}/v1"}],
    "paths": {"/search": {"get": {}}, "/me": {"get": {}}},
}


@dataclass
class RecordedCall:
    method: str
    url: str
    path: str
    headers: dict[str, str]
    body: Any = None


@dataclass
class FakeReply:
    status: int = 200
    json_body: Any = None
    text: str | None = None


@dataclass
class FakeAurora:
    """In-process stand-in for the Aurora API.

    Replies are queued per (method, path). The last queued reply for a route
    is sticky; unknown routes answer 404.
    """

    calls: list[RecordedCall] = field(default_factory=list)
    replies: dict[tuple[str, str], list[FakeReply]] = field(default_factory=dict)

    def __post_init__(self):
        self.app = FastAPI()
        self.app.add_api_route(
            "/{path:path}",
            self._handle,
            methods=["GET", "POST", "PATCH", "PUT", "DELETE"],
        )

    def reply(self, method: str, path: str, json_body: Any = None, status: int = 200, text: str | None = None):
        self.replies.setdefault((method, path), []).append(
            FakeReply(status=status, json_body=json_body, text=text)
        )
        return self

    def calls_to(self, path: str) -> list[RecordedCall]:
        return [c for c in self.calls if c.path == path]

    async def _handle(self, request: Request, path: str):
        raw = await request.body()
        self.calls.append(RecordedCall(
            method=request.method,
            url=str(request.url),
            path=request.url.path,
            headers=dict(request.headers),
            body=json.loads(raw) if raw else None,
        ))

        queue = self.replies.get((request.method, request.url.path))
        if not queue:
            return JSONResponse(status_code=404, content={"error": "Not found"})
        reply = queue.pop(0) if len(queue) > 1 else queue[0]

        if reply.status == 204:
            return Response(status_code=204)
        if reply.text is not None:
            return PlainTextResponse(reply.text, status_code=reply.status)
        return JSONResponse(status_code=reply.status, content=reply.json_body)


@pytest.fixture
def fake_api() -> FakeAurora:
    return FakeAurora()


@pytest.fixture
async def make_client(fake_api):
    """Factory fixture: AuroraClient wired to the fake API via ASGI transport.

    Usage:
        client = make_client(tenant_slug="acme")
    """
    http_clients = []

    def _make(**kwargs) -> AuroraClient:
        http_client = httpx.AsyncClient(transport=httpx.ASGITransport(app=fake_api.app))
        http_clients.append(http_client)
        return AuroraClient(BASE_URL, API_KEY, http_client=http_client, **kwargs)

    yield _make

    for http_client in http_clients:
        await http_client.aclose()


@pytest.fixture
def override_settings(monkeypatch):
    """Factory fixture: set env vars and clear settings cache.

    Usage:
        override_settings(AURORA_API_URL="https://api.example.com", LOG_LEVEL="DEBUG")
    """
    def _override(**kwargs):
        for key, value in kwargs.items():
            monkeypatch.setenv(key.upper(), str(value))
        # Clear lru_cache so Settings re-reads env
        get_settings.cache_clear()

    yield _override

    get_settings.cache_clear()


def make_response(status_code: int, json_body: Any = None, text: str | None = None) -> httpx.Response:
    """Build a real httpx.Response for transport-level tests."""
    request = httpx.Request("GET", f"{BASE_URL}/v1/test")
    if text is not None:
        return httpx.Response(status_code, text=text, request=request)
    if json_body is not None:
        return httpx.Response(status_code, json=json_body, request=request)
    return httpx.Response(status_code, request=request)
