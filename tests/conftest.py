from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from kochbuch.main import app

Handler = Callable[[httpx.Request], httpx.Response]


class FakeWeb:
    """Serves canned responses for outbound requests made through httpx."""

    def __init__(self) -> None:
        self.routes: dict[str, Exception | Handler] = {}
        self.requests: list[httpx.Request] = []

    def add_page(self, url: str, html: str, status_code: int = 200) -> None:
        self.routes[url] = lambda _request: httpx.Response(status_code, html=html)

    def add_image(
        self,
        url: str,
        size: int = 2048,
        content_type: str | None = "image/jpeg",
        status_code: int = 200,
    ) -> None:
        headers = {"content-type": content_type} if content_type else {}
        self.routes[url] = lambda _request: httpx.Response(
            status_code, content=b"\xff" * size, headers=headers
        )

    def add_error(self, url: str, exc: Exception) -> None:
        self.routes[url] = exc

    def requested_urls(self) -> list[str]:
        return [str(request.url) for request in self.requests]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(str(request.url))
        if route is None:
            return httpx.Response(404, text="not found")
        if isinstance(route, Exception):
            raise route
        return route(request)


@pytest.fixture
def fake_web(monkeypatch: pytest.MonkeyPatch) -> FakeWeb:
    """Route every ``httpx.AsyncClient`` created by the code under test."""
    web = FakeWeb()
    real_client = httpx.AsyncClient

    def client_factory(**kwargs: Any) -> httpx.AsyncClient:
        return real_client(transport=httpx.MockTransport(web.handle), **kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", client_factory)
    return web


@pytest.fixture
async def test_client() -> AsyncClient:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
