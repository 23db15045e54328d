"""Shared fixtures: an in-process fake LoveNest server on httpx.MockTransport."""

import json
from typing import Any, Callable, Optional

import httpx
import pytest

from lovenest import AsyncLoveNest, MemoryTokenStore

BASE_URL = "http://lovenest.test/api"
API_PREFIX = "/api"

USER = {"_id": "u1", "email": "a@b.com", "displayName": "Alice", "isLinked": True}
PARTNER = {"_id": "u2", "email": "b@b.com", "displayName": "Bob"}


class FakeServer:
    """Routes (method, path) to canned responses and records every request."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def on(
        self,
        method: str,
        path: str,
        status: int = 200,
        body: Any = None,
        handler: Optional[Callable[[httpx.Request], httpx.Response]] = None,
    ) -> None:
        payload = {} if body is None else body
        self.routes[(method, API_PREFIX + path)] = handler or (lambda request: httpx.Response(status, json=payload))

    def offline(self, method: str, path: str) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)
        self.on(method, path, handler=refuse)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": f"No route for {request.method} {request.url.path}"})
        return route(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


class CountingTokenStore(MemoryTokenStore):
    def __init__(self, token: Optional[str] = None):
        super().__init__(token)
        self.clears = 0
        self.sets: list[str] = []

    def set(self, token: str) -> None:
        self.sets.append(token)
        super().set(token)

    def clear(self) -> None:
        self.clears += 1
        super().clear()


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def store() -> CountingTokenStore:
    return CountingTokenStore()


@pytest.fixture
def client(server: FakeServer, store: CountingTokenStore) -> AsyncLoveNest:
    return AsyncLoveNest(base_url=BASE_URL, token_store=store, transport=server.transport())
