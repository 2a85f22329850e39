"""Pytest fixtures for paginator, cache and API tests."""

from typing import Any, Dict, List, Optional

import httpx
import pytest

from cms_proxy.database.ttl_cache import TTLCache
from cms_proxy.integrations.clients.real_http.webflow_items import CollectionPaginator
from cms_proxy.integrations.collection_service import CollectionService
from cms_proxy.utils.config_loader import ProxyConfig


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeUpstream:
    """Serves queued responses in order and records every request."""

    def __init__(self, responses: Optional[List[Any]] = None) -> None:
        self.responses: List[Any] = list(responses or [])
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = len(self.requests) - 1
        if index >= len(self.responses):
            return httpx.Response(200, json={"items": []})
        response = self.responses[index]
        if isinstance(response, Exception):
            raise response
        if isinstance(response, httpx.Response):
            return response
        return httpx.Response(200, json=response)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def offsets(self) -> List[int]:
        return [int(r.url.params["offset"]) for r in self.requests]


def make_items(count: int, start: int = 0) -> List[Dict[str, Any]]:
    return [{"id": f"item-{i}", "fieldData": {"name": f"Item {i}"}} for i in range(start, start + count)]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def credentials_env():
    return {
        "WEBFLOW_API_TOKEN": "test-token",
        "MONUMENTS_COLLECTION_ID": "monuments-collection",
        "ECOSYSTEM_COLLECTION_ID": "ecosystem-collection",
    }


@pytest.fixture
def make_service(upstream, clock, credentials_env):
    def _make(environ: Optional[Dict[str, str]] = None, config: Optional[ProxyConfig] = None) -> CollectionService:
        return CollectionService(
            config or ProxyConfig(),
            cache=TTLCache(clock=clock),
            paginator_factory=lambda token: CollectionPaginator(token, transport=upstream.transport),
            environ=credentials_env if environ is None else environ,
        )

    return _make
