"""Fixtures for API tests: an app whose adapters all talk to one stub upstream."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from terrific.api.app import create_app
from terrific.config.settings import Settings


@pytest.fixture
def make_client(settings: Settings, upstream) -> Iterator[Callable[..., TestClient]]:
    """Build a started ``TestClient``; ``make_client(handler)`` returns ``(client, stub)``."""
    clients: list[TestClient] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], app_settings: Settings | None = None):
        stub = upstream(handler)
        client = TestClient(create_app(app_settings or settings, transport=stub.transport))
        client.__enter__()
        clients.append(client)
        return client, stub

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
