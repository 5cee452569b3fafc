"""Tests for the shared adapter plumbing: page parsing, registry, client lifecycle."""

from __future__ import annotations

import httpx
import pytest

from terrific.adapters.base.adapter import parse_page
from terrific.adapters.base.exceptions import InvalidParameterError, NetworkError
from terrific.adapters.base.registry import AdapterNotFoundError, AdapterRegistry
from terrific.adapters.reddit.adapter import ListingAdapter
from terrific.adapters.youtube.adapter import VideoSearchAdapter


class TestParsePage:
    @pytest.mark.parametrize(("raw", "expected"), [(None, 1), ("", 1), (" ", 1), ("1", 1), (" 7 ", 7), (3, 3)])
    def test_valid(self, raw: str | int | None, expected: int) -> None:
        assert parse_page(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "0", "-1", "2.5", 0, -4])
    def test_invalid(self, raw: str | int) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            parse_page(raw)
        assert exc_info.value.status_code == 400


class TestAdapterRegistry:
    def test_register_and_get(self) -> None:
        registry = AdapterRegistry()
        adapter = ListingAdapter()
        registry.register(adapter)
        assert registry.get("memes") is adapter
        assert registry.active_adapters == ["memes"]

    def test_get_unknown(self) -> None:
        with pytest.raises(AdapterNotFoundError, match="nope"):
            AdapterRegistry().get("nope")

    def test_statuses(self) -> None:
        registry = AdapterRegistry()
        registry.register(ListingAdapter())
        registry.register(VideoSearchAdapter(api_key=None))
        statuses = registry.statuses()
        assert statuses["memes"].provider == "Reddit"
        assert statuses["memes"].configured is True
        assert statuses["youtube"].configured is False

    async def test_lifecycle(self) -> None:
        registry = AdapterRegistry()
        adapter = ListingAdapter()
        registry.register(adapter)
        await registry.initialize_all()
        assert adapter._client is not None
        await registry.shutdown_all()
        assert adapter._client is None
        assert registry.active_adapters == []


class TestClientLifecycle:
    async def test_call_before_initialize(self) -> None:
        with pytest.raises(NetworkError, match="not initialized"):
            await ListingAdapter().fetch_listing()

    async def test_initialize_is_idempotent(self) -> None:
        adapter = ListingAdapter()
        await adapter.initialize()
        client = adapter._client
        await adapter.initialize()
        assert adapter._client is client
        await adapter.shutdown()

    async def test_timeout_is_unbounded_by_default(self, upstream) -> None:
        stub = upstream(lambda request: httpx.Response(200, json={"data": {"children": []}}))
        async with ListingAdapter(transport=stub.transport) as adapter:
            await adapter.fetch_listing()
        assert stub.last.extensions["timeout"] == {"connect": None, "read": None, "write": None, "pool": None}

    async def test_configured_timeout(self, upstream) -> None:
        stub = upstream(lambda request: httpx.Response(200, json={"data": {"children": []}}))
        async with ListingAdapter(timeout=5.0, transport=stub.transport) as adapter:
            await adapter.fetch_listing()
        assert stub.last.extensions["timeout"]["read"] == 5.0
