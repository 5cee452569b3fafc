"""Tests for the Reddit listing adapter."""

from __future__ import annotations

import httpx
import pytest

from terrific.adapters.base.exceptions import NetworkError, UpstreamHTTPError, UpstreamSchemaError
from terrific.adapters.reddit.adapter import DEFAULT_USER_AGENT, ListingAdapter


@pytest.fixture
def listing_payload() -> dict:
    return {
        "kind": "Listing",
        "data": {
            "after": "t3_abc123",
            "dist": 2,
            "children": [
                {
                    "kind": "t3",
                    "data": {
                        "title": "Map of the front",
                        "url": "https://i.redd.it/front.png",
                        "subreddit_name_prefixed": "r/NonCredibleDefense",
                        "permalink": "/r/NonCredibleDefense/comments/abc/map_of_the_front/",
                        "score": 1200,
                    },
                },
                {"kind": "t3", "data": {"title": "Text only", "permalink": "/r/PoliticalHumor/comments/def/x/"}},
            ],
        },
    }


class TestListingAdapter:
    def test_properties(self) -> None:
        adapter = ListingAdapter()
        assert adapter.name == "memes"
        assert adapter.configured is True
        assert adapter.failure_message == "Failed to fetch memes"

    async def test_request(self, upstream, listing_payload: dict) -> None:
        stub = upstream(lambda request: httpx.Response(200, json=listing_payload))
        async with ListingAdapter(transport=stub.transport) as adapter:
            await adapter.fetch_listing("t3_prev")

        request = stub.last
        assert request.url.host == "old.reddit.com"
        assert request.url.path == "/r/PoliticalHumor+NonCredibleDefense/hot.json"
        assert request.url.params["limit"] == "10"
        assert request.url.params["after"] == "t3_prev"
        assert request.headers["User-Agent"] == DEFAULT_USER_AGENT

    async def test_first_page_sends_empty_after(self, upstream, listing_payload: dict) -> None:
        stub = upstream(lambda request: httpx.Response(200, json=listing_payload))
        async with ListingAdapter(transport=stub.transport) as adapter:
            await adapter.fetch_listing(None)
        assert stub.last.url.params["after"] == ""

    async def test_mapping(self, upstream, listing_payload: dict) -> None:
        stub = upstream(lambda request: httpx.Response(200, json=listing_payload))
        async with ListingAdapter(transport=stub.transport) as adapter:
            result = await adapter.fetch_listing()

        assert result.after == "t3_abc123"
        first, second = result.memes
        assert first.title == "Map of the front"
        assert first.image == "https://i.redd.it/front.png"
        assert first.subreddit == "r/NonCredibleDefense"
        assert first.permalink == "https://reddit.com/r/NonCredibleDefense/comments/abc/map_of_the_front/"
        assert second.image is None
        assert second.subreddit is None

    async def test_end_of_listing(self, upstream) -> None:
        payload = {"kind": "Listing", "data": {"after": None, "children": []}}
        stub = upstream(lambda request: httpx.Response(200, json=payload))
        async with ListingAdapter(transport=stub.transport) as adapter:
            result = await adapter.fetch_listing("t3_last")
        assert result.after is None
        assert result.memes == []

    @pytest.mark.parametrize(
        ("permalink", "expected"),
        [
            ("/r/x/comments/1/", "https://reddit.com/r/x/comments/1/"),
            ("r/x/comments/1/", "https://reddit.com/r/x/comments/1/"),
            ("https://reddit.com/r/x/comments/1/", "https://reddit.com/r/x/comments/1/"),
        ],
    )
    def test_absolute_permalink(self, permalink: str, expected: str) -> None:
        assert ListingAdapter(web_origin="https://reddit.com/").absolute_permalink(permalink) == expected

    async def test_http_error(self, upstream) -> None:
        stub = upstream(lambda request: httpx.Response(429, text="Too Many Requests"))
        async with ListingAdapter(transport=stub.transport) as adapter:
            with pytest.raises(UpstreamHTTPError, match="Reddit HTTP 429") as exc_info:
                await adapter.fetch_listing()
        assert exc_info.value.status_code == 500

    async def test_missing_data_is_schema_error(self, upstream) -> None:
        stub = upstream(lambda request: httpx.Response(200, json={"kind": "Listing"}))
        async with ListingAdapter(transport=stub.transport) as adapter:
            with pytest.raises(UpstreamSchemaError):
                await adapter.fetch_listing()

    async def test_timeout(self, upstream) -> None:
        def _timeout(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        stub = upstream(_timeout)
        async with ListingAdapter(transport=stub.transport) as adapter:
            with pytest.raises(NetworkError, match="ReadTimeout"):
                await adapter.fetch_listing()

    async def test_null_fields_take_defaults(self, upstream) -> None:
        payload = {
            "data": {
                "after": None,
                "children": [
                    {"data": {"title": None, "url": None, "subreddit_name_prefixed": None, "permalink": "/r/x/1/"}},
                    {"kind": "t3", "data": None},
                ],
            }
        }
        stub = upstream(lambda request: httpx.Response(200, json=payload))
        async with ListingAdapter(transport=stub.transport) as adapter:
            result = await adapter.fetch_listing()

        first, second = result.memes
        assert first.title == ""
        assert first.image is None
        assert first.permalink == "https://reddit.com/r/x/1/"
        assert second.title == ""
        assert second.permalink == "https://reddit.com/"

    async def test_null_children(self, upstream) -> None:
        stub = upstream(lambda request: httpx.Response(200, json={"data": {"after": None, "children": None}}))
        async with ListingAdapter(transport=stub.transport) as adapter:
            result = await adapter.fetch_listing()
        assert result.memes == []
