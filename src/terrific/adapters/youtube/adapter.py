"""YouTube adapter — relevance-ordered video search.

Optional filters (``pageToken``, ``publishedAfter``) are left out of the
upstream query entirely when the caller does not send them; YouTube treats
an empty ``pageToken`` as invalid.

API reference: https://developers.google.com/youtube/v3/docs/search/list
"""

from __future__ import annotations

import logging

import httpx

from terrific.adapters.base.adapter import ProviderAdapter
from terrific.adapters.base.exceptions import UpstreamHTTPError
from terrific.adapters.youtube.schema import SearchListResponse, to_record
from terrific.models.response import VideosResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.googleapis.com/youtube/v3"
DEFAULT_QUERY = "information warfare geopolitics propaganda media manipulation"

PAGE_SIZE = 10


class VideoSearchAdapter(ProviderAdapter):
    """Video search against ``search.list``.

    Args:
        api_key: YouTube Data API key.
        base_url: Data API base URL.
        default_query: Query used when the caller sends none.
        timeout: Request timeout in seconds.
        transport: Optional ``httpx`` transport.
    """

    provider = "YouTube"
    credential_name = "YOUTUBE_API_KEY"
    failure_message = "Failed to fetch YouTube videos"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        default_query: str = DEFAULT_QUERY,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, api_key=api_key, timeout=timeout, transport=transport)
        self._default_query = default_query

    @property
    def name(self) -> str:
        return "youtube"

    def build_params(
        self,
        query: str | None = None,
        page_token: str | None = None,
        published_after: str | None = None,
    ) -> dict[str, str | int]:
        """Query string for one search (credential included)."""
        params: dict[str, str | int] = {
            "part": "snippet",
            "q": query if query and query.strip() else self._default_query,
            "type": "video",
            "maxResults": PAGE_SIZE,
            "order": "relevance",
            "key": self._require_api_key(),
        }
        if page_token:
            params["pageToken"] = page_token
        if published_after:
            params["publishedAfter"] = published_after
        return params

    async def search_videos(
        self,
        query: str | None = None,
        page_token: str | None = None,
        published_after: str | None = None,
    ) -> VideosResponse:
        """Search videos.

        Args:
            query: Free-text query; absent or blank means the default query.
            page_token: Opaque token from a previous page.
            published_after: RFC 3339 lower bound on upload time.

        Returns:
            The mapped videos and YouTube's ``nextPageToken`` (or None). An
            empty or missing result list is an empty page, not an error.
        """
        params = self.build_params(query, page_token, published_after)
        logger.info(
            "YouTube search: q=%r, pageToken=%r, publishedAfter=%r",
            params["q"],
            page_token,
            published_after,
        )

        response = await self._get("/search", params=params)
        data = self._parse(SearchListResponse, self._json(response))
        if data.error is not None or not response.is_success:
            message = (data.error.message if data.error else None) or f"YouTube HTTP {response.status_code}"
            raise UpstreamHTTPError(message, response.status_code)

        if not data.items:
            return VideosResponse(videos=[], next_page_token=None)

        return VideosResponse(
            videos=[to_record(item) for item in data.items],
            next_page_token=data.next_page_token or None,
        )
