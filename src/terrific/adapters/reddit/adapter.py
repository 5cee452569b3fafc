"""Reddit listing adapter — endless meme feed over combined subreddits.

Reads ``/r/<a>+<b>/hot.json`` from the old-reddit JSON API. Reddit rejects
generic HTTP library user agents, so every request carries an explicit
browser-like ``User-Agent``. Pagination is Reddit's own opaque ``after``
fullname, passed through untouched in both directions.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx

from terrific.adapters.base.adapter import ProviderAdapter
from terrific.adapters.base.exceptions import UpstreamHTTPError
from terrific.adapters.reddit.schema import RedditListing, RedditPost
from terrific.models.item import MemeRecord
from terrific.models.response import MemesResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://old.reddit.com"
DEFAULT_WEB_ORIGIN = "https://reddit.com"
DEFAULT_SUBREDDITS = ("PoliticalHumor", "NonCredibleDefense")
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) TheTerrific/1.0"

PAGE_SIZE = 10


class ListingAdapter(ProviderAdapter):
    """Combined hot listing of a fixed set of subreddits.

    Args:
        subreddits: Subreddit names joined with ``+`` into one listing.
        base_url: Listing API origin.
        web_origin: Origin prefixed to each relative permalink.
        user_agent: Client identity sent on every request.
        timeout: Request timeout in seconds.
        transport: Optional ``httpx`` transport.
    """

    provider = "Reddit"
    failure_message = "Failed to fetch memes"

    def __init__(
        self,
        subreddits: Sequence[str] = DEFAULT_SUBREDDITS,
        base_url: str = DEFAULT_BASE_URL,
        web_origin: str = DEFAULT_WEB_ORIGIN,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            base_url,
            timeout=timeout,
            headers={"User-Agent": user_agent},
            transport=transport,
        )
        self._listing_path = f"/r/{'+'.join(subreddits)}/hot.json"
        self._web_origin = web_origin.rstrip("/")

    @property
    def name(self) -> str:
        return "memes"

    async def fetch_listing(self, after: str | None = None) -> MemesResponse:
        """Fetch one page of the listing.

        Args:
            after: Cursor from the previous page; empty for the first page.

        Returns:
            The mapped posts and Reddit's own ``after`` for the next page.
        """
        response = await self._get(self._listing_path, params={"limit": PAGE_SIZE, "after": after or ""})
        if not response.is_success:
            raise UpstreamHTTPError(f"Reddit HTTP {response.status_code}", response.status_code)

        listing = self._parse(RedditListing, self._json(response))
        children = listing.data.children or []
        logger.debug("Reddit listing: after=%r, children=%d", after, len(children))
        return MemesResponse(
            after=listing.data.after,
            memes=[self.map_post(child.data or RedditPost()) for child in children],
        )

    def map_post(self, post: RedditPost) -> MemeRecord:
        return MemeRecord(
            title=post.title or "",
            image=post.url or None,
            subreddit=post.subreddit_name_prefixed or None,
            permalink=self.absolute_permalink(post.permalink or ""),
        )

    def absolute_permalink(self, permalink: str) -> str:
        """Prefix the web origin to a relative permalink, exactly once."""
        if permalink.startswith(("http://", "https://")):
            return permalink
        if not permalink.startswith("/"):
            permalink = f"/{permalink}"
        return f"{self._web_origin}{permalink}"
