"""Raw Reddit listing shapes (``/r/<subs>/hot.json``).

Post fields may be missing or ``null``; the adapter applies the defaults.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class _Raw(BaseModel):
    model_config = ConfigDict(extra="ignore")


class RedditPost(_Raw):
    title: str | None = None
    url: str | None = None
    subreddit_name_prefixed: str | None = None
    permalink: str | None = None


class RedditChild(_Raw):
    kind: str | None = None
    data: RedditPost | None = None


class RedditListingData(_Raw):
    after: str | None = None
    children: list[RedditChild] | None = None


class RedditListing(_Raw):
    """Top-level listing; ``data`` is required, its absence means the call failed."""

    kind: str | None = None
    data: RedditListingData
