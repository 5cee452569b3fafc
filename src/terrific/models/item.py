"""Canonical item records returned to callers.

``NormalizedItem`` is what every news-like adapter converges to. Listing and
video adapters keep their own record shapes because their fields carry
different meanings (a meme has no summary, a video has a channel).

Absence rules are declared once per model: a field listed in
``omit_when_absent`` disappears from the JSON when it is ``None``; every
other field is always emitted, ``None`` included.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer


class CanonicalModel(BaseModel):
    """Base for output records with per-field omission rules."""

    model_config = ConfigDict(populate_by_name=True)

    omit_when_absent: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _drop_absent(self, handler: SerializerFunctionWrapHandler):
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None or key not in self.omit_when_absent}


class NormalizedItem(CanonicalModel):
    """Canonical content record.

    ``id`` semantics vary per provider (Guardian content path, NewsAPI
    article URL) but it is always a string.
    """

    omit_when_absent: ClassVar[frozenset[str]] = frozenset({"body", "date", "published", "url"})

    id: str = Field(description="Provider-assigned identifier")
    title: str = Field(default="", description="Headline")
    summary: str = Field(default="", description="Short standfirst or description")
    body: str | None = Field(default=None, description="Full text, only for adapters that fetch it")
    image: str | None = Field(default=None, description="Thumbnail or media URL")
    date: str | None = Field(default=None, description="Guardian publication timestamp, unparsed")
    published: str | None = Field(default=None, description="News-wire publication timestamp, unparsed")
    source: str = Field(description="Human-readable provider label")
    url: str | None = Field(default=None, description="Canonical web link")


class MemeRecord(CanonicalModel):
    """One entry of the combined meme listing."""

    title: str = Field(default="", description="Post title")
    image: str | None = Field(default=None, description="Direct media URL")
    subreddit: str | None = Field(default=None, description="Feed-section label, e.g. 'r/PoliticalHumor'")
    permalink: str = Field(description="Fully-qualified link to the post")


class VideoRecord(CanonicalModel):
    """One video search hit."""

    omit_when_absent: ClassVar[frozenset[str]] = frozenset({"thumbnail"})

    video_id: str = Field(default="", alias="videoId", description="Provider video id")
    title: str = Field(default="")
    description: str = Field(default="")
    channel: str | None = Field(default=None, description="Channel display name")
    published_at: str | None = Field(default=None, alias="publishedAt", description="Upload timestamp, unparsed")
    thumbnail: str | None = Field(default=None, description="Medium, else default-resolution thumbnail URL")
