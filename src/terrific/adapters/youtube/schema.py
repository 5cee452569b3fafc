"""Raw YouTube Data API v3 ``search.list`` shapes and their mapping to ``VideoRecord``."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from terrific.models.item import VideoRecord


class _Raw(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Thumbnail(_Raw):
    url: str | None = None
    width: int | None = None
    height: int | None = None


class Thumbnails(_Raw):
    default: Thumbnail | None = None
    medium: Thumbnail | None = None
    high: Thumbnail | None = None

    def preferred_url(self) -> str | None:
        """Medium-resolution URL, else default-resolution, else None."""
        for thumbnail in (self.medium, self.default):
            if thumbnail is not None and thumbnail.url:
                return thumbnail.url
        return None


class Snippet(_Raw):
    title: str | None = None
    description: str | None = None
    channel_title: str | None = Field(default=None, alias="channelTitle")
    published_at: str | None = Field(default=None, alias="publishedAt")
    thumbnails: Thumbnails | None = None


class ResourceId(_Raw):
    kind: str | None = None
    video_id: str | None = Field(default=None, alias="videoId")


class SearchResult(_Raw):
    id: ResourceId | None = None
    snippet: Snippet | None = None


class ApiError(_Raw):
    code: int | None = None
    message: str | None = None


class SearchListResponse(_Raw):
    items: list[SearchResult] | None = None
    next_page_token: str | None = Field(default=None, alias="nextPageToken")
    error: ApiError | None = None


def to_record(result: SearchResult) -> VideoRecord:
    """Map one hit; every snippet field may be missing or ``null``."""
    snippet = result.snippet or Snippet()
    resource = result.id or ResourceId()
    return VideoRecord(
        video_id=resource.video_id or "",
        title=snippet.title or "",
        description=snippet.description or "",
        channel=snippet.channel_title,
        published_at=snippet.published_at,
        thumbnail=snippet.thumbnails.preferred_url() if snippet.thumbnails else None,
    )
