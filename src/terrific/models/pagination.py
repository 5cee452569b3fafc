"""Pagination cursors — the three continuation styles providers use."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PageCursor(BaseModel):
    """Numeric paging with a computed continuation flag."""

    model_config = ConfigDict(populate_by_name=True)

    page: int = Field(ge=1, description="Page that was served (1-based)")
    has_more: bool = Field(alias="hasMore", description="True while page < total pages")

    @classmethod
    def from_totals(cls, page: int, total_pages: int) -> PageCursor:
        """Build a cursor from the provider-reported page count."""
        return cls(page=page, has_more=page < total_pages)


class AfterCursor(BaseModel):
    """Opaque forward cursor, passed through from upstream verbatim."""

    after: str | None = Field(default=None, description="Value to send back as ?after=")


class PageTokenCursor(BaseModel):
    """Opaque page token, passed through from upstream verbatim."""

    model_config = ConfigDict(populate_by_name=True)

    next_page_token: str | None = Field(
        default=None,
        alias="nextPageToken",
        description="Value to send back as ?pageToken=",
    )
