"""Response models — what each route writes back to the caller."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from terrific.models.item import CanonicalModel, MemeRecord, NormalizedItem, VideoRecord
from terrific.models.pagination import AfterCursor, PageCursor, PageTokenCursor


class ErrorEnvelope(CanonicalModel):
    """Canonical failure body, always paired with an HTTP status code."""

    omit_when_absent: ClassVar[frozenset[str]] = frozenset({"details"})

    error: str = Field(description="Short failure description")
    details: str | None = Field(default=None, description="Upstream or diagnostic detail")


class ItemPage(BaseModel):
    """A page of normalized items plus its numeric cursor (adapter result)."""

    items: list[NormalizedItem] = Field(default_factory=list)
    cursor: PageCursor


class WarsResponse(BaseModel):
    """``GET /api/wars``"""

    model_config = ConfigDict(populate_by_name=True)

    articles: list[NormalizedItem] = Field(default_factory=list)
    has_more: bool = Field(alias="hasMore")


class ExplainersResponse(BaseModel):
    """``GET /api/explainers``"""

    page: int
    explainers: list[NormalizedItem] = Field(default_factory=list)


class MemesResponse(AfterCursor):
    """``GET /api/memes``"""

    memes: list[MemeRecord] = Field(default_factory=list)


class SportsResponse(BaseModel):
    """``GET /api/sports`` — an empty list may stand in for a suppressed failure."""

    sport: str
    page: int
    sports: list[NormalizedItem] = Field(default_factory=list)


class VideosResponse(PageTokenCursor):
    """``GET /api/youtube``"""

    videos: list[VideoRecord] = Field(default_factory=list)


class AdapterStatus(BaseModel):
    """Static status of one registered adapter."""

    provider: str = Field(description="Upstream provider label")
    configured: bool = Field(description="Whether the adapter has every credential it needs")


class HealthResponse(BaseModel):
    """Service health check response."""

    status: str = Field(description="Health status (e.g. 'healthy')")
    version: str = Field(description="Server version")
    service: str = Field(description="Service name ('terrific')")
    adapters: dict[str, AdapterStatus] = Field(description="Registered adapters by route name")
