"""YouTube endpoint — propaganda-analysis video search."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from terrific.adapters.base.exceptions import AdapterError
from terrific.adapters.youtube.adapter import VideoSearchAdapter
from terrific.api.deps import provide_adapter
from terrific.api.errors import error_response
from terrific.models.response import ErrorEnvelope, VideosResponse

router = APIRouter(tags=["youtube"])


@router.get(
    "/youtube",
    response_model=VideosResponse,
    summary="Video Search",
    description="Relevance-ordered video search, 10 per page. Send `nextPageToken` back as `pageToken` to continue.",
    responses={500: {"model": ErrorEnvelope, "description": "Misconfiguration or upstream failure"}},
)
async def youtube(
    q: str | None = Query(default=None, description="Free-text query"),
    page_token: str | None = Query(default=None, alias="pageToken", description="Opaque page token"),
    published_after: str | None = Query(
        default=None,
        alias="publishedAfter",
        description="RFC 3339 timestamp lower bound, e.g. 2024-01-01T00:00:00Z",
    ),
    adapter: VideoSearchAdapter = Depends(provide_adapter("youtube")),
) -> VideosResponse | JSONResponse:
    try:
        return await adapter.search_videos(q, page_token, published_after)
    except AdapterError as e:
        return error_response(e, adapter.failure_message)
