"""Memes endpoint — endless Reddit listing."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from terrific.adapters.base.exceptions import AdapterError
from terrific.adapters.reddit.adapter import ListingAdapter
from terrific.api.deps import provide_adapter
from terrific.api.errors import error_response
from terrific.models.response import ErrorEnvelope, MemesResponse

router = APIRouter(tags=["memes"])


@router.get(
    "/memes",
    response_model=MemesResponse,
    summary="Meme Listing",
    description="Hot posts from the combined subreddits, 10 per page. Send `after` back to continue.",
    responses={500: {"model": ErrorEnvelope, "description": "Upstream failure"}},
)
async def memes(
    after: str = Query(default="", description="Opaque cursor from the previous page"),
    adapter: ListingAdapter = Depends(provide_adapter("memes")),
) -> MemesResponse | JSONResponse:
    try:
        return await adapter.fetch_listing(after)
    except AdapterError as e:
        return error_response(e, adapter.failure_message)
