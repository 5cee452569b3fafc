"""Wars endpoints — Guardian conflict feed and single-article lookup."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from terrific.adapters.base.exceptions import AdapterError
from terrific.adapters.guardian.detail import ContentDetailAdapter
from terrific.adapters.guardian.search import ContentSearchAdapter
from terrific.api.deps import provide_adapter
from terrific.api.errors import error_response
from terrific.models.item import NormalizedItem
from terrific.models.response import ErrorEnvelope, WarsResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["wars"])


@router.get(
    "/wars",
    response_model=WarsResponse,
    summary="Conflict Coverage Feed",
    description=(
        "Newest-first Guardian world-section articles matching a fixed conflict keyword set, "
        "10 per page. `hasMore` is true while `page` is below the provider's page count."
    ),
    responses={
        400: {"model": ErrorEnvelope, "description": "`page` is not a positive integer"},
        500: {"model": ErrorEnvelope, "description": "Misconfiguration or upstream failure"},
    },
)
async def wars(
    page: str | None = Query(default=None, description="1-based page number (default 1)"),
    adapter: ContentSearchAdapter = Depends(provide_adapter("wars")),
) -> WarsResponse | JSONResponse:
    try:
        result = await adapter.fetch_page(page)
    except AdapterError as e:
        return error_response(e, adapter.failure_message)
    return WarsResponse(articles=result.items, has_more=result.cursor.has_more)


@router.get(
    "/wars/article",
    response_model=NormalizedItem,
    summary="Full Article",
    description="One Guardian article by content path (e.g. `world/2024/jan/01/my-article`), with `body` and `url`.",
    responses={
        400: {"model": ErrorEnvelope, "description": "Missing `id`"},
        500: {"model": ErrorEnvelope, "description": "Misconfiguration or upstream failure"},
    },
)
async def wars_article(
    content_id: str | None = Query(default=None, alias="id", description="Guardian content path"),
    adapter: ContentDetailAdapter = Depends(provide_adapter("wars_article")),
) -> NormalizedItem | JSONResponse:
    """Upstream error statuses are passed through to the caller."""
    try:
        return await adapter.fetch_article(content_id)
    except AdapterError as e:
        return error_response(e, adapter.failure_message)
