"""Explainers endpoint — Guardian background pieces."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from terrific.adapters.base.exceptions import AdapterError
from terrific.adapters.guardian.search import ContentSearchAdapter
from terrific.api.deps import provide_adapter
from terrific.api.errors import error_response
from terrific.models.response import ErrorEnvelope, ExplainersResponse

router = APIRouter(tags=["explainers"])


@router.get(
    "/explainers",
    response_model=ExplainersResponse,
    summary="Explainers Feed",
    description=(
        "Guardian world/politics/international pieces on geopolitics and information warfare, "
        "6 per page, with body text. An upstream page without results yields an empty list."
    ),
    responses={
        400: {"model": ErrorEnvelope, "description": "`page` is not a positive integer"},
        500: {"model": ErrorEnvelope, "description": "Misconfiguration or upstream failure"},
    },
)
async def explainers(
    page: str | None = Query(default=None, description="1-based page number (default 1)"),
    adapter: ContentSearchAdapter = Depends(provide_adapter("explainers")),
) -> ExplainersResponse | JSONResponse:
    try:
        result = await adapter.fetch_page(page)
    except AdapterError as e:
        return error_response(e, adapter.failure_message)
    return ExplainersResponse(page=result.cursor.page, explainers=result.items)
