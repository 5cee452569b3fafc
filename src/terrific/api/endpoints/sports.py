"""Sports endpoint — NewsAPI headlines for a free-text sport.

With the default configuration this route always answers 200; failures
produce an empty ``sports`` list.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from terrific.adapters.base.exceptions import AdapterError
from terrific.adapters.newsapi.adapter import NewsWireAdapter
from terrific.api.deps import provide_adapter
from terrific.api.errors import error_response
from terrific.models.response import ErrorEnvelope, SportsResponse

router = APIRouter(tags=["sports"])


@router.get(
    "/sports",
    response_model=SportsResponse,
    summary="Sports Headlines",
    description=(
        "Newest English-language articles matching `sport`, 8 per page. "
        "Failures are answered with an empty list, so an empty list does not prove there is no news."
    ),
    responses={500: {"model": ErrorEnvelope, "description": "Only when degrade_on_error is disabled"}},
)
async def sports(
    sport: str | None = Query(default=None, description="Free-text topic (default 'soccer')"),
    page: str | None = Query(default=None, description="1-based page number (default 1)"),
    adapter: NewsWireAdapter = Depends(provide_adapter("sports")),
) -> SportsResponse | JSONResponse:
    try:
        return await adapter.fetch_sports(sport, page)
    except AdapterError as e:
        return error_response(e, adapter.failure_message)
