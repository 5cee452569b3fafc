"""Health check endpoints — liveness text and adapter status."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from terrific import __version__
from terrific.adapters.base.registry import AdapterRegistry
from terrific.api.deps import get_registry
from terrific.models.response import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse, summary="Liveness")
async def root() -> str:
    return "The Terrific proxy server is running."


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service Health Check",
    description=(
        "Returns server version and every registered adapter with its provider "
        "and whether its credential is configured. No upstream calls are made."
    ),
)
async def health_check(registry: AdapterRegistry = Depends(get_registry)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        service="terrific",
        adapters=registry.statuses(),
    )
