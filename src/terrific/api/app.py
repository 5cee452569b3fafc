"""FastAPI application factory and lifecycle management."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from terrific import __version__
from terrific.adapters.base.exceptions import AdapterError
from terrific.adapters.base.registry import AdapterRegistry
from terrific.adapters.guardian.detail import ContentDetailAdapter
from terrific.adapters.guardian.search import EXPLAINERS_PROFILE, WARS_PROFILE, ContentSearchAdapter
from terrific.adapters.newsapi.adapter import NewsWireAdapter
from terrific.adapters.reddit.adapter import ListingAdapter
from terrific.adapters.youtube.adapter import VideoSearchAdapter
from terrific.api.endpoints.health import router as health_router
from terrific.api.errors import adapter_error_handler
from terrific.api.router import router as api_router
from terrific.config.settings import Settings, load_settings
from terrific.observability.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, loads them once via ``load_settings``.
        transport: Optional ``httpx`` transport shared by every adapter
            (tests pass a stub upstream here).

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = load_settings()

    setup_logging(settings.observability)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Manage application lifecycle (startup/shutdown)."""
        logger.info("Starting Terrific v%s", __version__)

        registry = build_registry(settings, transport=transport)
        await registry.initialize_all()

        app.state.settings = settings
        app.state.registry = registry

        logger.info("Terrific is ready to serve requests on port %d", settings.server.port)
        yield

        logger.info("Shutting down Terrific...")
        await registry.shutdown_all()
        app.state.registry = None
        logger.info("Terrific shutdown complete")

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Aggregation edge-service: one HTTP surface over the Guardian, Reddit, "
            "NewsAPI and YouTube, with normalized items and pagination."
        ),
        version=__version__,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AdapterError, adapter_error_handler)

    app.include_router(health_router)
    app.include_router(api_router, prefix="/api")

    return app


def build_registry(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AdapterRegistry:
    """Construct every adapter with its resolved credential and configuration.

    Credentials are resolved here, once; adapters never read the environment.
    """
    credentials = settings.credentials
    timeout = settings.upstream.timeout
    guardian_key = credentials.resolve("GUARDIAN_API_KEY")

    registry = AdapterRegistry()
    for profile in (WARS_PROFILE, EXPLAINERS_PROFILE):
        registry.register(
            ContentSearchAdapter(
                profile,
                api_key=guardian_key,
                base_url=settings.guardian.base_url,
                timeout=timeout,
                transport=transport,
            )
        )
    registry.register(
        ContentDetailAdapter(
            api_key=guardian_key,
            base_url=settings.guardian.base_url,
            timeout=timeout,
            transport=transport,
        )
    )
    registry.register(
        ListingAdapter(
            subreddits=settings.reddit.subreddits,
            base_url=settings.reddit.base_url,
            web_origin=settings.reddit.web_origin,
            user_agent=settings.reddit.user_agent,
            timeout=timeout,
            transport=transport,
        )
    )
    registry.register(
        NewsWireAdapter(
            api_key=credentials.resolve(*settings.newswire.key_chain),
            base_url=settings.newswire.base_url,
            language=settings.newswire.language,
            degrade_on_error=settings.newswire.degrade_on_error,
            credential_names=tuple(settings.newswire.key_chain),
            timeout=timeout,
            transport=transport,
        )
    )
    registry.register(
        VideoSearchAdapter(
            api_key=credentials.resolve("YOUTUBE_API_KEY"),
            base_url=settings.youtube.base_url,
            default_query=settings.youtube.default_query,
            timeout=timeout,
            transport=transport,
        )
    )
    return registry
