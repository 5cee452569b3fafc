"""Shared test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from terrific.config.settings import CredentialSettings, Settings

Handler = Callable[[httpx.Request], httpx.Response]


class StubUpstream:
    """Stub provider: records every request and answers through *handler*."""

    def __init__(self, handler: Handler) -> None:
        self._handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no upstream request was made"
        return self.requests[-1]


@pytest.fixture
def upstream() -> Callable[[Handler], StubUpstream]:
    """Factory for stub upstreams: ``stub = upstream(lambda request: httpx.Response(...))``."""
    return StubUpstream


@pytest.fixture
def credentials() -> CredentialSettings:
    """Every provider configured, independent of the real environment."""
    return CredentialSettings(
        _env_file=None,  # type: ignore[call-arg]
        guardian_api_key="guardian-test-key",
        youtube_api_key="youtube-test-key",
        newsapi_key="newsapi-test-key",
        news_api_key="",
    )


@pytest.fixture
def settings(credentials: CredentialSettings) -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        debug=True,
        credentials=credentials,
        observability={"log_level": "debug", "log_format": "console"},
    )


@pytest.fixture
def guardian_result() -> dict:
    """One Guardian content object as returned by /search and /{id}."""
    return {
        "id": "world/2024/jan/01/my-article",
        "type": "article",
        "sectionId": "world",
        "webTitle": "Ceasefire talks resume",
        "webPublicationDate": "2024-01-01T09:30:00Z",
        "webUrl": "https://www.theguardian.com/world/2024/jan/01/my-article",
        "apiUrl": "https://content.guardianapis.com/world/2024/jan/01/my-article",
        "fields": {
            "trailText": "Negotiators return to the table.",
            "thumbnail": "https://media.guim.co.uk/thumb.jpg",
        },
    }


@pytest.fixture
def guardian_search_payload(guardian_result: dict) -> dict:
    """A /search response on page 2 of 2."""
    second = {
        "id": "world/2024/jan/02/second",
        "webTitle": "Second story",
        "webPublicationDate": "2024-01-02T10:00:00Z",
        "webUrl": "https://www.theguardian.com/world/2024/jan/02/second",
    }
    return {
        "response": {
            "status": "ok",
            "userTier": "developer",
            "total": 20,
            "startIndex": 11,
            "pageSize": 10,
            "currentPage": 2,
            "pages": 2,
            "orderBy": "newest",
            "results": [guardian_result, second],
        }
    }
