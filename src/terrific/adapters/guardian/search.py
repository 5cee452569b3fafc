"""Guardian topical search — paged keyword search against ``/search``.

One adapter class serves two routes through fixed search profiles:

* ``wars`` — conflict coverage in the world section; a response without a
  result container is a schema error.
* ``explainers`` — longer-form background pieces with body text and web
  links; a response without a result container is an empty page.

API reference: https://open-platform.theguardian.com/documentation/search
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from terrific.adapters.base.adapter import ProviderAdapter, parse_page
from terrific.adapters.base.exceptions import UpstreamHTTPError, UpstreamSchemaError
from terrific.adapters.guardian.schema import (
    SOURCE,
    GuardianContent,
    GuardianSearchEnvelope,
    describe_error,
    to_item,
)
from terrific.models.item import NormalizedItem
from terrific.models.pagination import PageCursor
from terrific.models.response import ItemPage

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://content.guardianapis.com"


@dataclass(frozen=True)
class SearchProfile:
    """Fixed query parameters for one topical feed."""

    name: str
    query: str
    section: str
    show_fields: str
    page_size: int
    failure_message: str
    require_results: bool = True
    include_body: bool = False
    include_url: bool = False


WARS_PROFILE = SearchProfile(
    name="wars",
    query="war OR conflict OR military OR geopolitics",
    section="world",
    show_fields="trailText,thumbnail",
    page_size=10,
    failure_message="Failed to load wars data",
)

EXPLAINERS_PROFILE = SearchProfile(
    name="explainers",
    query="geopolitics OR propaganda OR war OR information warfare",
    section="world|politics|international",
    show_fields="headline,trailText,bodyText,thumbnail",
    page_size=6,
    failure_message="Failed to load explainers data",
    require_results=False,
    include_body=True,
    include_url=True,
)


class ContentSearchAdapter(ProviderAdapter):
    """Paged, newest-first Guardian search restricted by a ``SearchProfile``.

    Args:
        profile: Query, section, fields and page size for this feed.
        api_key: Guardian Content API key.
        base_url: Content API base URL.
        timeout: Request timeout in seconds.
        transport: Optional ``httpx`` transport.
    """

    provider = SOURCE
    credential_name = "GUARDIAN_API_KEY"

    def __init__(
        self,
        profile: SearchProfile,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, api_key=api_key, timeout=timeout, transport=transport)
        self._profile = profile
        self.failure_message = profile.failure_message

    @property
    def name(self) -> str:
        return self._profile.name

    @property
    def profile(self) -> SearchProfile:
        return self._profile

    def build_params(self, page: int) -> dict[str, str | int]:
        """Query string for one page (credential included)."""
        return {
            "section": self._profile.section,
            "q": self._profile.query,
            "show-fields": self._profile.show_fields,
            "order-by": "newest",
            "page-size": self._profile.page_size,
            "page": page,
            "api-key": self._require_api_key(),
        }

    async def fetch_page(self, page: str | int | None = None) -> ItemPage:
        """Fetch one page of results.

        Args:
            page: Raw ``page`` query value; absent means 1.

        Returns:
            The mapped items and a cursor with ``hasMore = page < pages``.

        Raises:
            InvalidParameterError: ``page`` is not a positive integer.
            ConfigurationError: No Guardian key is configured.
            UpstreamHTTPError: Guardian answered with an error status.
            UpstreamSchemaError: The result container is missing (strict profiles).
            NetworkError: The call itself failed.
        """
        page_number = parse_page(page)
        params = self.build_params(page_number)

        response = await self._get("/search", params=params)
        if not response.is_success:
            raise UpstreamHTTPError(describe_error(response), response.status_code)

        envelope = self._parse(GuardianSearchEnvelope, self._json(response))
        body = envelope.response
        if body is None or body.results is None:
            if self._profile.require_results:
                raise UpstreamSchemaError("Invalid Guardian response")
            logger.info("Guardian %s search returned no result container (page=%d)", self.name, page_number)
            return ItemPage(items=[], cursor=PageCursor(page=page_number, has_more=False))

        total_pages = body.pages or 0
        logger.debug(
            "Guardian %s search: page=%d, results=%d, pages=%d",
            self.name,
            page_number,
            len(body.results),
            total_pages,
        )
        return ItemPage(
            items=[self.map_result(result) for result in body.results],
            cursor=PageCursor.from_totals(page_number, total_pages),
        )

    def map_result(self, result: GuardianContent) -> NormalizedItem:
        """Map one search hit according to the profile."""
        body = None
        if self._profile.include_body:
            fields = result.show_fields
            body = (fields.body_text if fields else None) or ""
        return to_item(result, body=body, with_url=self._profile.include_url)

