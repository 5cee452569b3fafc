"""NewsAPI adapter — free-text sports headlines from the general news wire.

Unlike the Guardian feeds the topic is sent verbatim as the search query,
with no keyword restriction. The credential is looked up through an ordered
chain of names once at startup (see ``NewsWireSettings.key_chain``).

Failure policy: with ``degrade_on_error`` (the default) any failure,
missing credential included, is logged and answered with an empty page
instead of an error. Callers cannot tell a suppressed failure from a real
empty result.

API reference: https://newsapi.org/docs/endpoints/everything
"""

from __future__ import annotations

import logging

import httpx

from terrific.adapters.base.adapter import ProviderAdapter, parse_page
from terrific.adapters.base.exceptions import UpstreamHTTPError, UpstreamSchemaError
from terrific.adapters.newsapi.schema import NewsApiResponse, to_item
from terrific.models.response import SportsResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://newsapi.org/v2"
DEFAULT_SPORT = "soccer"

PAGE_SIZE = 8


class NewsWireAdapter(ProviderAdapter):
    """Sports coverage search against NewsAPI ``/everything``.

    Args:
        api_key: Resolved NewsAPI key (first configured name of the chain).
        base_url: NewsAPI base URL.
        language: Article language filter.
        degrade_on_error: Return an empty page instead of raising.
        credential_names: Names that were tried, for the missing-key message.
        timeout: Request timeout in seconds.
        transport: Optional ``httpx`` transport.
    """

    provider = "NewsAPI"
    failure_message = "Failed to load sports data"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        language: str = "en",
        degrade_on_error: bool = True,
        credential_names: tuple[str, ...] = ("NEWSAPI_KEY", "NEWS_API_KEY"),
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, api_key=api_key, timeout=timeout, transport=transport)
        self._language = language
        self._degrade_on_error = degrade_on_error
        self.credential_name = " or ".join(credential_names)

    @property
    def name(self) -> str:
        return "sports"

    async def fetch_sports(self, sport: str | None = None, page: str | int | None = None) -> SportsResponse:
        """Fetch one page of articles about *sport*.

        Args:
            sport: Free-text topic; absent or blank means ``"soccer"``.
            page: Raw ``page`` query value; absent means 1.

        Returns:
            The page of articles; an empty page on any failure when degrading.

        Raises:
            AdapterError: Only when ``degrade_on_error`` is off.
        """
        if not sport or not sport.strip():
            sport = DEFAULT_SPORT
        page_number = 1
        try:
            page_number = parse_page(page)
            return await self._search(sport, page_number)
        except Exception as e:
            if not self._degrade_on_error:
                raise
            logger.error("Sports NewsAPI error (answering with an empty page): %s", e, exc_info=True)
            return SportsResponse(sport=sport, page=page_number, sports=[])

    async def _search(self, sport: str, page: int) -> SportsResponse:
        params = {
            "q": sport,
            "language": self._language,
            "sortBy": "publishedAt",
            "pageSize": PAGE_SIZE,
            "page": page,
            "apiKey": self._require_api_key(),
        }
        logger.info("Sports NewsAPI request: q=%r, page=%d, pageSize=%d", sport, page, PAGE_SIZE)

        response = await self._get("/everything", params=params)
        data = self._parse(NewsApiResponse, self._json(response))
        logger.debug(
            "NewsAPI response: status=%s, http=%d, total=%s",
            data.status,
            response.status_code,
            data.total_results,
        )

        if data.status == "error" or not response.is_success:
            raise UpstreamHTTPError(data.message or "NewsAPI error", response.status_code)
        if data.articles is None:
            raise UpstreamSchemaError("NewsAPI response has no articles list")

        return SportsResponse(sport=sport, page=page, sports=[to_item(article) for article in data.articles])
