"""Guardian single-item lookup — full article by content path.

Content ids are hierarchical paths such as ``world/2024/jan/01/my-article``.
Each segment is escaped on its own so the separators Guardian routes on
survive while anything inside a segment (including an already-escaped
``%2F``) cannot introduce a new one.

Guardian normally answers JSON, but gateways in front of it can return HTML
or plain text; the response content type decides how the body is read.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from terrific.adapters.base.adapter import ProviderAdapter
from terrific.adapters.base.exceptions import (
    MissingParameterError,
    UpstreamHTTPError,
    UpstreamSchemaError,
)
from terrific.adapters.guardian.schema import (
    SOURCE,
    GuardianFields,
    GuardianItemEnvelope,
    describe_error,
    to_item,
)
from terrific.models.item import NormalizedItem

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://content.guardianapis.com"

SHOW_FIELDS = "trailText,thumbnail,body,bodyText"

#: Raw text error bodies are cut to this many characters in ``details``.
MAX_ERROR_TEXT = 500

# Characters a URI component may carry unescaped besides alphanumerics and "_.-~".
_SEGMENT_SAFE = "!*'()"


def encode_content_path(content_id: str) -> str:
    """Percent-encode every ``/``-separated segment independently and rejoin them.

    Empty segments (leading, trailing or doubled slashes) are dropped.
    """
    return "/".join(quote(segment, safe=_SEGMENT_SAFE) for segment in content_id.split("/") if segment)


class ContentDetailAdapter(ProviderAdapter):
    """Fetch one Guardian article with its body.

    Args:
        api_key: Guardian Content API key.
        base_url: Content API base URL.
        timeout: Request timeout in seconds.
        transport: Optional ``httpx`` transport.
    """

    provider = SOURCE
    credential_name = "GUARDIAN_API_KEY"
    failure_message = "Failed to load wars article"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, api_key=api_key, timeout=timeout, transport=transport)

    @property
    def name(self) -> str:
        return "wars_article"

    async def fetch_article(self, content_id: str | None) -> NormalizedItem:
        """Fetch and normalize a single article.

        Args:
            content_id: Guardian content path; surrounding whitespace is ignored.

        Returns:
            The article, including ``body`` and ``url``.

        Raises:
            MissingParameterError: ``content_id`` is empty.
            ConfigurationError: No Guardian key is configured.
            UpstreamHTTPError: Guardian answered with an error status; the
                caller is answered with that same status.
            UpstreamSchemaError: A success response without a content object.
            NetworkError: The call itself failed.
        """
        content_id = (content_id or "").strip().strip("/")
        if not content_id:
            raise MissingParameterError("Missing required query param: id")
        api_key = self._require_api_key()

        response = await self._get(
            f"/{encode_content_path(content_id)}",
            params={"show-fields": SHOW_FIELDS, "api-key": api_key},
        )
        is_json = "application/json" in response.headers.get("content-type", "")

        if not response.is_success:
            if is_json:
                message = describe_error(response)
            else:
                message = response.text[:MAX_ERROR_TEXT]
            raise UpstreamHTTPError(message, response.status_code, propagate=True)

        if not is_json:
            logger.warning(
                "Guardian returned %s for article %s",
                response.headers.get("content-type", "no content type"),
                content_id,
            )
            raise UpstreamSchemaError("Invalid Guardian article response")

        envelope = self._parse(GuardianItemEnvelope, self._json(response))
        content = envelope.response.content if envelope.response else None
        if content is None:
            raise UpstreamSchemaError("Invalid Guardian article response")

        fields = content.show_fields or GuardianFields()
        return to_item(content, body=fields.rich_body(), with_url=True)
