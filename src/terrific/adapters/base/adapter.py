"""Base provider adapter — Shared plumbing for all upstream connectors.

Every provider adapter is responsible for:
  1. Building the provider-specific request from generic caller parameters
  2. Issuing exactly one upstream call
  3. Parsing the provider's response into its raw schema models
  4. Mapping raw results to the canonical models

This base class owns step 2 and the parsing helpers so that transport and
decoding failures are translated into the adapter exception taxonomy in one
place. Subclasses never let ``httpx`` or ``pydantic`` exceptions escape.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Self, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from terrific.adapters.base.exceptions import (
    ConfigurationError,
    InvalidParameterError,
    NetworkError,
    UpstreamSchemaError,
)
from terrific.models.response import AdapterStatus

logger = logging.getLogger(__name__)

_M = TypeVar("_M", bound=BaseModel)


def parse_page(raw: str | int | None) -> int:
    """Interpret a ``page`` query value.

    Absent or blank values mean page 1. Anything that is not a positive
    integer is rejected rather than silently coerced.

    Raises:
        InvalidParameterError: If *raw* is non-numeric or below 1.
    """
    if raw is None:
        return 1
    if isinstance(raw, int):
        page = raw
    else:
        text = raw.strip()
        if not text:
            return 1
        try:
            page = int(text)
        except ValueError:
            raise InvalidParameterError(f"Invalid query param: page must be a positive integer, got {raw!r}") from None
    if page < 1:
        raise InvalidParameterError(f"Invalid query param: page must be a positive integer, got {raw!r}")
    return page


class ProviderAdapter(ABC):
    """Abstract base class for upstream provider adapters.

    Adapters keep no per-request state. The only long-lived resource is the
    ``httpx.AsyncClient`` created in :meth:`initialize` and closed in
    :meth:`shutdown`.

    Args:
        base_url: Provider API base URL.
        api_key: Resolved credential, or None when the provider needs none
            or none is configured.
        timeout: Request timeout in seconds; None waits indefinitely.
        headers: Headers sent on every request.
        transport: Optional ``httpx`` transport (tests inject a mock).
    """

    #: Human-readable provider label.
    provider: str = ""
    #: Name of the credential reported when it is missing. Empty = no credential needed.
    credential_name: str = ""
    #: Envelope ``error`` for upstream failures on this adapter's route.
    failure_message: str = "Upstream request failed"

    def __init__(
        self,
        base_url: str,
        *,
        api_key: str | None = None,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key or None
        self._timeout = timeout
        self._headers = headers or {}
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique adapter name, used as the registry key."""

    @property
    def configured(self) -> bool:
        """True when every credential this adapter needs is present."""
        return not self.credential_name or self._api_key is not None

    def status(self) -> AdapterStatus:
        return AdapterStatus(provider=self.provider, configured=self.configured)

    async def initialize(self) -> None:
        """Create the HTTP client. Called once during application startup."""
        if self._client is not None:
            return
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        )
        if not self.configured:
            logger.warning("%s adapter has no %s configured; requests will fail", self.name, self.credential_name)
        logger.info("%s adapter initialized (%s)", self.name, self._base_url)

    async def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        await self.initialize()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.shutdown()

    # ── Helpers for subclasses ───────────────────────────────────────────

    def _require_api_key(self) -> str:
        """Return the credential or fail before any upstream call is made."""
        if self._api_key is None:
            raise ConfigurationError(f"missing {self.credential_name}")
        return self._api_key

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        """Issue the adapter's single upstream GET.

        Raises:
            NetworkError: If the client is not initialized or the call failed.
        """
        if self._client is None:
            raise NetworkError(f"{self.name} client not initialized.")
        try:
            return await self._client.get(path, params=params)
        except httpx.HTTPError as e:
            raise NetworkError(f"{self.provider} request failed: {e!s} ({type(e).__name__})") from e

    def _json(self, response: httpx.Response) -> Any:
        """Decode a JSON body or raise ``UpstreamSchemaError``."""
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamSchemaError(f"{self.provider} returned a body that is not JSON") from e

    def _parse(self, model: type[_M], data: Any) -> _M:
        """Validate decoded JSON against a raw provider schema."""
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise UpstreamSchemaError(
                f"Unexpected {self.provider} response shape ({e.error_count()} validation errors)"
            ) from e
