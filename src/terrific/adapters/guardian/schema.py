"""Raw Guardian Content API shapes and their mapping to ``NormalizedItem``.

Search (``/search``) and single-item (``/{id}``) responses share the
content object; they differ only in whether ``response`` holds a
``results`` list or one ``content`` object. Every default is declared
here, so callers never probe optional keys themselves.
"""

from __future__ import annotations

import httpx
from pydantic import BaseModel, ConfigDict, Field

from terrific.models.item import NormalizedItem

SOURCE = "The Guardian"


class _Raw(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class GuardianFields(_Raw):
    """The ``show-fields`` block. Only requested fields are ever present."""

    headline: str | None = None
    trail_text: str | None = Field(default=None, alias="trailText")
    thumbnail: str | None = None
    body: str | None = None
    body_text: str | None = Field(default=None, alias="bodyText")

    def rich_body(self) -> str:
        """``body`` if present, else ``bodyText``, else empty (null-coalescing, not truthiness)."""
        if self.body is not None:
            return self.body
        if self.body_text is not None:
            return self.body_text
        return ""


class GuardianContent(_Raw):
    id: str
    web_title: str | None = Field(default=None, alias="webTitle")
    web_url: str | None = Field(default=None, alias="webUrl")
    web_publication_date: str | None = Field(default=None, alias="webPublicationDate")
    show_fields: GuardianFields | None = Field(default=None, alias="fields")


class GuardianSearchBody(_Raw):
    status: str | None = None
    message: str | None = None
    current_page: int | None = Field(default=None, alias="currentPage")
    pages: int | None = None
    results: list[GuardianContent] | None = None


class GuardianSearchEnvelope(_Raw):
    response: GuardianSearchBody | None = None


class GuardianItemBody(_Raw):
    status: str | None = None
    message: str | None = None
    content: GuardianContent | None = None


class GuardianItemEnvelope(_Raw):
    response: GuardianItemBody | None = None


class GuardianErrorEnvelope(_Raw):
    """Error bodies: ``{"response": {"message": ...}}`` or a bare ``{"message": ...}``."""

    response: GuardianItemBody | None = None
    message: str | None = None

    def best_message(self) -> str | None:
        if self.response is not None and self.response.message:
            return self.response.message
        return self.message or None


def to_item(content: GuardianContent, *, body: str | None = None, with_url: bool = False) -> NormalizedItem:
    """Map a content object to ``NormalizedItem``.

    Args:
        content: Parsed content object.
        body: Resolved body text, for callers that fetched it.
        with_url: Include ``webUrl`` as ``url``.
    """
    fields = content.show_fields or GuardianFields()
    return NormalizedItem(
        id=content.id,
        title=content.web_title or "",
        summary=fields.trail_text or "",
        body=body,
        image=fields.thumbnail or None,
        date=content.web_publication_date,
        source=SOURCE,
        url=content.web_url if with_url else None,
    )


def describe_error(response: httpx.Response) -> str:
    """Message for a JSON error response: ``response.message``, else ``message``, else ``Guardian HTTP <status>``."""
    try:
        message = GuardianErrorEnvelope.model_validate(response.json()).best_message()
    except ValueError:
        message = None
    return message or f"Guardian HTTP {response.status_code}"
