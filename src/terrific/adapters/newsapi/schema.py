"""Raw NewsAPI ``/v2/everything`` shapes and their mapping to ``NormalizedItem``."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from terrific.models.item import NormalizedItem

DEFAULT_SOURCE = "NewsAPI"


class _Raw(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class NewsApiSource(_Raw):
    id: str | None = None
    name: str | None = None


class NewsApiArticle(_Raw):
    source: NewsApiSource | None = None
    author: str | None = None
    title: str | None = None
    description: str | None = None
    url: str | None = None
    url_to_image: str | None = Field(default=None, alias="urlToImage")
    published_at: str | None = Field(default=None, alias="publishedAt")
    content: str | None = None


class NewsApiResponse(_Raw):
    """Success: ``status="ok"`` with ``articles``. Failure: ``status="error"`` with ``code``/``message``."""

    status: str | None = None
    code: str | None = None
    message: str | None = None
    total_results: int | None = Field(default=None, alias="totalResults")
    articles: list[NewsApiArticle] | None = None


def to_item(article: NewsApiArticle) -> NormalizedItem:
    """Map an article; NewsAPI has no ids, so the article URL stands in."""
    return NormalizedItem(
        id=article.url or "",
        title=article.title or "",
        summary=article.description or "",
        body=article.content or "",
        image=article.url_to_image or None,
        published=article.published_at,
        source=(article.source.name if article.source else None) or DEFAULT_SOURCE,
        url=article.url,
    )
