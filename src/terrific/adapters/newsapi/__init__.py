"""NewsAPI news-wire adapter."""

from terrific.adapters.newsapi.adapter import NewsWireAdapter

__all__ = ["NewsWireAdapter"]
