"""YouTube Data API v3 search adapter."""

from terrific.adapters.youtube.adapter import VideoSearchAdapter

__all__ = ["VideoSearchAdapter"]
