"""Reddit JSON listing adapter."""

from terrific.adapters.reddit.adapter import ListingAdapter

__all__ = ["ListingAdapter"]
