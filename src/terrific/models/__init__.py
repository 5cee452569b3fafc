"""Canonical models every adapter converges to."""

from terrific.models.item import MemeRecord, NormalizedItem, VideoRecord
from terrific.models.pagination import AfterCursor, PageCursor, PageTokenCursor
from terrific.models.response import ErrorEnvelope

__all__ = [
    "AfterCursor",
    "ErrorEnvelope",
    "MemeRecord",
    "NormalizedItem",
    "PageCursor",
    "PageTokenCursor",
    "VideoRecord",
]
