"""Guardian Content API adapters (topical search and single-article lookup).

API Reference: https://open-platform.theguardian.com/documentation/
"""

from terrific.adapters.guardian.detail import ContentDetailAdapter, encode_content_path
from terrific.adapters.guardian.search import EXPLAINERS_PROFILE, WARS_PROFILE, ContentSearchAdapter, SearchProfile

__all__ = [
    "EXPLAINERS_PROFILE",
    "WARS_PROFILE",
    "ContentDetailAdapter",
    "ContentSearchAdapter",
    "SearchProfile",
    "encode_content_path",
]
