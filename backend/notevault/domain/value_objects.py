"""
Value Objects - Immutable objects that represent domain concepts.
These have no identity and are compared by value.
"""
from enum import Enum
from typing import NewType, Dict

# Value objects for type safety and domain clarity
PageId = NewType("PageId", str)
OwnerId = NewType("OwnerId", str)

DEFAULT_TITLE = "Untitled"

# Fields a partial update may touch, API name -> stored name
MUTABLE_FIELDS: Dict[str, str] = {
    "title": "title",
    "icon": "icon",
    "coverImage": "cover_image",
    "content": "content",
    "tags": "tags",
    "summary": "summary",
}


class AIFeature(str, Enum):
    """AI-assist operations a caller can request."""
    SUMMARIZE = "summarize"
    IMPROVE = "improve"
    TAGS = "tags"
    GENERATE = "generate"
