"""
Domain entities - Core business objects.
These represent the business concepts, not database models.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from .value_objects import AIFeature, OwnerId, PageId, DEFAULT_TITLE


@dataclass
class Page:
    """
    Page entity - a user-owned note.
    This is a pure domain object, independent of persistence.
    """
    id: PageId
    owner_id: OwnerId
    title: str = DEFAULT_TITLE
    icon: Optional[str] = None
    cover_image: Optional[str] = None
    content: List[Dict[str, Any]] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    summary: Optional[str] = None
    is_favorite: bool = False
    is_archived: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def toggle_favorite(self) -> bool:
        """
        Flip the favorite flag and return the new value.

        Pages in the trash cannot be favorited; the flag stays off.
        """
        if self.is_archived:
            self.is_favorite = False
            return False
        self.is_favorite = not self.is_favorite
        return self.is_favorite

    def toggle_archive(self) -> bool:
        """
        Move the page to or from the trash.

        Archiving always clears the favorite flag; restoring leaves it off.
        """
        self.is_archived = not self.is_archived
        if self.is_archived:
            self.is_favorite = False
        return self.is_archived


@dataclass
class PageSummary:
    """Lightweight projection used by list, search and trash views."""
    id: PageId
    title: str
    icon: Optional[str]
    is_favorite: bool
    is_archived: bool
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


@dataclass(frozen=True)
class Summary:
    text: str
    feature = AIFeature.SUMMARIZE


@dataclass(frozen=True)
class ImprovedText:
    text: str
    feature = AIFeature.IMPROVE


@dataclass(frozen=True)
class Tags:
    tags: List[str]
    feature = AIFeature.TAGS


@dataclass(frozen=True)
class GeneratedText:
    text: str
    feature = AIFeature.GENERATE


AIResult = Union[Summary, ImprovedText, Tags, GeneratedText]


def result_value(result: AIResult) -> Union[str, List[str]]:
    """Payload of an AI result as it goes over the wire."""
    if isinstance(result, Tags):
        return list(result.tags)
    return result.text
