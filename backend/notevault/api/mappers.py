"""
Mappers between domain entities and DTOs.
Separates domain layer from API layer.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..domain.entities import Page, PageSummary
from .dto import PageDTO, PageSummaryDTO


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


class PageMapper:
    """Maps between Page entities and their wire form."""

    @staticmethod
    def to_dto(page: Page) -> PageDTO:
        """Convert domain entity to DTO."""
        return PageDTO(
            id=page.id,
            owner_id=page.owner_id,
            title=page.title,
            icon=page.icon,
            cover_image=page.cover_image,
            content=page.content,
            tags=page.tags,
            summary=page.summary,
            is_favorite=page.is_favorite,
            is_archived=page.is_archived,
            created_at=_iso(page.created_at),
            updated_at=_iso(page.updated_at),
        )

    @staticmethod
    def to_summary_dto(summary: PageSummary) -> PageSummaryDTO:
        return PageSummaryDTO(
            id=summary.id,
            title=summary.title,
            icon=summary.icon,
            is_favorite=summary.is_favorite,
            is_archived=summary.is_archived,
            created_at=_iso(summary.created_at),
            updated_at=_iso(summary.updated_at),
        )

    @staticmethod
    def to_json(page: Page) -> Dict[str, Any]:
        return PageMapper.to_dto(page).model_dump(by_alias=True)

    @staticmethod
    def to_summary_json_list(summaries: List[PageSummary]) -> List[Dict[str, Any]]:
        """Convert list of summaries to camelCase dicts."""
        return [PageMapper.to_summary_dto(s).model_dump(by_alias=True) for s in summaries]
