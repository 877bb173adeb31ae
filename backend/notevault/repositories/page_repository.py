"""
Page Repository - Concrete implementation of page data access.
Maps between domain entities and database adapters.
"""
from typing import Any, Dict, List, Optional
from datetime import datetime
import uuid

from .interfaces import IPageRepository
from ..domain.entities import Page, PageSummary
from ..domain.value_objects import OwnerId, PageId, MUTABLE_FIELDS, DEFAULT_TITLE
from ..services.database.base import DatabaseInterface
from ..core.logging_config import get_logger

logger = get_logger(__name__)

SEARCH_LIMIT = 20


def _parse_time(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def allowed_updates(fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Keep only allow-listed fields, translated to their stored names.

    Accepts API names (``coverImage``) as well as stored names
    (``cover_image``); unknown keys are dropped silently.
    """
    stored_names = set(MUTABLE_FIELDS.values())
    updates: Dict[str, Any] = {}
    for key, value in fields.items():
        if key in MUTABLE_FIELDS:
            updates[MUTABLE_FIELDS[key]] = value
        elif key in stored_names:
            updates[key] = value
    if "content" in updates and updates["content"] is None:
        updates["content"] = []
    if "tags" in updates and updates["tags"] is None:
        updates["tags"] = []
    return updates


class PageRepository(IPageRepository):
    """
    Repository for page data access.
    Follows Single Responsibility Principle - only handles data access.
    """

    def __init__(self, db_service: DatabaseInterface):
        """
        Initialize repository with database service.

        Args:
            db_service: Database adapter (dependency injection)
        """
        self._db = db_service

    def _to_entity(self, data: dict) -> Page:
        """Convert database record to domain entity."""
        return Page(
            id=data["id"],
            owner_id=data["owner_id"],
            title=data.get("title") or DEFAULT_TITLE,
            icon=data.get("icon"),
            cover_image=data.get("cover_image"),
            content=list(data.get("content") or []),
            tags=list(data.get("tags") or []),
            summary=data.get("summary"),
            is_favorite=bool(data.get("is_favorite", False)),
            is_archived=bool(data.get("is_archived", False)),
            created_at=_parse_time(data.get("created_at")),
            updated_at=_parse_time(data.get("updated_at")),
        )

    def _to_summary(self, data: dict) -> PageSummary:
        return PageSummary(
            id=data["id"],
            title=data.get("title") or DEFAULT_TITLE,
            icon=data.get("icon"),
            is_favorite=bool(data.get("is_favorite", False)),
            is_archived=bool(data.get("is_archived", False)),
            created_at=_parse_time(data.get("created_at")),
            updated_at=_parse_time(data.get("updated_at")),
        )

    def _summaries(self, records: List[dict]) -> List[PageSummary]:
        records = sorted(records, key=lambda r: r.get("updated_at") or "", reverse=True)
        return [self._to_summary(r) for r in records]

    async def find(self, owner_id: OwnerId) -> List[PageSummary]:
        return self._summaries(await self._db.list_pages(owner_id, archived=False))

    async def find_archived(self, owner_id: OwnerId) -> List[PageSummary]:
        return self._summaries(await self._db.list_pages(owner_id, archived=True))

    async def search(self, owner_id: OwnerId, query: str, limit: int = SEARCH_LIMIT) -> List[PageSummary]:
        needle = query.strip().casefold()
        if not needle:
            return []
        records = await self._db.list_pages(owner_id, archived=False)
        matches = [r for r in records if needle in (r.get("title") or "").casefold()]
        return self._summaries(matches)[:limit]

    async def find_one(self, owner_id: OwnerId, page_id: PageId) -> Optional[Page]:
        data = await self._db.get_page(owner_id, page_id)
        return self._to_entity(data) if data else None

    async def create(self, owner_id: OwnerId, fields: Dict[str, Any]) -> Page:
        """Create a blank page; content and tags always start empty."""
        record = {
            "id": uuid.uuid4().hex,
            "owner_id": owner_id,
            "title": fields.get("title") or DEFAULT_TITLE,
            "icon": fields.get("icon"),
            "cover_image": None,
            "content": [],
            "tags": [],
            "summary": None,
            "is_favorite": False,
            "is_archived": False,
        }
        data = await self._db.create_page(record)
        logger.info(f"Created page {data['id']} for owner {owner_id}")
        return self._to_entity(data)

    async def update(self, owner_id: OwnerId, page_id: PageId, fields: Dict[str, Any]) -> Optional[Page]:
        updates = allowed_updates(fields)
        if not updates:
            # Nothing to write, but still answer not-found for foreign pages
            return await self.find_one(owner_id, page_id)
        data = await self._db.update_page(owner_id, page_id, updates)
        if data:
            logger.debug(f"Updated page {page_id} fields: {sorted(updates)}")
        return self._to_entity(data) if data else None

    async def toggle_favorite(self, owner_id: OwnerId, page_id: PageId) -> Optional[bool]:
        page = await self.find_one(owner_id, page_id)
        if page is None:
            return None
        was_favorite = page.is_favorite
        page.toggle_favorite()
        if page.is_favorite != was_favorite:
            await self._db.update_page(owner_id, page_id, {"is_favorite": page.is_favorite})
        return page.is_favorite

    async def toggle_archive(self, owner_id: OwnerId, page_id: PageId) -> Optional[bool]:
        page = await self.find_one(owner_id, page_id)
        if page is None:
            return None
        page.toggle_archive()
        await self._db.update_page(owner_id, page_id, {
            "is_archived": page.is_archived,
            "is_favorite": page.is_favorite,
        })
        return page.is_archived

    async def delete(self, owner_id: OwnerId, page_id: PageId) -> bool:
        deleted = await self._db.delete_page(owner_id, page_id)
        if deleted:
            logger.info(f"Deleted page {page_id} permanently")
        return deleted
