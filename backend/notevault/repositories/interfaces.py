"""
Repository interfaces - Define contracts for data access.
Business logic depends on these interfaces, not concrete implementations.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..domain.entities import Page, PageSummary
from ..domain.value_objects import OwnerId, PageId


class IPageRepository(ABC):
    """
    Owner-scoped access to pages.

    Every method takes the caller's owner id. A page that belongs to another
    owner is reported exactly like a missing one.
    """

    @abstractmethod
    async def find(self, owner_id: OwnerId) -> List[PageSummary]:
        """Non-archived pages, most recently updated first."""
        pass

    @abstractmethod
    async def find_archived(self, owner_id: OwnerId) -> List[PageSummary]:
        """Archived pages (the trash), most recently updated first."""
        pass

    @abstractmethod
    async def search(self, owner_id: OwnerId, query: str, limit: int = 20) -> List[PageSummary]:
        """Non-archived pages whose title contains ``query`` (case-insensitive)."""
        pass

    @abstractmethod
    async def find_one(self, owner_id: OwnerId, page_id: PageId) -> Optional[Page]:
        pass

    @abstractmethod
    async def create(self, owner_id: OwnerId, fields: Dict[str, Any]) -> Page:
        pass

    @abstractmethod
    async def update(self, owner_id: OwnerId, page_id: PageId, fields: Dict[str, Any]) -> Optional[Page]:
        """Apply allow-listed fields only; anything else is ignored."""
        pass

    @abstractmethod
    async def toggle_favorite(self, owner_id: OwnerId, page_id: PageId) -> Optional[bool]:
        pass

    @abstractmethod
    async def toggle_archive(self, owner_id: OwnerId, page_id: PageId) -> Optional[bool]:
        pass

    @abstractmethod
    async def delete(self, owner_id: OwnerId, page_id: PageId) -> bool:
        pass
