"""
Abstract base class for database adapters.
All database implementations must inherit from this class.
"""
from abc import ABC, abstractmethod
from typing import List, Dict, Optional


class DatabaseInterface(ABC):
    """
    Abstract interface for page storage.

    Every page operation is filtered by owner id as well as page id, the same
    way a document-store query would carry both in its filter. A page owned by
    someone else is indistinguishable from a missing one.
    """

    @abstractmethod
    async def create_page(self, page_data: Dict) -> Dict:
        """Create a new page record. ``page_data`` must carry ``id`` and ``owner_id``."""
        pass

    @abstractmethod
    async def get_page(self, owner_id: str, page_id: str) -> Optional[Dict]:
        """Get a page by ID, or None if missing or not owned by ``owner_id``."""
        pass

    @abstractmethod
    async def list_pages(self, owner_id: str, archived: Optional[bool] = None) -> List[Dict]:
        """Get all pages of an owner, optionally filtered by archived flag."""
        pass

    @abstractmethod
    async def update_page(self, owner_id: str, page_id: str, updates: Dict) -> Optional[Dict]:
        """Apply ``updates`` and return the updated page, or None if not found."""
        pass

    @abstractmethod
    async def delete_page(self, owner_id: str, page_id: str) -> bool:
        """Delete a page. Returns False if not found."""
        pass

    @abstractmethod
    async def initialize(self):
        """Initialize database (load files, create indexes, etc.)."""
        pass

    @abstractmethod
    async def close(self):
        """Close database connection."""
        pass
