"""
In-memory adapter implementing DatabaseInterface.
Perfect for demos and testing - stores all data in memory using Python dicts/lists.
Data is lost on restart.
"""
from typing import List, Dict, Optional
from datetime import datetime, timezone
import copy

from .base import DatabaseInterface
from ...core.logging_config import get_logger

logger = get_logger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class MemoryAdapter(DatabaseInterface):
    """
    In-memory database adapter using Python dictionaries and lists.
    Stores all data in memory - perfect for demos and testing.
    Data is lost when the application restarts.
    """

    def __init__(self):
        # In-memory storage: pages dict by ID
        self._pages: Dict[str, Dict] = {}

        # Index for fast "get all my pages" lookups
        self._owner_index: Dict[str, List[str]] = {}  # owner_id -> [page_ids]

    async def initialize(self):
        """Initialize database (clears any existing data)."""
        self._pages.clear()
        self._owner_index.clear()

    async def close(self):
        """Close database connection (no-op for in-memory)."""
        pass

    def _owned(self, owner_id: str, page_id: str) -> Optional[Dict]:
        page = self._pages.get(page_id)
        if page is None or page.get("owner_id") != owner_id:
            return None
        return page

    def _rebuild_indexes(self):
        self._owner_index.clear()
        for page_id, page in self._pages.items():
            self._owner_index.setdefault(page["owner_id"], []).append(page_id)

    # Page operations
    async def create_page(self, page_data: Dict) -> Dict:
        """Create a new page record."""
        page_id = page_data.get("id")
        owner_id = page_data.get("owner_id")
        if not page_id or not owner_id:
            raise ValueError("Page must have 'id' and 'owner_id' fields")

        # Add timestamps if not present
        now = _now()
        page_data.setdefault("created_at", now)
        page_data.setdefault("updated_at", now)

        # Store page (deep copy to avoid reference issues)
        self._pages[page_id] = copy.deepcopy(page_data)
        self._owner_index.setdefault(owner_id, []).append(page_id)

        return copy.deepcopy(self._pages[page_id])

    async def get_page(self, owner_id: str, page_id: str) -> Optional[Dict]:
        """Get a page by ID, scoped to its owner."""
        page = self._owned(owner_id, page_id)
        return copy.deepcopy(page) if page else None

    async def list_pages(self, owner_id: str, archived: Optional[bool] = None) -> List[Dict]:
        """Get all pages of an owner, optionally filtered by archived flag."""
        results = []
        for page_id in self._owner_index.get(owner_id, []):
            page = self._pages.get(page_id)
            if page is None:
                continue
            if archived is not None and bool(page.get("is_archived")) != archived:
                continue
            results.append(copy.deepcopy(page))
        return results

    async def update_page(self, owner_id: str, page_id: str, updates: Dict) -> Optional[Dict]:
        """Update a page (last write wins per field)."""
        page = self._owned(owner_id, page_id)
        if page is None:
            return None

        for key, value in updates.items():
            page[key] = copy.deepcopy(value)
        page["updated_at"] = _now()

        return copy.deepcopy(page)

    async def delete_page(self, owner_id: str, page_id: str) -> bool:
        """Delete a page."""
        if self._owned(owner_id, page_id) is None:
            return False

        del self._pages[page_id]
        ids = self._owner_index.get(owner_id, [])
        if page_id in ids:
            ids.remove(page_id)
        return True
