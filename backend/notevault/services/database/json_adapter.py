"""
JSON file-based adapter implementing DatabaseInterface.
Perfect for local demos - stores all data in a JSON file for persistence.
Data persists between restarts, no database setup needed.
"""
import json
import asyncio
from pathlib import Path
from typing import Dict, Optional

from .memory_adapter import MemoryAdapter
from ...api.exceptions import PersistenceError
from ...core.logging_config import get_logger

logger = get_logger(__name__)


class JSONAdapter(MemoryAdapter):
    """
    JSON file-based database adapter.
    Keeps pages in memory and writes the whole collection back after every
    mutation.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        """
        Initialize JSON adapter.

        Args:
            data_dir: Directory to store JSON files (defaults to backend/data/json_db)
        """
        super().__init__()
        if data_dir is None:
            base_dir = Path(__file__).resolve().parent.parent.parent.parent
            data_dir = base_dir / "data" / "json_db"

        self.data_dir = Path(data_dir)
        self.pages_file = self.data_dir / "pages.json"

        # Held from snapshot to write so the newest snapshot lands last
        self._write_lock = asyncio.Lock()

    async def initialize(self):
        """Initialize database - load data from the JSON file."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._load_data()

    async def close(self):
        """Close database - save data to the JSON file."""
        await self._save_data()

    def _load_data(self):
        """Load data from the JSON file into memory."""
        self._pages = {}
        if self.pages_file.exists():
            try:
                with open(self.pages_file, 'r', encoding='utf-8') as f:
                    self._pages = json.load(f)
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Could not load {self.pages_file.name}: {e}")
                self._pages = {}

        self._rebuild_indexes()
        logger.debug(f"Loaded {len(self._pages)} pages from {self.pages_file}")

    async def _save_data(self):
        """Save data from memory to the JSON file."""
        async with self._write_lock:
            snapshot = json.dumps(self._pages, indent=2, ensure_ascii=False)

            def _save():
                with open(self.pages_file, 'w', encoding='utf-8') as f:
                    f.write(snapshot)

            # Run in executor to avoid blocking
            loop = asyncio.get_running_loop()
            try:
                await loop.run_in_executor(None, _save)
            except OSError as e:
                logger.error(f"Could not write {self.pages_file}: {e}")
                raise PersistenceError() from e

    async def create_page(self, page_data: Dict) -> Dict:
        page = await super().create_page(page_data)
        await self._save_data()
        return page

    async def update_page(self, owner_id: str, page_id: str, updates: Dict) -> Optional[Dict]:
        page = await super().update_page(owner_id, page_id, updates)
        if page is not None:
            await self._save_data()
        return page

    async def delete_page(self, owner_id: str, page_id: str) -> bool:
        deleted = await super().delete_page(owner_id, page_id)
        if deleted:
            await self._save_data()
        return deleted
