"""
Database Factory for creating page store adapters.

Adapters are looked up by name in ``ADAPTERS``; ``DATABASE_TYPE`` and
``JSON_DB_PATH`` from the config supply the defaults.
"""
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from .base import DatabaseInterface
from .memory_adapter import MemoryAdapter
from .json_adapter import JSONAdapter
from ...core.config import DATABASE_TYPE, JSON_DB_PATH
from ...core.logging_config import get_logger

logger = get_logger(__name__)


def _json_adapter(data_dir: Optional[Union[str, Path]] = None) -> JSONAdapter:
    data_dir = data_dir or JSON_DB_PATH
    return JSONAdapter(data_dir=Path(data_dir) if data_dir else None)


def _memory_adapter() -> MemoryAdapter:
    return MemoryAdapter()


ADAPTERS: Dict[str, Callable[..., DatabaseInterface]] = {
    "json": _json_adapter,
    "memory": _memory_adapter,
}


class DatabaseFactory:
    """Builds the page store named by ``database_type`` (config default)."""

    @staticmethod
    def create(database_type: Optional[str] = None, **kwargs) -> DatabaseInterface:
        """
        Create an adapter without initializing it.

        Examples:
            DatabaseFactory.create("json", data_dir=Path("data/json_db"))
            DatabaseFactory.create("memory")

        Raises:
            ValueError: Unknown adapter name
        """
        name = (database_type or DATABASE_TYPE).lower()
        try:
            build = ADAPTERS[name]
        except KeyError:
            raise ValueError(
                f"Unsupported database type: {name}. "
                f"Supported types: {', '.join(sorted(ADAPTERS))}"
            ) from None
        return build(**kwargs)

    @staticmethod
    async def create_and_initialize(database_type: Optional[str] = None, **kwargs) -> DatabaseInterface:
        db = DatabaseFactory.create(database_type, **kwargs)
        await db.initialize()
        logger.info(f"Database ready: {type(db).__name__}")
        return db
