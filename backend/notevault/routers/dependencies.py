"""
Shared dependencies for routers.
Provides database and service initialization.

The store handle and the AI service are process-wide singletons. They are
created lazily on first use; initialization is idempotent and guarded by a
lock so concurrent first requests share one instance.
"""
import asyncio
from typing import Optional

from fastapi import Depends

from ..services.database import DatabaseFactory, DatabaseInterface
from ..services.ai_service import AIService
from ..services.assist_service import AssistService
from ..repositories import PageRepository
from ..core.config import DATABASE_TYPE
from ..core.logging_config import get_logger

logger = get_logger(__name__)

# Global services (initialized on startup or first use)
db_service: Optional[DatabaseInterface] = None
ai_service: Optional[AIService] = None

_init_lock = asyncio.Lock()


async def initialize_database(database_type: Optional[str] = None) -> DatabaseInterface:
    """Initialize the database adapter once; later calls return the same handle."""
    global db_service

    if db_service is not None:
        return db_service

    async with _init_lock:
        if db_service is None:
            logger.info(f"Initializing database: {database_type or DATABASE_TYPE}")
            db_service = await DatabaseFactory.create_and_initialize(database_type)
            logger.info("  ✅ Database initialized")

    return db_service


def initialize_services() -> AIService:
    """Create the AI service (and its provider client) once."""
    global ai_service

    if ai_service is None:
        logger.info("  → Starting AI Service...")
        ai_service = AIService()
        logger.info("  ✅ AI Service initialized")
    return ai_service


def configure_services(
    database: Optional[DatabaseInterface] = None,
    ai: Optional[AIService] = None
) -> None:
    """Install ready-made services (tests, embedding in another process)."""
    global db_service, ai_service
    if database is not None:
        db_service = database
    if ai is not None:
        ai_service = ai


async def shutdown_services() -> None:
    """Close the store and forget all singletons."""
    global db_service, ai_service
    if db_service is not None:
        await db_service.close()
        logger.debug("Database closed")
    db_service = None
    ai_service = None


async def get_db_service() -> DatabaseInterface:
    """Get database service (dependency injection)."""
    return await initialize_database()


def get_ai_service() -> AIService:
    """Get AI service (dependency injection)."""
    return initialize_services()


def get_page_repository(db: DatabaseInterface = Depends(get_db_service)) -> PageRepository:
    return PageRepository(db)


def get_assist_service(
    repo: PageRepository = Depends(get_page_repository),
    ai: AIService = Depends(get_ai_service)
) -> AssistService:
    return AssistService(ai, repo)
