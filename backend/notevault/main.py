import sys
from contextlib import asynccontextmanager

from .gateway import APIGateway
from .routers import pages, ai
from .routers.dependencies import initialize_database, initialize_services, shutdown_services
from .core.config import (
    APP_TITLE,
    AI_PROVIDER,
    DATABASE_TYPE,
    ENVIRONMENT,
    RATE_LIMIT_ENABLED,
    RATE_LIMIT_PER_MINUTE,
    CORS_ORIGINS,
)
from .core.logging_config import setup_logging, get_logger

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app):
    """Initialize the store and AI service on startup; close the store on shutdown."""
    logger.info("=" * 60)
    logger.info(f"Starting {APP_TITLE} Backend...")
    logger.info("=" * 60)

    try:
        import fastapi
        import uvicorn
        logger.info("Framework & Server:")
        logger.info(f"  → FastAPI Version: {fastapi.__version__}")
        logger.info(f"  → Uvicorn Version: {uvicorn.__version__}")
        logger.info(f"  → Python Version: {sys.version.split()[0]}")
    except ImportError as e:
        logger.debug(f"Could not get framework versions: {e}")

    logger.info("Configuration:")
    logger.info(f"  → Environment: {ENVIRONMENT}")
    logger.info(f"  → Docs URL: {app.docs_url if app.docs_url else 'Disabled (production)'}")
    logger.info(f"  → Database: {DATABASE_TYPE}")
    logger.info(f"  → AI Provider: {AI_PROVIDER}")
    logger.info(f"  → Rate Limiting: {RATE_LIMIT_ENABLED} ({RATE_LIMIT_PER_MINUTE}/minute)")
    logger.info(f"  → Allowed Origins: {', '.join(CORS_ORIGINS)}")

    await initialize_database()
    initialize_services()

    route_summary = gateway.get_route_summary()
    logger.info(f"API Routes: {route_summary['total_routes']}")
    logger.info("=" * 60)
    logger.info("✅ Backend ready")
    logger.info("=" * 60)

    yield

    logger.info("Shutting down...")
    await shutdown_services()


# Initialize API Gateway
gateway = APIGateway(
    title=f"{APP_TITLE} API",
    description="Block-based notes with auto-save and AI assist",
    version="1.0.0",
    lifespan=lifespan
)

# Setup middleware (CORS, request ids, logging)
gateway.setup_middleware()

# Routers answer at both /pages and /api/pages
gateway.register_router(pages.router, tags=["Pages"])
gateway.register_router(ai.router, tags=["AI"])

gateway.register_health_endpoints()

app = gateway.get_app()
