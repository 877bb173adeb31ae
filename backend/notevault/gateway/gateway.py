"""
API Gateway

Main gateway class that orchestrates routing, middleware and error handling.
Acts as the single entry point for all API requests.
"""
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware

from ..api.dto import envelope
from ..core.config import CORS_ORIGINS, ENVIRONMENT, RATE_LIMIT_ENABLED, RATE_LIMIT_PER_MINUTE
from ..core.logging_config import get_logger
from .errors import register_exception_handlers
from .middleware import RequestIDMiddleware, RequestLoggingMiddleware
from .rate_limit import limiter

logger = get_logger(__name__)

# Routers are served both at the root and under /api
DEFAULT_PREFIXES = ("", "/api")


class APIGateway:
    """
    API Gateway that manages routing, middleware and error responses.

    Responsibilities:
    - Initialize FastAPI application
    - Register middleware (CORS, request ids, logging)
    - Turn every error into a ``{success: false, error}`` envelope
    - Register routers and the health endpoint
    """

    def __init__(
        self,
        title: str = "AI Notes App API",
        description: str = "Block-based notes with auto-save and AI assist",
        version: str = "1.0.0",
        enable_docs: Optional[bool] = None,
        lifespan=None
    ):
        self.title = title
        self.description = description
        self.version = version
        self.enable_docs = enable_docs if enable_docs is not None else (
            ENVIRONMENT != "production"
        )

        self.app = FastAPI(
            title=self.title,
            description=self.description,
            version=self.version,
            docs_url="/docs" if self.enable_docs else None,
            redoc_url="/redoc" if self.enable_docs else None,
            lifespan=lifespan
        )

        self.limiter = limiter
        self.app.state.limiter = self.limiter
        register_exception_handlers(self.app)

        self._routes: List[str] = []

        logger.info("API Gateway initialized")
        logger.debug(
            f"  → Rate limiting: {'enabled' if RATE_LIMIT_ENABLED else 'disabled'} "
            f"({RATE_LIMIT_PER_MINUTE}/minute on AI routes)"
        )

    def setup_middleware(self, cors_origins: Optional[Sequence[str]] = None):
        """Configure all middleware."""
        logger.info("Setting up middleware...")

        self.app.add_middleware(
            RequestLoggingMiddleware,
            skip_paths=["/health", "/api/health", "/docs", "/redoc", "/openapi.json"]
        )
        logger.debug("  → Request logging middleware added")

        # Added after logging so it runs first and the id is visible there
        self.app.add_middleware(RequestIDMiddleware)
        logger.debug("  → Request ID middleware added")

        origins = list(cors_origins or CORS_ORIGINS)
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        logger.debug(f"  → CORS middleware added (origins: {', '.join(origins)})")

        logger.info("✅ All middleware configured")

    def register_router(
        self,
        router: APIRouter,
        prefixes: Sequence[str] = DEFAULT_PREFIXES,
        tags: Optional[List[str]] = None
    ):
        """
        Register a router under each prefix.

        Args:
            router: FastAPI router instance
            prefixes: URL prefixes to mount at (root and ``/api`` by default)
            tags: OpenAPI tags for documentation
        """
        for prefix in prefixes:
            self.app.include_router(router, prefix=prefix, tags=tags or [])
            self._routes.extend(f"{prefix}{route.path}" for route in router.routes)
            logger.info(f"Registered router at prefix '{prefix or '/'}'")

    def register_health_endpoints(self):
        """Register ``/health`` and ``/api/health``."""

        async def health_check():
            """Liveness probe. Does not touch the store or the AI provider."""
            body = envelope(message="API is running!")
            body["timestamp"] = datetime.now(timezone.utc).isoformat()
            return body

        for path in ("/health", "/api/health"):
            self.app.add_api_route(path, health_check, methods=["GET"], tags=["Health"])

        logger.info("Health check endpoints registered")

    def get_app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self.app

    def get_route_summary(self) -> dict:
        """Get a summary of all registered routes."""
        return {"total_routes": len(self._routes), "routes": list(self._routes)}
