"""
==============================================================================
Product Catalog Service - Application Entry Point
==============================================================================

FastAPI application with:
- Product list / get / search endpoints
- Health endpoints (SERVING / NOT_SERVING)
- Flag-driven fault injection for observability testing

Usage:
------
    # Development
    uvicorn catalog_service.main:app --reload

    # Production
    uvicorn catalog_service.main:app --host 0.0.0.0 --port 3550

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_service.api.router import api_router
from catalog_service.catalog import CatalogError, CatalogStore, load_products
from catalog_service.config import Settings, get_settings
from catalog_service.core.exceptions import register_exception_handlers
from catalog_service.flags import FaultInjectionPolicy, FileFlagResolver, FlagResolver
from catalog_service.services import CatalogService, HealthReporter


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Handles application lifecycle including:
    - Catalog loading at startup
    - Middleware configuration
    - Router registration
    - Exception handler setup

    The catalog service and health reporter are created here and stored
    on ``app.state``; a failed catalog load leaves the service
    UNINITIALIZED and health NOT_SERVING instead of stopping the process.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        flag_resolver: Optional[FlagResolver] = None,
    ):
        """
        Initialize the application.

        Args:
            settings: Settings to use (defaults to the global settings)
            flag_resolver: Flag provider (defaults to the configured flag
                file, or none)
        """
        self._settings = settings or get_settings()
        self._flag_resolver = flag_resolver or self._default_flag_resolver()
        self._catalog_service = CatalogService(
            FaultInjectionPolicy.from_settings(self._settings, self._flag_resolver)
        )
        self._health_reporter = HealthReporter(lambda: self._catalog_service.is_ready)
        self._app = self._create_app()

    def _default_flag_resolver(self) -> Optional[FlagResolver]:
        """Flag resolver from settings, or None when no flag file is set."""
        flag_path = self._settings.flag_path
        if flag_path is None:
            logger.info("No flag file configured, fault injection disabled")
            return None
        return FileFlagResolver(flag_path)

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="Product catalog lookup service",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        app.state.catalog_service = self._catalog_service
        app.state.health_reporter = self._health_reporter

        # Configure middleware
        self._configure_middleware(app)

        # Register exception handlers
        register_exception_handlers(app)

        # Register routers
        app.include_router(api_router)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        # Startup
        self._startup()
        yield
        # Shutdown
        logger.info("🛑 Shutting down...")

    def _startup(self) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info("=" * 60)

        # Load product catalog
        self._load_catalog()

        logger.info(f"Health: {self._health_reporter.check().value}")
        logger.info(f"📍 Running on http://{self._settings.host}:{self._settings.port}")
        logger.info("=" * 60)

    def _load_catalog(self) -> None:
        """Load the product catalog and mark the service ready."""
        if self._catalog_service.is_ready:
            return
        try:
            products = load_products(self._settings.products_path)
            self._catalog_service.initialize(CatalogStore(products))
        except CatalogError as e:
            logger.error(f"❌ Failed to load catalog: {e}")

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app

    @property
    def catalog_service(self) -> CatalogService:
        """Get the catalog service."""
        return self._catalog_service

    @property
    def health_reporter(self) -> HealthReporter:
        """Get the health reporter."""
        return self._health_reporter


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

# Create application instance
application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
