"""
==============================================================================
Main API Router
==============================================================================

Mounts the versioned catalog and health routers under /api/v1.

==============================================================================
"""

from typing import Sequence

from fastapi import APIRouter

from catalog_service.api.v1 import health, products


class MainAPIRouter:
    """
    Versioned API router.

    Args:
        prefix: URL prefix for the API version
        routers: Sub-routers mounted under the prefix
    """

    def __init__(self, prefix: str, routers: Sequence[APIRouter]):
        self._router = APIRouter(prefix=prefix)
        for router in routers:
            self._router.include_router(router)

    @property
    def router(self) -> APIRouter:
        """Get the FastAPI router instance."""
        return self._router


api_router = MainAPIRouter("/api/v1", [health.router, products.router]).router
