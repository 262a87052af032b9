"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the catalog API.

The catalog service and health reporter are created by the application
factory and kept on ``app.state``; routes receive them through these
dependencies rather than module globals, so tests can build isolated apps.

Request Headers:
---------------
- X-Request-ID: correlation id (generated when absent)
- X-Request-Timeout: seconds the caller is willing to wait; bounds flag
  lookups and injected latency

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Header, Request

from catalog_service.flags import RequestContext
from catalog_service.services import CatalogService, HealthReporter


# Module logger
logger = logging.getLogger(__name__)


def get_catalog_service(request: Request) -> CatalogService:
    """Catalog service attached to the running application."""
    return request.app.state.catalog_service


def get_health_reporter(request: Request) -> HealthReporter:
    """Health reporter attached to the running application."""
    return request.app.state.health_reporter


def get_request_context(
    x_request_id: Optional[str] = Header(default=None),
    x_request_timeout: Optional[float] = Header(default=None, gt=0),
) -> RequestContext:
    """
    Build the request context from headers.

    Args:
        x_request_id: Caller-supplied correlation id
        x_request_timeout: Caller deadline in seconds

    Returns:
        RequestContext for this request
    """
    return RequestContext(request_id=x_request_id, timeout=x_request_timeout)
