"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Response schemas for the HTTP API.

==============================================================================
"""

from .product import HealthResponse, ProductListResponse, SearchResponse

__all__ = [
    "HealthResponse",
    "ProductListResponse",
    "SearchResponse",
]
