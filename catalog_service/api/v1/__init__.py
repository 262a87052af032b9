"""
==============================================================================
API v1 Endpoints
==============================================================================

Version 1 of the REST API.

Routers:
--------
- health: Serving status endpoints
- products: Product catalog

==============================================================================
"""

from . import health, products

__all__ = ["health", "products"]
