"""
==============================================================================
Catalog Package - Product Data
==============================================================================

Immutable product catalog with id lookup and substring search.

Classes:
--------
- ProductRecord / Money: Pydantic models for products
- CatalogStore: Read-only store with id index
- SearchEngine: Case-insensitive name/description search

Functions:
----------
- load_products: Read and validate the JSON dataset

==============================================================================
"""

from .exceptions import (
    CatalogError,
    CatalogLoadError,
    DuplicateProductError,
    ProductNotFoundError,
)
from .loader import load_products
from .models import Money, ProductRecord
from .search import SearchEngine
from .store import CatalogStore

__all__ = [
    "CatalogError",
    "CatalogLoadError",
    "DuplicateProductError",
    "ProductNotFoundError",
    "load_products",
    "Money",
    "ProductRecord",
    "SearchEngine",
    "CatalogStore",
]
