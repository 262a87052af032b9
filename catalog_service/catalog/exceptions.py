"""
Catalog domain errors.

These never leave the service layer directly; ``CatalogService`` maps them
onto ``AppException`` for the HTTP boundary.
"""

from typing import Optional


class CatalogError(Exception):
    """Base class for catalog errors."""


class ProductNotFoundError(CatalogError, LookupError):
    """No record has the requested identifier."""

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id!r}")


class DuplicateProductError(CatalogError):
    """Two records share an identifier."""

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"Duplicate product id: {product_id!r}")


class CatalogLoadError(CatalogError):
    """The dataset could not be read or validated."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{message} ({source})"
        super().__init__(message)
