"""
==============================================================================
Product Schemas Module
==============================================================================

Response envelopes for the catalog and health endpoints.

Product objects use the dataset wire names (``priceUsd``, ``currencyCode``);
FastAPI serializes response models by alias.

==============================================================================
"""

from typing import List

from pydantic import BaseModel, Field

from catalog_service.catalog import ProductRecord
from catalog_service.services import ServingStatus


class ProductListResponse(BaseModel):
    """ListProducts response."""
    products: List[ProductRecord] = Field(default_factory=list)


class SearchResponse(BaseModel):
    """SearchProducts response."""
    results: List[ProductRecord] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """HealthCheck response."""
    status: ServingStatus
