"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Endpoints for listing, fetching and searching the product catalog.

==============================================================================
"""

from fastapi import APIRouter, Depends, Query

from catalog_service.catalog import ProductRecord
from catalog_service.core.dependencies import get_catalog_service, get_request_context
from catalog_service.flags import RequestContext
from catalog_service.schemas import ProductListResponse, SearchResponse
from catalog_service.services import CatalogService


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, service: CatalogService, context: RequestContext):
        self._service = service
        self._context = context

    async def list_products(self) -> ProductListResponse:
        """List all products."""
        products = await self._service.list_products(self._context)
        return ProductListResponse(products=products)

    async def search(self, query: str) -> SearchResponse:
        """Search products."""
        results = await self._service.search_products(query, self._context)
        return SearchResponse(results=results)

    async def get_by_id(self, product_id: str) -> ProductRecord:
        """Get product by id."""
        return await self._service.get_product(product_id, self._context)


def get_controller(
    service: CatalogService = Depends(get_catalog_service),
    context: RequestContext = Depends(get_request_context),
) -> ProductController:
    """Controller bound to this request."""
    return ProductController(service, context)


@router.get("", response_model=ProductListResponse)
async def list_products(controller: ProductController = Depends(get_controller)):
    """List every product in catalog order."""
    return await controller.list_products()


@router.get("/search", response_model=SearchResponse)
async def search_products(
    query: str = Query(""),
    controller: ProductController = Depends(get_controller)
):
    """Search products by name or description (case-insensitive substring)."""
    return await controller.search(query)


@router.get("/", response_model=ProductRecord, include_in_schema=False)
async def get_product_empty_id(controller: ProductController = Depends(get_controller)):
    """Empty id: answered as an ordinary miss instead of a redirect to the list."""
    return await controller.get_by_id("")


@router.get("/{product_id}", response_model=ProductRecord)
async def get_product(product_id: str, controller: ProductController = Depends(get_controller)):
    """
    Get a product by id.

    The literal id "search" is routed to the search endpoint, so a product
    with that id cannot be fetched here.
    """
    return await controller.get_by_id(product_id)
