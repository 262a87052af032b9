"""
==============================================================================
Catalog Service Module
==============================================================================

Request-handling facade over the catalog store, search engine and fault
injection policy.

Lifecycle:
---------
    UNINITIALIZED ──initialize(store)──▶ READY

- UNINITIALIZED: every operation raises CATALOG_UNAVAILABLE (503)
- READY: operations serve from the store
- The transition happens once; there is no way back short of a restart

Error Mapping:
-------------
- ProductNotFoundError  -> PRODUCT_NOT_FOUND (404)
- Injected failure      -> INTERNAL_ERROR (500)
- Not ready             -> CATALOG_UNAVAILABLE (503)

==============================================================================
"""

from __future__ import annotations

import enum
import logging
from typing import List, Optional, Tuple

from catalog_service.catalog import (
    CatalogStore,
    ProductNotFoundError,
    ProductRecord,
    SearchEngine,
)
from catalog_service.core import exceptions
from catalog_service.flags import FaultInjectionPolicy, Operation, RequestContext


# Module logger
logger = logging.getLogger(__name__)


class ServiceState(str, enum.Enum):
    """Catalog service lifecycle state."""
    UNINITIALIZED = "uninitialized"
    READY = "ready"


class CatalogService:
    """
    Catalog operations exposed to the API layer.

    Attributes:
        _policy: Fault injection policy
        _store: Catalog store (None until initialized)
        _engine: Search engine over the store

    Example:
        >>> service = CatalogService(policy)
        >>> service.initialize(CatalogStore(load_products(path)))
        >>> product = await service.get_product("OLJCESPC7Z")
    """

    def __init__(
        self,
        policy: Optional[FaultInjectionPolicy] = None,
        store: Optional[CatalogStore] = None,
    ) -> None:
        self._policy = policy or FaultInjectionPolicy()
        self._store: Optional[CatalogStore] = None
        self._engine: Optional[SearchEngine] = None
        self._state = ServiceState.UNINITIALIZED

        if store is not None:
            self.initialize(store)

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    @property
    def state(self) -> ServiceState:
        """Current lifecycle state."""
        return self._state

    @property
    def is_ready(self) -> bool:
        """True once the catalog has been loaded."""
        return self._state is ServiceState.READY

    def initialize(self, store: CatalogStore) -> None:
        """
        Attach the loaded catalog and become READY.

        Args:
            store: Loaded catalog store

        Raises:
            RuntimeError: If the service is already READY
        """
        if self._state is ServiceState.READY:
            raise RuntimeError("Catalog service is already initialized")

        self._engine = SearchEngine(store)
        self._store = store
        self._state = ServiceState.READY

        logger.info(f"Catalog service ready with {len(store)} products")

    def _require_ready(self) -> Tuple[CatalogStore, SearchEngine]:
        """Return store and engine, or raise CATALOG_UNAVAILABLE."""
        if self._state is not ServiceState.READY:
            raise exceptions.catalog_unavailable()
        return self._store, self._engine

    # =========================================================================
    # OPERATIONS
    # =========================================================================

    async def list_products(self, context: Optional[RequestContext] = None) -> List[ProductRecord]:
        """
        List every product in load order.

        Raises:
            AppException: CATALOG_UNAVAILABLE before initialization
        """
        store, _ = self._require_ready()
        context = context or RequestContext()

        await self._policy.apply_latency(Operation.LIST_PRODUCTS, context)
        return list(store.list_all())

    async def get_product(
        self,
        product_id: str,
        context: Optional[RequestContext] = None
    ) -> ProductRecord:
        """
        Get a product by id.

        The failure check runs before the lookup, so an injected failure
        fires whether or not the id exists.

        Args:
            product_id: Product identifier
            context: Request context

        Returns:
            The product

        Raises:
            AppException: CATALOG_UNAVAILABLE, INTERNAL_ERROR (injected) or
                PRODUCT_NOT_FOUND
        """
        store, _ = self._require_ready()
        context = (context or RequestContext()).with_attributes(product_id=product_id)

        await self._policy.apply_latency(Operation.GET_PRODUCT, context)

        if await self._policy.should_fail(Operation.GET_PRODUCT, context):
            logger.warning(
                f"💥 Injected failure for GetProduct {product_id!r} "
                f"(request {context.request_id})"
            )
            raise exceptions.injected_failure(
                Operation.GET_PRODUCT, {"product_id": product_id}
            )

        try:
            return store.get_by_id(product_id)
        except ProductNotFoundError:
            raise exceptions.product_not_found(product_id)

    async def search_products(
        self,
        query: str,
        context: Optional[RequestContext] = None
    ) -> List[ProductRecord]:
        """
        Search products by name or description.

        Args:
            query: Case-insensitive substring; empty matches nothing
            context: Request context

        Returns:
            Matching products in load order
        """
        _, engine = self._require_ready()
        context = context or RequestContext()

        await self._policy.apply_latency(Operation.SEARCH_PRODUCTS, context)

        if await self._policy.should_fail(Operation.SEARCH_PRODUCTS, context):
            logger.warning(f"💥 Injected failure for SearchProducts (request {context.request_id})")
            raise exceptions.injected_failure(Operation.SEARCH_PRODUCTS, {"query": query})

        return engine.search(query)
