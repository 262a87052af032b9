"""
==============================================================================
Catalog Store Module
==============================================================================

Immutable, identifier-indexed store of product records.

The store is built once from the loader's output and only read afterwards,
so any number of concurrent requests can share it without locking.

==============================================================================
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from .exceptions import DuplicateProductError, ProductNotFoundError
from .models import ProductRecord


# Module logger
logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Read-only product store with an id index.

    Example:
        >>> store = CatalogStore(load_products(Path("data/products.json")))
        >>> store.get_by_id("OLJCESPC7Z").name
        'National Park Foundation Explorascope'
    """

    def __init__(self, products: Iterable[ProductRecord]) -> None:
        """
        Build the store and its id index.

        Args:
            products: Records in load order

        Raises:
            DuplicateProductError: If two records share an id
        """
        self._products: Tuple[ProductRecord, ...] = tuple(products)
        self._by_id: Mapping[str, ProductRecord] = MappingProxyType(
            self._build_index(self._products)
        )

        logger.debug(f"Catalog store built with {len(self._products)} products")

    @staticmethod
    def _build_index(products: Tuple[ProductRecord, ...]) -> dict:
        """Index products by id, rejecting duplicates."""
        index = {}
        for product in products:
            if product.id in index:
                raise DuplicateProductError(product.id)
            index[product.id] = product
        return index

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def list_all(self) -> Tuple[ProductRecord, ...]:
        """Return every record in load order."""
        return self._products

    def find_by_id(self, product_id: str) -> Optional[ProductRecord]:
        """Find a product by exact id, or None."""
        return self._by_id.get(product_id)

    def get_by_id(self, product_id: str) -> ProductRecord:
        """
        Get a product by exact id.

        Empty or malformed ids are ordinary misses.

        Args:
            product_id: Identifier to look up

        Returns:
            The matching record

        Raises:
            ProductNotFoundError: If no record has that id
        """
        product = self._by_id.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[ProductRecord]:
        return iter(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._by_id
