"""
==============================================================================
Product Search Module
==============================================================================

Case-insensitive substring search over product names and descriptions.

Matching Rules:
--------------
- A record matches when the query is a substring of its name OR description
- Comparison is case-insensitive (``str.casefold``)
- The query is used as given; it is not trimmed or tokenized
- The empty query matches nothing
- Results keep catalog load order

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from .models import ProductRecord
from .store import CatalogStore


# Module logger
logger = logging.getLogger(__name__)


class SearchEngine:
    """
    Substring search over a catalog store.

    Folded name/description text is computed once, since the store never
    changes after construction.

    Example:
        >>> engine = SearchEngine(store)
        >>> [p.name for p in engine.search("telescope")]
        ['Starsense Explorer Refractor Telescope', 'Eclipsmart Travel Refractor Telescope']
    """

    def __init__(self, store: CatalogStore) -> None:
        self._index: Tuple[Tuple[str, str, ProductRecord], ...] = tuple(
            (product.name.casefold(), product.description.casefold(), product)
            for product in store
        )

    @staticmethod
    def matches(query: str, product: ProductRecord) -> bool:
        """
        Check whether a single product satisfies the query.

        Args:
            query: Search text
            product: Candidate record

        Returns:
            True if query is a case-insensitive substring of name or description
        """
        if not query:
            return False
        folded = query.casefold()
        return folded in product.name.casefold() or folded in product.description.casefold()

    def search(self, query: str) -> List[ProductRecord]:
        """
        Search products by name or description.

        Args:
            query: Search text

        Returns:
            Matching products in load order (empty for an empty query)
        """
        if not query:
            return []

        folded = query.casefold()
        results = [
            product
            for name, description, product in self._index
            if folded in name or folded in description
        ]

        logger.debug(f"Search {query!r} matched {len(results)} products")
        return results
