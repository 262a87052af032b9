"""
==============================================================================
Product Dataset Loader
==============================================================================

Reads product records from JSON and validates them.

Sources:
--------
- A single JSON file
- A directory; every ``*.json`` file in it is read in file-name order

JSON Structure:
--------------
{
  "products": [
    {
      "id": "OLJCESPC7Z",
      "name": "National Park Foundation Explorascope",
      "description": "...",
      "picture": "NationalParkFoundationExplorascope.jpg",
      "priceUsd": {"currencyCode": "USD", "units": 101, "nanos": 960000000},
      "categories": ["telescopes"]
    }
  ]
}

A bare top-level list of products is accepted as well.

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from pydantic import TypeAdapter, ValidationError

from .exceptions import CatalogLoadError
from .models import ProductRecord


# Module logger
logger = logging.getLogger(__name__)

_products_adapter = TypeAdapter(List[ProductRecord])


def _source_files(path: Path) -> List[Path]:
    """Resolve the JSON files making up the dataset."""
    if path.is_dir():
        files = sorted(p for p in path.glob("*.json") if p.is_file())
        if not files:
            raise CatalogLoadError("No product files found", str(path))
        return files
    if path.is_file():
        return [path]
    raise CatalogLoadError("Products source not found", str(path))


def _read_file(path: Path) -> List[ProductRecord]:
    """Read and validate a single products file."""
    try:
        with path.open("r", encoding="utf-8") as f:
            data: Any = json.load(f)
    except OSError as e:
        raise CatalogLoadError(f"Cannot read products file: {e}", str(path)) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CatalogLoadError(f"Invalid JSON: {e}", str(path)) from e

    if isinstance(data, dict):
        data = data.get("products")
    if not isinstance(data, list):
        raise CatalogLoadError("Expected a 'products' list", str(path))

    try:
        return _products_adapter.validate_python(data)
    except ValidationError as e:
        raise CatalogLoadError(f"Invalid product record: {e}", str(path)) from e


def load_products(path: Union[str, Path]) -> List[ProductRecord]:
    """
    Load the product dataset.

    Args:
        path: JSON file or directory of JSON files

    Returns:
        Validated records in load order

    Raises:
        CatalogLoadError: If the source is missing, unreadable, malformed,
            or contains duplicate identifiers
    """
    path = Path(path)
    products: List[ProductRecord] = []
    seen = set()

    for source in _source_files(path):
        for product in _read_file(source):
            if product.id in seen:
                raise CatalogLoadError(f"Duplicate product id: {product.id!r}", str(source))
            seen.add(product.id)
            products.append(product)

    logger.info(f"✅ Loaded {len(products)} products from {path}")
    return products
