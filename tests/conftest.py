"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides a sample dataset, flag resolver, settings and client fixtures.

==============================================================================
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Callable, Dict, Generator, List

import pytest
from fastapi.testclient import TestClient

from catalog_service.catalog import CatalogStore, load_products
from catalog_service.config import Settings
from catalog_service.flags import StaticFlagResolver
from catalog_service.main import Application


def _product(product_id: str, name: str, description: str, units: int, *categories: str) -> Dict[str, Any]:
    return {
        "id": product_id,
        "name": name,
        "description": description,
        "picture": f"{product_id}.jpg",
        "priceUsd": {"currencyCode": "USD", "units": units, "nanos": 950000000},
        "categories": list(categories),
    }


# ============================================================================
# DATASET FIXTURES
# ============================================================================

@pytest.fixture
def sample_products() -> List[Dict[str, Any]]:
    """Ten products, two of them with 'Telescope' in the name."""
    return [
        _product("OLJCESPC7Z", "National Park Foundation Explorascope", "Compact refractor for the trail.", 101, "telescopes"),
        _product("66VCHSJNUP", "Starsense Explorer Refractor Telescope", "Phone-guided stargazing.", 349, "telescopes"),
        _product("1YMWWN1N4O", "Eclipsmart Travel Refractor Telescope", "Solar viewing kit with built-in filter.", 129, "telescopes", "travel"),
        _product("L9ECAV7KIM", "Lens Cleaning Kit", "Keeps optics free of dust.", 21, "accessories"),
        _product("2ZYFJ3GM2N", "Roof Binoculars", "10x50 prism binoculars.", 209, "binoculars"),
        _product("0PUK6V6EV0", "Solar System Color Imager", "Camera for the Moon and planets.", 175, "accessories"),
        _product("LS4PSXUNUM", "Red Flashlight", "Preserves night vision.", 57, "accessories", "flashlights"),
        _product("9SIQT8TOJO", "Optical Tube Assembly", "Schmidt-Cassegrain tube without a mount.", 3599, "accessories"),
        _product("6E92ZMYYFZ", "Solar Filter", "Blocks harmful SOLAR light.", 69, "accessories"),
        _product("HQTGWGPNH4", "The Comet Book", "A history of comet sightings.", 0, "books"),
    ]


@pytest.fixture
def products_file(tmp_path: Path, sample_products: List[Dict[str, Any]]) -> Path:
    """Sample dataset written to a JSON file."""
    path = tmp_path / "products.json"
    path.write_text(json.dumps({"products": sample_products}), encoding="utf-8")
    return path


@pytest.fixture
def store(products_file: Path) -> CatalogStore:
    """Catalog store over the sample dataset."""
    return CatalogStore(load_products(products_file))


# ============================================================================
# FLAG & SETTINGS FIXTURES
# ============================================================================

@pytest.fixture
def flag_resolver() -> StaticFlagResolver:
    """All flags off."""
    return StaticFlagResolver()


@pytest.fixture
def settings(products_file: Path) -> Settings:
    """Settings pointing at the sample dataset."""
    return Settings(_env_file=None, products_file=str(products_file), flag_file=None)


@pytest.fixture
def run() -> Callable:
    """Run a coroutine to completion."""
    return asyncio.run


# ============================================================================
# APPLICATION FIXTURES
# ============================================================================

@pytest.fixture
def application(settings: Settings, flag_resolver: StaticFlagResolver) -> Application:
    """Application wired to the sample dataset and static flags."""
    return Application(settings=settings, flag_resolver=flag_resolver)


@pytest.fixture
def client(application: Application) -> Generator[TestClient, None, None]:
    """Test client; entering it runs startup and loads the catalog."""
    with TestClient(application.app) as test_client:
        yield test_client
