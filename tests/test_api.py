"""
==============================================================================
API Integration Tests
==============================================================================

Tests for REST API endpoints.

==============================================================================
"""

from pathlib import Path
from typing import Any, Dict, List

from fastapi.testclient import TestClient

from catalog_service.config import Settings
from catalog_service.flags import StaticFlagResolver
from catalog_service.main import Application


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client: TestClient):
        """Test health check reports SERVING after load."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json() == {"status": "SERVING"}

    def test_readiness_probe(self, client: TestClient):
        """Test readiness probe."""
        response = client.get("/api/v1/health/ready")
        assert response.status_code == 200
        assert response.json()["ready"] is True

    def test_liveness_probe(self, client: TestClient):
        """Test liveness probe."""
        response = client.get("/api/v1/health/live")
        assert response.status_code == 200
        assert response.json()["alive"] is True

    def test_health_unaffected_by_empty_search(self, client: TestClient):
        """Test a search with no results leaves health SERVING."""
        assert client.get("/api/v1/products/search", params={"query": "zzz"}).json() == {"results": []}
        assert client.get("/api/v1/health").json()["status"] == "SERVING"


class TestFailedStartup:
    """Tests for a catalog that fails to load."""

    def test_not_serving(self, tmp_path: Path):
        """Test a bad dataset leaves the app up but NOT_SERVING."""
        bad = tmp_path / "broken.json"
        bad.write_text("{broken", encoding="utf-8")
        settings = Settings(_env_file=None, products_file=str(bad), flag_file=None)
        application = Application(settings=settings, flag_resolver=StaticFlagResolver())

        with TestClient(application.app) as client:
            response = client.get("/api/v1/health")
            assert response.status_code == 503
            assert response.json() == {"status": "NOT_SERVING"}
            assert client.get("/api/v1/health/ready").json()["ready"] is False
            assert client.get("/api/v1/health/live").json()["alive"] is True

            for path in ("/api/v1/products", "/api/v1/products/OLJCESPC7Z", "/api/v1/products/search?query=a"):
                response = client.get(path)
                assert response.status_code == 503
                assert response.json()["error"]["code"] == "CATALOG_UNAVAILABLE"

    def test_not_utf8_dataset(self, tmp_path: Path):
        """Test a dataset with invalid UTF-8 leaves the app up but NOT_SERVING."""
        bad = tmp_path / "products.json"
        bad.write_bytes(b"\xff\xfe\x00garbage")
        settings = Settings(_env_file=None, products_file=str(bad), flag_file=None)
        application = Application(settings=settings, flag_resolver=StaticFlagResolver())

        with TestClient(application.app) as client:
            response = client.get("/api/v1/health")
            assert response.status_code == 503
            assert response.json() == {"status": "NOT_SERVING"}
            assert client.get("/api/v1/products").status_code == 503
        assert application.catalog_service.is_ready is False

    def test_missing_dataset(self, tmp_path: Path):
        """Test a missing dataset leaves the service uninitialized."""
        settings = Settings(_env_file=None, products_file=str(tmp_path / "absent.json"), flag_file=None)
        application = Application(settings=settings, flag_resolver=StaticFlagResolver())

        with TestClient(application.app) as client:
            assert client.get("/api/v1/health").status_code == 503
        assert application.catalog_service.is_ready is False


class TestProductEndpoints:
    """Tests for product catalog endpoints."""

    def test_list_products(self, client: TestClient, sample_products: List[Dict[str, Any]]):
        """Test listing returns every product in load order."""
        response = client.get("/api/v1/products")
        assert response.status_code == 200
        products = response.json()["products"]
        assert [p["id"] for p in products] == [p["id"] for p in sample_products]

    def test_list_products_wire_format(self, client: TestClient, sample_products: List[Dict[str, Any]]):
        """Test products use the dataset field names."""
        product = client.get("/api/v1/products").json()["products"][0]
        assert product == sample_products[0]

    def test_get_product(self, client: TestClient):
        """Test fetching the demo product with the flag unset."""
        response = client.get("/api/v1/products/OLJCESPC7Z")
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "OLJCESPC7Z"
        assert data["name"]

    def test_get_every_product(self, client: TestClient, sample_products: List[Dict[str, Any]]):
        """Test every loaded id is retrievable."""
        for item in sample_products:
            assert client.get(f"/api/v1/products/{item['id']}").json()["id"] == item["id"]

    def test_get_product_not_found(self, client: TestClient):
        """Test unknown ids return 404."""
        response = client.get("/api/v1/products/NOPE")
        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "PRODUCT_NOT_FOUND"
        assert error["details"] == {"product_id": "NOPE"}

    def test_get_product_empty_id(self, client: TestClient):
        """Test a trailing slash is an empty-id miss, not the product list."""
        response = client.get("/api/v1/products/", follow_redirects=False)
        assert response.status_code == 404
        assert response.json()["error"]["details"] == {"product_id": ""}

    def test_search_path_is_not_an_id(self, client: TestClient):
        """Test /products/search always answers as a search."""
        response = client.get("/api/v1/products/search")
        assert response.status_code == 200
        assert response.json() == {"results": []}

    def test_get_product_injected_failure(self, client: TestClient, flag_resolver: StaticFlagResolver):
        """Test the demo product fails with 500 while the flag is on."""
        flag_resolver.set("productCatalogFailure", True)
        for _ in range(2):
            response = client.get("/api/v1/products/OLJCESPC7Z")
            assert response.status_code == 500
            assert response.json()["error"]["code"] == "INTERNAL_ERROR"

        assert client.get("/api/v1/products/L9ECAV7KIM").status_code == 200

        flag_resolver.set("productCatalogFailure", False)
        assert client.get("/api/v1/products/OLJCESPC7Z").status_code == 200

    def test_search_telescope(self, client: TestClient):
        """Test 'telescope' finds exactly the two telescopes."""
        response = client.get("/api/v1/products/search", params={"query": "telescope"})
        assert response.status_code == 200
        results = response.json()["results"]
        assert [p["id"] for p in results] == ["66VCHSJNUP", "1YMWWN1N4O"]

    def test_search_empty_query(self, client: TestClient):
        """Test the empty or missing query returns no results."""
        assert client.get("/api/v1/products/search", params={"query": ""}).json() == {"results": []}
        assert client.get("/api/v1/products/search").json() == {"results": []}

    def test_request_headers(self, client: TestClient):
        """Test request id and timeout headers are accepted."""
        response = client.get(
            "/api/v1/products/OLJCESPC7Z",
            headers={"X-Request-ID": "req-42", "X-Request-Timeout": "2.5"},
        )
        assert response.status_code == 200

    def test_invalid_timeout_header(self, client: TestClient):
        """Test a non-positive timeout header is rejected."""
        response = client.get("/api/v1/products", headers={"X-Request-Timeout": "0"})
        assert response.status_code == 422
