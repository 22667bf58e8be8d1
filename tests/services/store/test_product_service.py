from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from vitrine.api import create_app
from vitrine.container import build_container
from vitrine.domain import ArticleFilter, CatalogGateway, ContentGateway, Product
from vitrine.domain.errors import UpstreamUnavailable
from vitrine.infrastructure.cache import CacheStore
from vitrine.infrastructure.gumroad_client import GumroadCatalogClient
from vitrine.services.store.application import ALL_PRODUCTS_KEY, ProductService


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class FakeCatalog(CatalogGateway):
    def __init__(self, products: list[Product]) -> None:
        self.products = products
        self.fail = False
        self.calls = 0

    def list_products(self):
        self.calls += 1
        if self.fail:
            raise UpstreamUnavailable("Failed to fetch products")
        return list(self.products)


class NoArticles(ContentGateway):
    def get_articles(self, article_filter: ArticleFilter):
        return []

    def get_article_tags(self, slug: str):
        return []

    def get_articles_by_category(self, slug: str, limit: int):
        return []


def _product(product_id: str, name: str, **extra) -> Product:
    payload = {
        "id": product_id,
        "name": name,
        "price": 1900,
        "formatted_price": "$19",
        "short_url": f"https://shop.example.com/l/{product_id}",
        "custom_permalink": product_id,
        "published": True,
    }
    payload.update(extra)
    return Product.from_mapping(payload)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog(
        [
            _product("abcdefgh1234", "Clean Code Handbook", tags=["ebook", "Clean Code"]),
            _product("zyxwvuts9876", "Deploy Kit", tags=["tool", "Advanced"], sales_count=120),
        ]
    )


@pytest.fixture
def service(catalog: FakeCatalog, clock: FakeClock) -> ProductService:
    return ProductService(catalog, CacheStore(clock=clock), ttl_seconds=300)


def test_products_are_cached_within_ttl(service: ProductService, catalog, clock) -> None:
    service.list_products()
    clock.now += 300
    service.list_products()

    assert catalog.calls == 1

    clock.now += 1
    service.list_products()
    assert catalog.calls == 2


def test_force_refresh_skips_cache(service: ProductService, catalog) -> None:
    service.list_products()
    service.list_products(force_refresh=True)

    assert catalog.calls == 2


def test_catalog_failure_serves_stale_products(service: ProductService, catalog, clock) -> None:
    first = service.list_products()
    clock.now += 10_000
    catalog.fail = True

    assert service.list_products() == first


def test_catalog_failure_without_cache_propagates(service: ProductService, catalog) -> None:
    catalog.fail = True

    with pytest.raises(UpstreamUnavailable, match="Failed to fetch products"):
        service.list_products()


def test_get_product_matches_slug_then_id(service: ProductService) -> None:
    by_slug = service.get_product("clean-code-handbook-abcdefgh")
    by_id = service.get_product("zyxwvuts9876")

    assert by_slug is not None and by_slug.name == "Clean Code Handbook"
    assert by_id is not None and by_id.name == "Deploy Kit"
    assert service.get_product("missing") is None


def test_products_are_stored_under_catalog_key(catalog, clock) -> None:
    store = CacheStore(clock=clock)
    ProductService(catalog, store).list_products()

    assert [product.id for product in store.get(ALL_PRODUCTS_KEY)] == [
        "abcdefgh1234",
        "zyxwvuts9876",
    ]


@pytest.fixture
def client(catalog: FakeCatalog) -> TestClient:
    container = build_container(
        content_gateway=NoArticles(), catalog_gateway=catalog, cache=CacheStore()
    )
    return TestClient(create_app(container))


def test_products_route(client: TestClient) -> None:
    response = client.get("/products")

    assert response.status_code == 200
    assert "s-maxage=300" in response.headers["cache-control"]
    products = response.json()["data"]
    assert [item["slug"] for item in products] == [
        "clean-code-handbook-abcdefgh",
        "deploy-kit-zyxwvuts",
    ]
    deploy = products[1]
    assert deploy["productType"] == "tool"
    assert deploy["level"] == "Advanced"
    assert deploy["popular"] is True
    assert deploy["formattedPrice"] == "$19"
    assert products[0]["categories"] == ["Clean Code"]


def test_product_detail_and_not_found(client: TestClient) -> None:
    found = client.get("/products/deploy-kit-zyxwvuts")
    missing = client.get("/products/unknown")

    assert found.json()["data"]["name"] == "Deploy Kit"
    assert missing.status_code == 404
    assert missing.json() == {"success": False, "error": "Product not found"}


def test_products_route_reports_catalog_failure(client: TestClient, catalog) -> None:
    catalog.fail = True

    response = client.get("/products")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to fetch products"}


def test_malformed_catalog_payload_serves_stale_products(clock) -> None:
    payloads = [
        {"success": True, "products": [{"id": "p1", "name": "Guia", "published": True}]},
        {"success": True, "products": [{"name": "Sem id", "published": True}]},
    ]

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payloads.pop(0))

    client = GumroadCatalogClient(
        "https://api.shop.example.com",
        "token",
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )
    service = ProductService(client, CacheStore(clock=clock), ttl_seconds=300)

    first = service.list_products()
    clock.now += 301

    assert service.list_products() == first
    assert payloads == []
