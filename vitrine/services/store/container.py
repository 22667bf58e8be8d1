"""Dependency container for the store service."""
from __future__ import annotations

from dataclasses import dataclass

from vitrine.domain import CatalogGateway
from vitrine.infrastructure import CacheStore, GumroadCatalogClient
from vitrine.settings import (
    get_gumroad_access_token,
    get_gumroad_api_url,
    get_products_cache_ttl,
    get_upstream_timeout,
)

from .application import ProductService


@dataclass
class StoreContainer:
    """Container exposing the store service dependencies."""

    catalog_gateway: CatalogGateway
    product_service: ProductService


def build_store_container(
    cache: CacheStore, *, catalog_gateway: CatalogGateway | None = None
) -> StoreContainer:
    """Build the store service container on top of the shared cache."""

    gateway = catalog_gateway or GumroadCatalogClient(
        get_gumroad_api_url(),
        get_gumroad_access_token(),
        timeout=get_upstream_timeout(),
    )
    service = ProductService(gateway, cache, ttl_seconds=get_products_cache_ttl())
    return StoreContainer(catalog_gateway=gateway, product_service=service)
