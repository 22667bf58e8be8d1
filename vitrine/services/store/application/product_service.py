"""Casos de uso de consulta ao catálogo da loja."""
from __future__ import annotations

import logging
from typing import Optional

from vitrine.domain import CatalogGateway, Product
from vitrine.domain.errors import UpstreamUnavailable
from vitrine.infrastructure.cache import CacheStore

ALL_PRODUCTS_KEY = "products:all"


class ProductService:
    """Mantém o catálogo em cache, servindo dados antigos se o catálogo falhar."""

    def __init__(
        self,
        gateway: CatalogGateway,
        cache: CacheStore,
        *,
        ttl_seconds: float = 300,
        logger: logging.Logger | None = None,
    ) -> None:
        self._gateway = gateway
        self._cache = cache
        self._ttl = ttl_seconds
        self._log = logger or logging.getLogger("vitrine.products")

    def list_products(self, force_refresh: bool = False) -> tuple[Product, ...]:
        if not force_refresh:
            cached = self._cache.get(ALL_PRODUCTS_KEY)
            if cached is not None:
                return cached
        try:
            products = tuple(self._gateway.list_products())
        except UpstreamUnavailable as exc:
            stale = self._cache.get_stale_ok(ALL_PRODUCTS_KEY)
            if stale is None:
                raise
            self._log.warning(
                "Catálogo indisponível, servindo %d produtos em cache: %s", len(stale), exc
            )
            return stale
        self._cache.set(ALL_PRODUCTS_KEY, products, self._ttl)
        self._log.info("%d produtos armazenados em cache por %ss", len(products), self._ttl)
        return products

    def get_product(self, slug_or_id: str) -> Optional[Product]:
        """Procura o produto pelo slug e, para links antigos, pelo identificador."""

        products = self.list_products()
        for product in products:
            if product.slug == slug_or_id:
                return product
        for product in products:
            if product.id == slug_or_id:
                return product
        return None


__all__ = ["ALL_PRODUCTS_KEY", "ProductService"]
