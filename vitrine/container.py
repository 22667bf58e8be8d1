"""Container that wires the shared cache into every service."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from vitrine.domain import CatalogGateway, ContentGateway
from vitrine.infrastructure import CacheStore
from vitrine.services.articles import ArticlesContainer, build_articles_container
from vitrine.services.categories import CategoriesContainer, build_categories_container
from vitrine.services.store import StoreContainer, build_store_container


@dataclass
class Container:
    """Aggregated container owning the process-wide cache store."""

    cache: CacheStore
    articles: ArticlesContainer
    categories: CategoriesContainer
    store: StoreContainer

    def close(self) -> None:
        """Clear the cache and close the HTTP clients owned by the gateways."""

        self.cache.clear()
        for gateway in (self.articles.content_gateway, self.store.catalog_gateway):
            close = getattr(gateway, "close", None)
            if callable(close):
                close()
        logging.getLogger("vitrine.container").info("Container encerrado")


def build_container(
    *,
    content_gateway: ContentGateway | None = None,
    catalog_gateway: CatalogGateway | None = None,
    cache: CacheStore | None = None,
    rng: random.Random | None = None,
) -> Container:
    """Construct the combined container using the service builders."""

    cache = cache or CacheStore()
    articles = build_articles_container(cache, content_gateway=content_gateway, rng=rng)
    categories = build_categories_container(articles.aggregation_service)
    store = build_store_container(cache, catalog_gateway=catalog_gateway)
    return Container(cache=cache, articles=articles, categories=categories, store=store)
