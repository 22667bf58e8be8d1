"""Dependency container for the articles service."""
from __future__ import annotations

import random
from dataclasses import dataclass

from vitrine.domain import ContentGateway
from vitrine.infrastructure import CacheStore, HashnodeContentClient
from vitrine.settings import (
    get_articles_cache_ttl,
    get_hashnode_api_key,
    get_hashnode_api_url,
    get_hashnode_host,
    get_upstream_timeout,
)

from .application import ArticleAggregationService


@dataclass
class ArticlesContainer:
    """Container exposing the articles service dependencies."""

    content_gateway: ContentGateway
    aggregation_service: ArticleAggregationService


def build_articles_container(
    cache: CacheStore,
    *,
    content_gateway: ContentGateway | None = None,
    rng: random.Random | None = None,
) -> ArticlesContainer:
    """Build the articles service container on top of the shared cache."""

    gateway = content_gateway or HashnodeContentClient(
        get_hashnode_api_url(),
        get_hashnode_host(),
        api_key=get_hashnode_api_key(),
        timeout=get_upstream_timeout(),
    )
    service = ArticleAggregationService(
        gateway,
        cache,
        ttl_seconds=get_articles_cache_ttl(),
        rng=rng,
    )
    return ArticlesContainer(content_gateway=gateway, aggregation_service=service)
