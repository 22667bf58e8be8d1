"""Dependency container for the categories service."""
from __future__ import annotations

from dataclasses import dataclass

from vitrine.services.articles.application import ArticleAggregationService

from .application import CategoryService


@dataclass
class CategoriesContainer:
    """Container exposing the categories service dependencies."""

    category_service: CategoryService


def build_categories_container(
    aggregation_service: ArticleAggregationService,
) -> CategoriesContainer:
    """Build the categories container reusing the articles aggregation."""

    return CategoriesContainer(category_service=CategoryService(aggregation_service))
