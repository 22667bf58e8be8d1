"""Vitrine - API de conteúdo do blog e da loja com cache em memória."""
from .container import Container, build_container
from .domain import Article, Category, Product, Tag
from .infrastructure import CacheStore
from .services.articles.application import ArticleAggregationService

__all__ = [
    "Article",
    "ArticleAggregationService",
    "CacheStore",
    "Category",
    "Container",
    "Product",
    "Tag",
    "build_container",
]
