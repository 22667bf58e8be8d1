"""Casos de uso de leitura e agregação de artigos."""

from .aggregation_service import (
    ALL_ARTICLES_KEY,
    ArticleAggregationService,
    ArticleCategory,
    jitter_bands,
    trending_score,
)

__all__ = [
    "ALL_ARTICLES_KEY",
    "ArticleAggregationService",
    "ArticleCategory",
    "jitter_bands",
    "trending_score",
]
