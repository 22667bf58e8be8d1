"""Projeções calculadas sobre o conjunto de artigos em cache."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .article import Article


@dataclass(frozen=True)
class LatestArticle:
    """Artigo anotado com a idade da publicação."""

    article: Article
    days_since_published: int

    @property
    def is_new(self) -> bool:
        return self.days_since_published < 7


@dataclass(frozen=True)
class TrendingArticle:
    """Artigo anotado com a pontuação de engajamento."""

    article: Article
    trending_score: float
    is_trending: bool = True


@dataclass(frozen=True)
class TagCount:
    """Tag distinta encontrada nos artigos e a quantidade de artigos que a usam."""

    id: str
    name: str
    slug: str
    count: int
    color: Optional[str] = None


@dataclass(frozen=True)
class Category:
    """Tag apresentada como categoria, com dados de destaque anexados."""

    name: str
    slug: str
    article_count: int
    color: Optional[str] = None
    description: Optional[str] = None
    featured_articles: Tuple[Article, ...] = field(default_factory=tuple)


__all__ = ["Category", "LatestArticle", "TagCount", "TrendingArticle"]
