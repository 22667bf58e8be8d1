"""Porta de acesso à API de conteúdo (CMS)."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Sequence

from vitrine.domain.entities import Article, Tag


@dataclass(frozen=True)
class ArticleFilter:
    """Restrições aplicadas a uma consulta de artigos.

    ``limit`` igual a ``None`` significa a coleção completa, percorrendo todas
    as páginas do CMS.
    """

    limit: Optional[int] = None
    tag_slugs: tuple[str, ...] = field(default_factory=tuple)


class ContentGateway(ABC):
    """Define como a aplicação consulta artigos e tags no CMS."""

    @abstractmethod
    def get_articles(self, article_filter: ArticleFilter) -> Sequence[Article]:
        """Retornar os artigos que atendem ao filtro, na ordem do CMS."""

    @abstractmethod
    def get_article_tags(self, slug: str) -> Sequence[Tag]:
        """Retornar as tags do artigo indicado, ou lista vazia quando não existir."""

    @abstractmethod
    def get_articles_by_category(self, slug: str, limit: int) -> Sequence[Article]:
        """Retornar até ``limit`` artigos marcados com a tag informada."""
