"""Casos de uso de categorias derivadas das tags dos artigos."""
from __future__ import annotations

from typing import Optional

from vitrine.domain import Article, Category, TagCount
from vitrine.domain.errors import NotFoundError
from vitrine.domain.tag_colors import tag_color
from vitrine.services.articles.application import ArticleAggregationService

FEATURED_ARTICLES_LIMIT = 8

#: Descrições editoriais das categorias mais comuns do blog.
CATEGORY_DESCRIPTIONS: dict[str, str] = {
    "javascript": "Modern JavaScript tutorials and best practices",
    "react": "React tutorials, patterns and optimization techniques",
    "nextjs": "Next.js app building, routing and server components",
    "css": "Modern CSS techniques, animations, and layouts",
    "typescript": "TypeScript types, patterns and best practices",
    "nodejs": "Server-side JavaScript with Node.js",
    "api": "Building and consuming APIs",
    "clean-code": "Writing maintainable, clean code",
    "performance": "Web performance optimization techniques",
    "ai": "Artificial intelligence and machine learning",
}


class CategoryService:
    """Apresenta as tags dos artigos em cache como categorias navegáveis.

    Categorias só existem quando ao menos um artigo usa a tag; nada é mantido
    em cache além da coleção de artigos do serviço de agregação.
    """

    def __init__(self, articles: ArticleAggregationService) -> None:
        self._articles = articles

    def list_categories(self) -> list[Category]:
        """Categorias ordenadas pela quantidade de artigos."""

        return [self._to_category(summary) for summary in self._articles.get_article_categories()]

    def get_category(self, slug: str) -> Optional[Category]:
        for summary in self._articles.get_article_categories():
            if summary.slug == slug:
                featured = self._articles.get_articles_by_tag(slug, FEATURED_ARTICLES_LIMIT)
                return self._to_category(summary, featured)
        return None

    def related_categories(self, slug: str, limit: int = 4) -> list[Category]:
        """Demais categorias, das mais populares para as menos populares."""

        categories = self.list_categories()
        return [category for category in categories if category.slug != slug][:limit]

    def popular(self, limit: int = 6) -> list[Category]:
        categories = self.list_categories()
        if not categories:
            raise NotFoundError.for_resource("Categories")
        return categories[:limit]

    def category_articles(self, slug: str, limit: int = 10) -> list[Article]:
        if self.get_category(slug) is None:
            raise NotFoundError.for_resource(f'Category "{slug}"')
        return self._articles.get_articles_by_tag(slug, limit)

    @staticmethod
    def _to_category(
        summary: TagCount, featured: list[Article] | None = None
    ) -> Category:
        return Category(
            name=summary.name,
            slug=summary.slug,
            article_count=summary.count,
            color=summary.color or tag_color(summary.name),
            description=CATEGORY_DESCRIPTIONS.get(summary.slug),
            featured_articles=tuple(featured or ()),
        )


__all__ = ["CATEGORY_DESCRIPTIONS", "CategoryService"]
