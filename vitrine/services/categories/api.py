"""Rotas FastAPI de categorias."""
from __future__ import annotations

from fastapi import APIRouter, FastAPI, Query
from fastapi.responses import JSONResponse

from vitrine.domain.errors import NotFoundError, require_slug
from vitrine.services.categories import CategoriesContainer
from vitrine.services.envelope import respond
from vitrine.services.schemas import map_article, map_category

CATEGORIES_TTL = 1800
POPULAR_TTL = 3600
CATEGORY_TAGS_TTL = 3600
CATEGORY_TTL = 600
CATEGORY_ARTICLES_TTL = 1800
RELATED_CATEGORIES_LIMIT = 4


def include_routes(app: FastAPI, container: CategoriesContainer, *, prefix: str = "") -> None:
    """Registra as rotas de categorias na aplicação informada."""

    router = APIRouter(prefix=prefix, tags=["Categorias"])
    service = container.category_service

    @router.get("/categories")
    def list_categories() -> JSONResponse:
        categories = service.list_categories()
        return respond([map_category(category) for category in categories], cache_ttl=CATEGORIES_TTL)

    @router.get("/categories/popular")
    def popular_categories(limit: int = Query(6, ge=0)) -> JSONResponse:
        """Categorias com mais artigos."""

        categories = service.popular(limit)
        return respond(
            {"categories": [map_category(category) for category in categories]},
            cache_ttl=POPULAR_TTL,
        )

    @router.get("/categories/tags")
    def category_tags() -> JSONResponse:
        """Categorias no formato de tags, ordenadas pela quantidade de artigos."""

        categories = service.list_categories()
        if not categories:
            raise NotFoundError.for_resource("Categories")
        return respond(
            [
                {
                    "id": category.slug,
                    "name": category.name,
                    "slug": category.slug,
                    "articleCount": category.article_count,
                    "color": category.color,
                }
                for category in categories
            ],
            cache_ttl=CATEGORY_TAGS_TTL,
        )

    @router.get("/categories/{slug}")
    def get_category(slug: str) -> JSONResponse:
        """Categoria com artigos em destaque e categorias relacionadas."""

        category_slug = require_slug(slug, "Category")
        category = service.get_category(category_slug)
        if category is None:
            raise NotFoundError.for_resource("Category")
        related = service.related_categories(category_slug, RELATED_CATEGORIES_LIMIT)
        return respond(
            {
                "category": map_category(category),
                "relatedCategories": [map_category(item) for item in related],
            },
            cache_ttl=CATEGORY_TTL,
        )

    @router.get("/categories/{slug}/articles")
    def category_articles(slug: str, limit: int = Query(10, ge=0)) -> JSONResponse:
        articles = service.category_articles(require_slug(slug, "Category"), limit)
        return respond(
            [map_article(article) for article in articles], cache_ttl=CATEGORY_ARTICLES_TTL
        )

    app.include_router(router)


__all__ = ["include_routes"]
