"""Rotas FastAPI de consulta de artigos e tags."""
from __future__ import annotations

from fastapi import APIRouter, FastAPI, Query
from fastapi.responses import JSONResponse

from vitrine.domain.errors import NotFoundError, require_slug
from vitrine.services.articles import ArticlesContainer
from vitrine.services.envelope import respond
from vitrine.services.schemas import (
    map_article,
    map_article_detail,
    map_featured,
    map_latest,
    map_tag,
    map_tag_count,
    map_trending,
)

ARTICLES_TTL = 300
LATEST_TTL = 300
TRENDING_TTL = 600
TRENDING_TAGS_TTL = 1800
TAG_ARTICLES_TTL = 600
ARTICLE_TTL = 300
ARTICLE_TAGS_TTL = 1800
ARTICLE_CATEGORIES_TTL = 3600
TAGS_TTL = 3600
TOP_TAGS_LIMIT = 20


def include_routes(app: FastAPI, container: ArticlesContainer, *, prefix: str = "") -> None:
    """Registra as rotas de artigos na aplicação informada."""

    router = APIRouter(prefix=prefix, tags=["Artigos"])
    service = container.aggregation_service

    @router.get("/articles")
    def list_articles(
        limit: int = Query(12, ge=0), force: bool = False
    ) -> JSONResponse:
        """Lista a coleção em cache, opcionalmente forçando a atualização."""

        articles = service.fetch_and_cache_all(force_refresh=force)
        limited = articles[:limit]
        return respond(
            {
                "articles": [map_article(article) for article in limited],
                "count": len(limited),
                "total": len(articles),
                "cached": not force,
            },
            cache_ttl=ARTICLES_TTL,
        )

    @router.get("/articles/latest")
    def latest_articles(limit: int = Query(10, ge=0)) -> JSONResponse:
        """Artigos mais recentes primeiro, marcando os publicados há menos de 7 dias."""

        articles = service.current_articles()
        total = len(articles)
        if not total:
            raise NotFoundError.for_resource("Articles")
        latest = service.latest(limit, articles=articles)
        return respond(
            {
                "articles": [map_latest(item) for item in latest],
                "count": len(latest),
                "total": total,
                "type": "latest",
            },
            cache_ttl=LATEST_TTL,
        )

    @router.get("/articles/trending")
    def trending_articles(limit: int = Query(10, ge=0)) -> JSONResponse:
        """Artigos com mais engajamento; a ordem varia entre artigos próximos."""

        articles = service.current_articles()
        total = len(articles)
        if not total:
            raise NotFoundError.for_resource("Articles")
        trending = service.trending(limit, articles=articles)
        return respond(
            {
                "articles": [map_trending(item) for item in trending],
                "count": len(trending),
                "total": total,
                "type": "trending",
            },
            cache_ttl=TRENDING_TTL,
        )

    @router.get("/articles/trending-tags")
    def trending_tags(limit: int = Query(10, ge=0), period: str = "30d") -> JSONResponse:
        articles = service.current_articles()
        if not articles:
            raise NotFoundError.for_resource("Articles")
        tags = service.trending_tags(limit, period, articles=articles)
        return respond(
            {"tags": [map_tag_count(tag) for tag in tags], "period": period},
            cache_ttl=TRENDING_TAGS_TTL,
        )

    @router.get("/articles/tag/{slug}")
    def articles_by_tag(
        slug: str, limit: int = Query(4, ge=0), page: int = Query(1, ge=1)
    ) -> JSONResponse:
        tag = require_slug(slug, "Tag")
        articles = service.get_articles_by_tag(tag, limit, page)
        return respond(
            {
                "tag": tag,
                "articles": [map_article(article) for article in articles],
                "count": len(articles),
            },
            cache_ttl=TAG_ARTICLES_TTL,
        )

    @router.get("/articles/{slug}/tags")
    def article_tags(slug: str) -> JSONResponse:
        """Tags do artigo; artigo sem tags devolve lista vazia, não 404."""

        article_slug = require_slug(slug, "Article")
        tags = service.article_tags(article_slug)
        return respond({"tags": [map_tag(tag) for tag in tags]}, cache_ttl=ARTICLE_TAGS_TTL)

    @router.get("/articles/{slug}/categories")
    def article_categories(slug: str) -> JSONResponse:
        article_slug = require_slug(slug, "Article")
        categories = service.article_categories(article_slug)
        return respond(
            {
                "categories": [
                    {
                        "name": category.name,
                        "slug": category.slug,
                        "color": category.color,
                        "articleCount": category.article_count,
                        "featuredArticles": [
                            map_featured(article) for article in category.featured_articles
                        ],
                    }
                    for category in categories
                ]
            },
            cache_ttl=ARTICLE_CATEGORIES_TTL,
        )

    @router.get("/articles/{slug}")
    def get_article(slug: str) -> JSONResponse:
        article = service.get_article_by_slug(require_slug(slug, "Article"))
        if article is None:
            raise NotFoundError.for_resource("Article")
        return respond(map_article_detail(article), cache_ttl=ARTICLE_TTL)

    @router.get("/tags")
    def list_tags() -> JSONResponse:
        """As 20 tags mais usadas com a quantidade de artigos."""

        tags = service.get_article_categories()
        if not tags:
            raise NotFoundError("No articles found to extract tags")
        return respond(
            [
                {
                    "id": tag.id,
                    "name": tag.name,
                    "slug": tag.slug,
                    "articleCount": tag.count,
                    "color": tag.color,
                }
                for tag in tags[:TOP_TAGS_LIMIT]
            ],
            cache_ttl=TAGS_TTL,
        )

    app.include_router(router)


__all__ = ["include_routes"]
