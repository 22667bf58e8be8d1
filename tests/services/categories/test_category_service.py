from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from vitrine.domain import Article, ArticleFilter, ContentGateway, Tag
from vitrine.domain.errors import NotFoundError
from vitrine.infrastructure.cache import CacheStore
from vitrine.services.articles.application import ArticleAggregationService
from vitrine.services.categories.application import CATEGORY_DESCRIPTIONS, CategoryService

REACT = Tag(name="React", slug="react")
CSS = Tag(name="CSS", slug="css", color="#ff00ff")
RUST = Tag(name="Rust", slug="rust")


class StaticGateway(ContentGateway):
    def __init__(self, articles: list[Article]) -> None:
        self.articles = articles

    def get_articles(self, article_filter: ArticleFilter):
        return list(self.articles)

    def get_article_tags(self, slug: str):
        return []

    def get_articles_by_category(self, slug: str, limit: int):
        return []


def _article(slug: str, *tags: Tag) -> Article:
    return Article(
        id=slug,
        slug=slug,
        title=slug.title(),
        brief="",
        cover_image="",
        published_at=datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(hours=len(slug)),
        tags=tags,
    )


def _service(articles: list[Article]) -> CategoryService:
    aggregation = ArticleAggregationService(StaticGateway(articles), CacheStore())
    return CategoryService(aggregation)


@pytest.fixture
def service() -> CategoryService:
    articles = [_article(f"react-{index}", REACT) for index in range(10)]
    articles += [_article("css-a", CSS, REACT), _article("css-b", CSS), _article("rust-a", RUST)]
    return _service(articles)


def test_list_categories_orders_by_article_count(service: CategoryService) -> None:
    categories = service.list_categories()

    assert [(category.slug, category.article_count) for category in categories] == [
        ("react", 11),
        ("css", 2),
        ("rust", 1),
    ]
    assert categories[0].description == CATEGORY_DESCRIPTIONS["react"]
    assert categories[2].description is None
    assert categories[1].color == "#ff00ff"
    assert all(category.featured_articles == () for category in categories)


def test_get_category_attaches_at_most_eight_featured_articles(service: CategoryService) -> None:
    category = service.get_category("react")

    assert category is not None
    assert category.article_count == 11
    assert len(category.featured_articles) == 8
    assert [article.slug for article in category.featured_articles][:2] == ["react-0", "react-1"]


def test_get_category_unknown_slug_returns_none(service: CategoryService) -> None:
    assert service.get_category("cobol") is None


def test_related_categories_exclude_current(service: CategoryService) -> None:
    related = service.related_categories("css", limit=4)

    assert [category.slug for category in related] == ["react", "rust"]
    assert [category.slug for category in service.related_categories("css", limit=1)] == ["react"]


def test_popular_limits_result(service: CategoryService) -> None:
    assert [category.slug for category in service.popular(2)] == ["react", "css"]


def test_popular_without_articles_is_not_found() -> None:
    with pytest.raises(NotFoundError, match="Categories not found"):
        _service([]).popular()


def test_category_articles(service: CategoryService) -> None:
    articles = service.category_articles("css", limit=10)

    assert [article.slug for article in articles] == ["css-a", "css-b"]
    with pytest.raises(NotFoundError, match='Category "cobol" not found'):
        service.category_articles("cobol")
