"""Modelos de resposta compartilhados entre as rotas da API."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vitrine.domain import (
    Article,
    Category,
    LatestArticle,
    Product,
    Tag,
    TagCount,
    TrendingArticle,
)


class ApiModel(BaseModel):
    """Base que publica os campos em camelCase, como consumido pelo front-end."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TagResponse(ApiModel):
    """Tag exibida junto aos artigos."""

    id: str | None = None
    name: str
    slug: str
    color: str | None = None
    logo: str | None = None


class AuthorResponse(ApiModel):
    name: str
    image: str | None = None


class ArticleResponse(ApiModel):
    """Representação pública de um artigo."""

    #: Identificador atribuído pelo CMS.
    id: str
    #: Identificador usado na URL do artigo.
    slug: str
    #: Título do artigo.
    title: str
    #: Resumo exibido nas listagens.
    brief: str
    #: URL da imagem de capa.
    cover_image: str
    #: Data de publicação em ISO 8601.
    published_at: str
    #: Tags na ordem definida no CMS.
    tags: list[TagResponse] = Field(default_factory=list)
    #: Visualizações registradas.
    views: int = 0
    #: Reações registradas.
    likes: int = 0
    #: Minutos estimados de leitura.
    reading_time: int = 1
    #: Autor, quando informado pelo CMS.
    author: AuthorResponse | None = None


class ArticleDetailResponse(ArticleResponse):
    """Artigo individual, acompanhado do conteúdo em markdown."""

    content: str = ""


class LatestArticleResponse(ArticleResponse):
    is_new: bool
    days_since_published: int


class TrendingArticleResponse(ArticleResponse):
    trending_score: float = Field(alias="trending_score")
    is_trending: bool = True


class TagCountResponse(ApiModel):
    """Tag distinta acompanhada da quantidade de artigos."""

    id: str
    name: str
    slug: str
    count: int
    color: str | None = None


class FeaturedArticleResponse(ApiModel):
    title: str
    slug: str
    cover_image: str


class CategoryResponse(ApiModel):
    """Categoria derivada das tags dos artigos."""

    name: str
    slug: str
    article_count: int
    color: str | None = None
    description: str | None = None
    featured_articles: list[ArticleResponse] = Field(default_factory=list)


class ProductResponse(ApiModel):
    """Produto digital publicado na loja."""

    id: str
    slug: str
    name: str
    description: str
    price: int
    formatted_price: str
    currency: str
    thumbnail_url: str | None = None
    url: str
    permalink: str
    tags: list[str] = Field(default_factory=list)
    sales_count: int = 0
    product_type: str
    level: str
    categories: list[str] = Field(default_factory=list)
    popular: bool = False


def map_tag(tag: Tag) -> TagResponse:
    return TagResponse(id=tag.id, name=tag.name, slug=tag.slug, color=tag.color, logo=tag.logo)


def _article_fields(article: Article) -> dict:
    return {
        "id": article.id,
        "slug": article.slug,
        "title": article.title,
        "brief": article.brief,
        "cover_image": article.cover_image,
        "published_at": article.published_at.isoformat(),
        "tags": [map_tag(tag) for tag in article.tags],
        "views": article.views,
        "likes": article.likes,
        "reading_time": article.reading_time,
        "author": (
            AuthorResponse(name=article.author.name, image=article.author.image)
            if article.author
            else None
        ),
    }


def map_article(article: Article) -> ArticleResponse:
    return ArticleResponse(**_article_fields(article))


def map_article_detail(article: Article) -> ArticleDetailResponse:
    return ArticleDetailResponse(**_article_fields(article), content=article.content or "")


def map_latest(item: LatestArticle) -> LatestArticleResponse:
    return LatestArticleResponse(
        **_article_fields(item.article),
        is_new=item.is_new,
        days_since_published=item.days_since_published,
    )


def map_trending(item: TrendingArticle) -> TrendingArticleResponse:
    return TrendingArticleResponse(
        **_article_fields(item.article),
        trending_score=item.trending_score,
        is_trending=item.is_trending,
    )


def map_tag_count(summary: TagCount) -> TagCountResponse:
    return TagCountResponse(
        id=summary.id,
        name=summary.name,
        slug=summary.slug,
        count=summary.count,
        color=summary.color,
    )


def map_featured(article: Article) -> FeaturedArticleResponse:
    return FeaturedArticleResponse(
        title=article.title, slug=article.slug, cover_image=article.cover_image
    )


def map_category(category: Category) -> CategoryResponse:
    return CategoryResponse(
        name=category.name,
        slug=category.slug,
        article_count=category.article_count,
        color=category.color,
        description=category.description,
        featured_articles=[map_article(article) for article in category.featured_articles],
    )


def map_product(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        slug=product.slug,
        name=product.name,
        description=product.description,
        price=product.price,
        formatted_price=product.formatted_price,
        currency=product.currency,
        thumbnail_url=product.thumbnail_url,
        url=product.url,
        permalink=product.permalink,
        tags=list(product.tags),
        sales_count=product.sales_count,
        product_type=product.product_type,
        level=product.level,
        categories=list(product.categories),
        popular=product.popular,
    )


__all__ = [
    "ApiModel",
    "ArticleDetailResponse",
    "ArticleResponse",
    "CategoryResponse",
    "FeaturedArticleResponse",
    "LatestArticleResponse",
    "ProductResponse",
    "TagCountResponse",
    "TagResponse",
    "TrendingArticleResponse",
    "map_article",
    "map_article_detail",
    "map_category",
    "map_featured",
    "map_latest",
    "map_product",
    "map_tag",
    "map_tag_count",
    "map_trending",
]
