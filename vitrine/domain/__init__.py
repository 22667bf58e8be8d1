"""API pública do domínio da aplicação Vitrine.

O módulo centraliza entidades, erros e portas mais utilizados para que possam
ser importados diretamente de ``vitrine.domain``.
"""

from .entities import (
    Article,
    Author,
    Category,
    LatestArticle,
    Product,
    Tag,
    TagCount,
    TrendingArticle,
)
from .errors import (
    ApiError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    UpstreamUnavailable,
    ValidationError,
)
from .ports import ArticleFilter, CatalogGateway, ContentGateway

__all__ = [
    "ApiError",
    "Article",
    "ArticleFilter",
    "Author",
    "CatalogGateway",
    "Category",
    "ContentGateway",
    "ForbiddenError",
    "LatestArticle",
    "NotFoundError",
    "Product",
    "Tag",
    "TagCount",
    "TrendingArticle",
    "UnauthorizedError",
    "UpstreamUnavailable",
    "ValidationError",
]
