"""Entidades de domínio do conteúdo e da loja."""
from .article import Article, Author, Tag
from .product import Product
from .views import Category, LatestArticle, TagCount, TrendingArticle

__all__ = [
    "Article",
    "Author",
    "Category",
    "LatestArticle",
    "Product",
    "Tag",
    "TagCount",
    "TrendingArticle",
]
