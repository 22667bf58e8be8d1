"""Portas que conectam o domínio aos serviços externos."""
from .catalog_gateway import CatalogGateway
from .content_gateway import ArticleFilter, ContentGateway

__all__ = ["ArticleFilter", "CatalogGateway", "ContentGateway"]
