"""Casos de uso relacionados às categorias."""

from .category_service import CATEGORY_DESCRIPTIONS, CategoryService

__all__ = ["CATEGORY_DESCRIPTIONS", "CategoryService"]
