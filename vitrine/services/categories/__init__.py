"""Categories service dependency container."""

from .container import CategoriesContainer, build_categories_container

__all__ = ["CategoriesContainer", "build_categories_container"]
