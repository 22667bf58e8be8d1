"""Casos de uso da loja."""

from .product_service import ALL_PRODUCTS_KEY, ProductService

__all__ = ["ALL_PRODUCTS_KEY", "ProductService"]
