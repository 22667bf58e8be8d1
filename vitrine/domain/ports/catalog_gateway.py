"""Porta de acesso ao catálogo de produtos digitais."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from vitrine.domain.entities import Product


class CatalogGateway(ABC):
    """Define como a aplicação lista os produtos da loja."""

    @abstractmethod
    def list_products(self) -> Sequence[Product]:
        """Listar os produtos publicados no catálogo."""
