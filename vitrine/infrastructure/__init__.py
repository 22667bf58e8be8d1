"""Implementações concretas das portas do domínio.

Expõe o cache em memória e os clientes das APIs externas para que possam ser
importados diretamente de ``vitrine.infrastructure``.
"""

from .cache import CacheEntry, CacheStore
from .gumroad_client import GumroadCatalogClient
from .hashnode_client import HashnodeContentClient

__all__ = [
    "CacheEntry",
    "CacheStore",
    "GumroadCatalogClient",
    "HashnodeContentClient",
]
