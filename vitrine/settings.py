"""Configurações compartilhadas carregadas a partir de variáveis de ambiente."""
from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_API_BIND_HOST = "0.0.0.0"
_DEFAULT_API_PORT = 8000
_DEFAULT_HASHNODE_API_URL = "https://gql.hashnode.com"
_DEFAULT_GUMROAD_API_URL = "https://api.gumroad.com"
_DEFAULT_UPSTREAM_TIMEOUT = 10.0
_DEFAULT_ARTICLES_CACHE_TTL = 300
_DEFAULT_PRODUCTS_CACHE_TTL = 300


def _optional(name: str) -> str | None:
    value = os.getenv(name, "").strip()
    return value or None


@lru_cache(maxsize=None)
def get_api_port() -> int:
    """Retorna a porta configurada para expor a API."""

    return int(os.getenv("VITRINE_API_PORT", os.getenv("PORT", _DEFAULT_API_PORT)))


@lru_cache(maxsize=None)
def get_api_bind_host() -> str:
    """Retorna o host utilizado pelo Uvicorn para escutar conexões."""

    return os.getenv("VITRINE_API_BIND_HOST", _DEFAULT_API_BIND_HOST)


@lru_cache(maxsize=None)
def get_hashnode_api_url() -> str:
    """Retorna o endpoint GraphQL do CMS."""

    return os.getenv("VITRINE_HASHNODE_API_URL", _DEFAULT_HASHNODE_API_URL)


@lru_cache(maxsize=None)
def get_hashnode_host() -> str:
    """Retorna o host da publicação no CMS.

    Quando ``VITRINE_HASHNODE_HOST`` não é informado, o host é montado a partir
    do usuário no formato ``<usuario>.hashnode.dev``.
    """

    host = _optional("VITRINE_HASHNODE_HOST")
    if host:
        return host
    username = os.getenv("VITRINE_HASHNODE_USERNAME", "").strip()
    return f"{username}.hashnode.dev"


@lru_cache(maxsize=None)
def get_hashnode_api_key() -> str | None:
    return _optional("VITRINE_HASHNODE_API_KEY")


@lru_cache(maxsize=None)
def get_gumroad_api_url() -> str:
    return os.getenv("VITRINE_GUMROAD_API_URL", _DEFAULT_GUMROAD_API_URL)


@lru_cache(maxsize=None)
def get_gumroad_access_token() -> str | None:
    return _optional("VITRINE_GUMROAD_ACCESS_TOKEN")


@lru_cache(maxsize=None)
def get_upstream_timeout() -> float:
    """Tempo máximo, em segundos, das chamadas às APIs externas."""

    return float(os.getenv("VITRINE_UPSTREAM_TIMEOUT", _DEFAULT_UPSTREAM_TIMEOUT))


@lru_cache(maxsize=None)
def get_articles_cache_ttl() -> int:
    """TTL do cache de artigos no servidor, em segundos."""

    return int(os.getenv("VITRINE_ARTICLES_CACHE_TTL", _DEFAULT_ARTICLES_CACHE_TTL))


@lru_cache(maxsize=None)
def get_products_cache_ttl() -> int:
    return int(os.getenv("VITRINE_PRODUCTS_CACHE_TTL", _DEFAULT_PRODUCTS_CACHE_TTL))


@lru_cache(maxsize=None)
def get_cors_origins() -> tuple[str, ...]:
    """Origens liberadas no CORS, separadas por vírgula."""

    raw = os.getenv("VITRINE_CORS_ORIGINS", "*")
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or ("*",)


@lru_cache(maxsize=None)
def get_log_level() -> str:
    return os.getenv("VITRINE_LOG_LEVEL", "INFO").upper()


__all__ = [
    "get_api_bind_host",
    "get_api_port",
    "get_articles_cache_ttl",
    "get_cors_origins",
    "get_gumroad_access_token",
    "get_gumroad_api_url",
    "get_hashnode_api_key",
    "get_hashnode_api_url",
    "get_hashnode_host",
    "get_log_level",
    "get_products_cache_ttl",
    "get_upstream_timeout",
]
