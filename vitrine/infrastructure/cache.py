"""Armazenamento em memória com expiração por TTL."""
from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """Valor armazenado junto ao instante de criação e ao TTL."""

    key: str
    value: T
    created_at: float
    ttl_seconds: float

    @property
    def expires_at(self) -> float:
        return self.created_at + self.ttl_seconds

    def is_fresh(self, now: float) -> bool:
        """Indica se a entrada ainda não expirou no instante informado."""

        return now <= self.expires_at


class CacheStore:
    """Mantém valores compartilhados por todo o processo.

    Não há limite de tamanho nem política de descarte além do TTL. O lock
    protege apenas o dicionário interno: escritas concorrentes para a mesma
    chave não são coordenadas e a última ``set`` concluída prevalece.
    """

    def __init__(self, *, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or time.time
        """Fonte de tempo em segundos; substituível nos testes."""

        self._lock = threading.Lock()
        """Garante acesso exclusivo ao dicionário de entradas."""

        self._entries: dict[str, CacheEntry[Any]] = {}
        """Entradas indexadas pela chave de cache."""

    def now(self) -> float:
        return self._clock()

    def get(self, key: str) -> Optional[Any]:
        """Retorna o valor somente quando a entrada existe e não expirou."""

        entry = self.entry(key)
        if entry is None or not entry.is_fresh(self._clock()):
            return None
        return entry.value

    def get_stale_ok(self, key: str) -> Optional[Any]:
        """Retorna o valor da entrada existente, mesmo que expirada."""

        entry = self.entry(key)
        return entry.value if entry is not None else None

    def entry(self, key: str) -> Optional[CacheEntry[Any]]:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, value: Any, ttl_seconds: float) -> CacheEntry[Any]:
        """Substitui incondicionalmente a entrada da chave por uma nova."""

        entry = CacheEntry(
            key=key,
            value=value,
            created_at=self._clock(),
            ttl_seconds=ttl_seconds,
        )
        with self._lock:
            self._entries[key] = entry
        return entry

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        """Remove todas as entradas; usado no encerramento do processo."""

        with self._lock:
            self._entries.clear()


__all__ = ["CacheEntry", "CacheStore"]
