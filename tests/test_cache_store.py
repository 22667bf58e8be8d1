"""Testes do armazenamento em memória com TTL."""
from __future__ import annotations

import pytest

from vitrine.infrastructure.cache import CacheEntry, CacheStore


class FakeClock:
    """Relógio controlado manualmente pelos testes."""

    def __init__(self, now: float = 1_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> CacheStore:
    return CacheStore(clock=clock)


@pytest.mark.parametrize("ttl", [1, 60, 300, 1800])
def test_read_before_expiry_hits_and_strict_read_after_expiry_misses(
    store: CacheStore, clock: FakeClock, ttl: int
) -> None:
    store.set("articles", ["a"], ttl)

    clock.advance(ttl - 1)
    assert store.get("articles") == ["a"]

    clock.advance(2)
    assert store.get("articles") is None
    assert store.get_stale_ok("articles") == ["a"]


def test_missing_key_is_a_miss_in_both_modes(store: CacheStore) -> None:
    assert store.get("nothing") is None
    assert store.get_stale_ok("nothing") is None


def test_set_replaces_entry_with_new_timestamp(store: CacheStore, clock: FakeClock) -> None:
    first = store.set("key", "old", 10)
    clock.advance(8)
    second = store.set("key", "new", 10)

    assert first is not second
    assert first.value == "old"
    assert second.created_at == first.created_at + 8
    clock.advance(5)
    assert store.get("key") == "new"


def test_invalidate_removes_entry_immediately(store: CacheStore) -> None:
    store.set("key", "value", 60)

    store.invalidate("key")
    store.invalidate("unknown")

    assert store.get_stale_ok("key") is None


def test_clear_drops_every_entry(store: CacheStore) -> None:
    store.set("a", 1, 60)
    store.set("b", 2, 60)

    store.clear()

    assert store.keys() == []


def test_entry_exposes_expiration(store: CacheStore, clock: FakeClock) -> None:
    entry = store.set("key", "value", 30)

    assert isinstance(entry, CacheEntry)
    assert entry.expires_at == clock.now + 30
    assert store.entry("key") == entry
