"""Cache de artigos e projeções derivadas (por tag, recentes, em alta)."""
from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, Optional, Sequence

from vitrine.domain import (
    Article,
    ArticleFilter,
    ContentGateway,
    LatestArticle,
    Tag,
    TagCount,
    TrendingArticle,
)
from vitrine.domain.entities.article import days_between
from vitrine.domain.errors import UpstreamUnavailable, ValidationError
from vitrine.domain.tag_colors import tag_color
from vitrine.infrastructure.cache import CacheStore

ALL_ARTICLES_KEY = "articles:all"
ARTICLE_TAGS_KEY = "article-tags:{slug}"
ARTICLE_TAGS_TTL = 3600

TRENDING_JITTER_RATIO = 0.2
LIKE_WEIGHT = 5
TRENDING_PERIODS = {"7d": 7, "30d": 30, "all": None}

RefreshRunner = Callable[[Callable[[], None]], None]


def _run_in_daemon_thread(task: Callable[[], None]) -> None:
    threading.Thread(target=task, name="vitrine-articles-refresh", daemon=True).start()


def trending_score(article: Article) -> float:
    return (article.views + article.likes * LIKE_WEIGHT) / 100


def jitter_bands(
    articles: Sequence[Article], ratio: float = TRENDING_JITTER_RATIO
) -> list[list[Article]]:
    """Agrupa artigos já ordenados por visualizações em faixas de proximidade.

    Cada faixa começa no artigo com mais visualizações ainda não agrupado e
    reúne os seguintes cuja diferença para ele fica abaixo de ``ratio``. Dentro
    de uma faixa qualquer par difere menos de ``ratio`` do maior valor, então
    embaralhar a faixa nunca inverte artigos separados por uma diferença maior.
    """

    bands: list[list[Article]] = []
    for article in articles:
        if bands:
            leader = bands[-1][0].views
            if leader - article.views < max(leader, 1) * ratio:
                bands[-1].append(article)
                continue
        bands.append([article])
    return bands


@dataclass(frozen=True)
class ArticleCategory:
    """Tag de um artigo com contagem e artigos de destaque da categoria."""

    name: str
    slug: str
    color: str
    article_count: int
    featured_articles: tuple[Article, ...]


class ArticleAggregationService:
    """Mantém a coleção completa de artigos em cache e calcula as projeções.

    É o único escritor das chaves de artigos no ``CacheStore``. As projeções
    não são armazenadas: são recalculadas a cada chamada a partir da coleção
    em cache.
    """

    def __init__(
        self,
        gateway: ContentGateway,
        cache: CacheStore,
        *,
        ttl_seconds: float = 300,
        rng: random.Random | None = None,
        refresh_runner: RefreshRunner | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._gateway = gateway
        self._cache = cache
        self._ttl = ttl_seconds
        self._rng = rng or random.Random()
        self._refresh_runner = refresh_runner or _run_in_daemon_thread
        self._refresh_lock = threading.Lock()
        self._refreshing = False
        self._log = logger or logging.getLogger("vitrine.articles")

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def fetch_and_cache_all(self, force_refresh: bool = False) -> tuple[Article, ...]:
        """Retorna a coleção completa, consultando o CMS quando necessário.

        Sem ``force_refresh`` uma entrada válida é devolvida sem acessar o CMS.
        Se o CMS falhar, a última coleção conhecida é servida mesmo expirada;
        ``UpstreamUnavailable`` só é propagado quando não há nada em cache.
        """

        if not force_refresh:
            cached = self._cache.get(ALL_ARTICLES_KEY)
            if cached is not None:
                return cached

        try:
            fetched = tuple(self._gateway.get_articles(ArticleFilter()))
        except UpstreamUnavailable as exc:
            stale = self._cache.get_stale_ok(ALL_ARTICLES_KEY)
            if stale is None:
                self._log.error("CMS indisponível e nenhum artigo em cache: %s", exc)
                raise
            self._log.warning(
                "CMS indisponível, servindo %d artigos em cache: %s", len(stale), exc
            )
            return stale

        if not fetched:
            stale = self._cache.get_stale_ok(ALL_ARTICLES_KEY)
            self._log.warning("CMS retornou uma coleção vazia de artigos")
            return stale if stale is not None else ()

        self._cache.set(ALL_ARTICLES_KEY, fetched, self._ttl)
        self._log.info("%d artigos armazenados em cache por %ss", len(fetched), self._ttl)
        return fetched

    def current_articles(self) -> tuple[Article, ...]:
        """Leitura com revalidação em segundo plano.

        Entrada válida é devolvida diretamente; entrada expirada é devolvida e
        dispara uma atualização destacada (no máximo uma por vez); sem entrada
        a busca é síncrona.
        """

        fresh = self._cache.get(ALL_ARTICLES_KEY)
        if fresh is not None:
            return fresh
        stale = self._cache.get_stale_ok(ALL_ARTICLES_KEY)
        if stale is None:
            return self.fetch_and_cache_all()
        self._schedule_refresh()
        return stale

    def _schedule_refresh(self) -> None:
        with self._refresh_lock:
            if self._refreshing:
                return
            self._refreshing = True
        try:
            self._refresh_runner(self._background_refresh)
        except Exception:
            with self._refresh_lock:
                self._refreshing = False
            raise

    def _background_refresh(self) -> None:
        try:
            self.fetch_and_cache_all(force_refresh=True)
        except UpstreamUnavailable:
            self._log.warning("Atualização em segundo plano dos artigos falhou")
        finally:
            with self._refresh_lock:
                self._refreshing = False

    def get_article_by_slug(self, slug: str) -> Optional[Article]:
        for article in self.current_articles():
            if article.slug == slug:
                return article
        return None

    def get_articles_by_tag(
        self, tag_slug: str, limit: int = 20, page: int = 1
    ) -> list[Article]:
        """Filtra artigos com a tag preservando a ordem original da coleção."""

        if limit < 0 or page < 1:
            raise ValidationError("limit must be >= 0 and page >= 1")
        filtered = [article for article in self.current_articles() if article.has_tag(tag_slug)]
        start = (page - 1) * limit
        return filtered[start : start + limit]

    def get_article_categories(self) -> list[TagCount]:
        """Tags distintas dos artigos em cache, ordenadas pela quantidade de artigos."""

        return _count_tags(self.current_articles())

    def latest(
        self,
        limit: int = 10,
        now: datetime | None = None,
        articles: Sequence[Article] | None = None,
    ) -> list[LatestArticle]:
        """Artigos mais recentes anotados com a idade em dias.

        ``articles`` permite calcular a projeção sobre uma leitura já feita da
        coleção; sem ele a coleção em cache é consultada.
        """

        reference = now or datetime.now(timezone.utc)
        ordered = sorted(
            self._snapshot(articles), key=lambda article: article.published_at, reverse=True
        )
        return [
            LatestArticle(
                article=article,
                days_since_published=days_between(article.published_at, reference),
            )
            for article in ordered[: max(limit, 0)]
        ]

    def trending(
        self, limit: int = 10, articles: Sequence[Article] | None = None
    ) -> list[TrendingArticle]:
        """Artigos com mais visualizações, com ordem variável dentro da faixa de 20%."""

        ordered = sorted(
            self._snapshot(articles),
            key=lambda article: (article.views, trending_score(article)),
            reverse=True,
        )
        ranked: list[Article] = []
        for band in jitter_bands(ordered):
            self._rng.shuffle(band)
            ranked.extend(band)
        return [
            TrendingArticle(article=article, trending_score=trending_score(article))
            for article in ranked[: max(limit, 0)]
        ]

    def trending_tags(
        self,
        limit: int = 10,
        period: str = "30d",
        now: datetime | None = None,
        articles: Sequence[Article] | None = None,
    ) -> list[TagCount]:
        """Tags mais usadas nos artigos publicados dentro do período."""

        if period not in TRENDING_PERIODS:
            raise ValidationError(
                f"period must be one of: {', '.join(TRENDING_PERIODS)}"
            )
        days = TRENDING_PERIODS[period]
        selected: Iterable[Article] = self._snapshot(articles)
        if days is not None:
            cutoff = (now or datetime.now(timezone.utc)) - timedelta(days=days)
            selected = [article for article in selected if article.published_at >= cutoff]
        return _count_tags(selected)[: max(limit, 0)]

    def _snapshot(self, articles: Sequence[Article] | None) -> Sequence[Article]:
        return self.current_articles() if articles is None else articles

    def article_tags(self, slug: str) -> list[Tag]:
        """Tags de um artigo, com cor garantida; lista vazia quando não há tags."""

        key = ARTICLE_TAGS_KEY.format(slug=slug)
        cached = self._cache.get(key)
        if cached is not None:
            return list(cached)

        article = self.get_article_by_slug(slug)
        tags: Sequence[Tag] = article.tags if article else ()
        if not tags:
            tags = self._gateway.get_article_tags(slug)
        colored = tuple(tag.with_color(tag_color(tag.name)) for tag in tags)
        if colored:
            self._cache.set(key, colored, ARTICLE_TAGS_TTL)
        return list(colored)

    def article_categories(self, slug: str) -> list[ArticleCategory]:
        """Trata as tags do artigo como categorias e anexa artigos relacionados."""

        categories: list[ArticleCategory] = []
        for tag in self.article_tags(slug):
            related = self._gateway.get_articles_by_category(tag.slug, 3)
            categories.append(
                ArticleCategory(
                    name=tag.name,
                    slug=tag.slug,
                    color=tag.color or tag_color(tag.name),
                    article_count=len(related),
                    featured_articles=tuple(related[:2]),
                )
            )
        return categories


def _count_tags(articles: Iterable[Article]) -> list[TagCount]:
    counts: dict[str, int] = {}
    first_seen: dict[str, Tag] = {}
    for article in articles:
        for tag in article.tags:
            if tag.slug not in first_seen:
                first_seen[tag.slug] = tag
            counts[tag.slug] = counts.get(tag.slug, 0) + 1
    summaries = [
        TagCount(
            id=tag.id or tag.slug,
            name=tag.name,
            slug=tag.slug,
            count=counts[tag.slug],
            color=tag.color or tag_color(tag.name),
        )
        for tag in first_seen.values()
    ]
    summaries.sort(key=lambda summary: summary.count, reverse=True)
    return summaries


__all__ = [
    "ALL_ARTICLES_KEY",
    "ArticleAggregationService",
    "ArticleCategory",
    "jitter_bands",
    "trending_score",
]
