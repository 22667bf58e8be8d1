"""Entidades que representam artigos publicados no CMS."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Tuple

_WORDS_PER_MINUTE = 200
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class Tag:
    """Tag associada a um artigo; também usada como categoria."""

    name: str
    slug: str
    id: Optional[str] = None
    color: Optional[str] = None
    logo: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Tag":
        """Reconstrói a tag a partir do payload retornado pela API de conteúdo."""

        if not isinstance(data, Mapping):
            raise ValueError(f"invalid tag payload: {data!r}")
        name = str(data.get("name") or "").strip()
        if not name:
            raise ValueError("tag name cannot be empty")
        slug = data.get("slug") or slugify(name)
        return cls(
            name=name,
            slug=str(slug),
            id=str(data["id"]) if data.get("id") else str(slug),
            color=data.get("color"),
            logo=data.get("logo"),
        )

    def with_color(self, color: str) -> "Tag":
        """Retorna uma cópia com a cor informada quando a tag não possui uma."""

        if self.color:
            return self
        return Tag(
            name=self.name,
            slug=self.slug,
            id=self.id,
            color=color,
            logo=self.logo,
        )


@dataclass(frozen=True)
class Author:
    """Autor exibido junto ao artigo."""

    name: str
    image: Optional[str] = None


@dataclass(frozen=True)
class Article:
    """Artigo somente leitura obtido do CMS."""

    #: Identificador atribuído pelo CMS.
    id: str
    #: Identificador amigável utilizado nas URLs.
    slug: str
    #: Título exibido para o leitor.
    title: str
    #: Resumo curto utilizado em listagens.
    brief: str
    #: Endereço da imagem de capa.
    cover_image: str
    #: Instante de publicação, sempre com fuso horário.
    published_at: datetime
    #: Tags na ordem definida pelo autor.
    tags: Tuple[Tag, ...] = field(default_factory=tuple)
    #: Quantidade de visualizações informada pelo CMS.
    views: int = 0
    #: Quantidade de reações (curtidas) informada pelo CMS.
    likes: int = 0
    #: Conteúdo em markdown, quando solicitado ao CMS.
    content: Optional[str] = None
    #: Autor do artigo.
    author: Optional[Author] = None
    #: Tempo estimado de leitura em minutos.
    reading_time: int = 1

    @property
    def tag_slugs(self) -> frozenset[str]:
        return frozenset(tag.slug for tag in self.tags)

    def has_tag(self, slug: str) -> bool:
        return slug in self.tag_slugs


def slugify(value: str) -> str:
    """Converte um nome livre em slug separado por hífens."""

    return _WHITESPACE.sub("-", value.strip().lower())


def estimate_reading_time(markdown: Optional[str]) -> int:
    """Estima o tempo de leitura assumindo 200 palavras por minuto."""

    if not markdown:
        return 1
    words = len(_WHITESPACE.split(markdown.strip()))
    return max(1, round(words / _WORDS_PER_MINUTE))


def parse_timestamp(value: Any) -> datetime:
    """Interpreta datas ISO 8601 retornadas pela API, assumindo UTC quando ingênuas."""

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    else:
        raise ValueError(f"invalid timestamp: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def days_between(earlier: datetime, later: datetime) -> int:
    """Dias completos decorridos entre dois instantes."""

    return math.floor((later - earlier).total_seconds() / 86400)


__all__ = [
    "Article",
    "Author",
    "Tag",
    "days_between",
    "estimate_reading_time",
    "parse_timestamp",
    "slugify",
]
