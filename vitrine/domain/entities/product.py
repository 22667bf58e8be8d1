"""Entidade que representa um produto digital da loja."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Tuple

_NON_SLUG_CHARS = re.compile(r"[^\w\s-]")
_WHITESPACE = re.compile(r"\s+")

_PRODUCT_TYPES = {
    "ebook": "ebook",
    "book": "ebook",
    "software": "software",
    "tool": "tool",
    "course": "course",
    "template": "template",
}
_LEVELS = ("beginner", "intermediate", "advanced")
_KNOWN_CATEGORIES = (
    "Programming",
    "Web Development",
    "JavaScript",
    "Tools",
    "Software",
    "Design",
    "UI/UX",
    "Mobile",
    "Backend",
    "Frontend",
    "Clean Code",
)
_POPULAR_SALES_THRESHOLD = 50


@dataclass(frozen=True)
class Product:
    """Produto publicado no catálogo de comércio."""

    #: Identificador atribuído pelo catálogo.
    id: str
    #: Identificador amigável derivado do nome e do id.
    slug: str
    #: Nome comercial do produto.
    name: str
    #: Descrição em HTML ou texto.
    description: str
    #: Preço em centavos.
    price: int
    #: Preço formatado pelo catálogo.
    formatted_price: str
    #: Código da moeda.
    currency: str
    #: URL da miniatura.
    thumbnail_url: Optional[str]
    #: URL pública de compra.
    url: str
    #: Permalink curto do catálogo.
    permalink: str
    #: Tags livres cadastradas no catálogo.
    tags: Tuple[str, ...] = field(default_factory=tuple)
    #: Quantidade de vendas reportada.
    sales_count: int = 0
    #: Tipo inferido das tags (ebook, software, ...).
    product_type: str = "ebook"
    #: Nível inferido das tags.
    level: str = "Intermediate"
    #: Categorias conhecidas encontradas nas tags.
    categories: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def popular(self) -> bool:
        return self.sales_count > _POPULAR_SALES_THRESHOLD

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Product":
        """Normaliza o payload do catálogo derivando tipo, nível e categorias."""

        product_id = str(data["id"])
        name = str(data.get("name") or "")
        tags = tuple(str(tag) for tag in data.get("tags") or ())
        return cls(
            id=product_id,
            slug=data.get("slug") or generate_slug(name, product_id),
            name=name,
            description=str(data.get("description") or ""),
            price=int(data.get("price") or 0),
            formatted_price=str(data.get("formatted_price") or ""),
            currency=str(data.get("currency") or "usd"),
            thumbnail_url=data.get("thumbnail_url"),
            url=str(data.get("short_url") or data.get("url") or ""),
            permalink=str(data.get("custom_permalink") or data.get("permalink") or ""),
            tags=tags,
            sales_count=int(data.get("sales_count") or 0),
            product_type=product_type_from_tags(tags),
            level=level_from_tags(tags),
            categories=categories_from_tags(tags),
        )


def generate_slug(name: str, product_id: str) -> str:
    """Gera ``<nome-normalizado>-<8 primeiros caracteres do id>``."""

    name_slug = _WHITESPACE.sub("-", _NON_SLUG_CHARS.sub("", name.lower()))[:50]
    return f"{name_slug}-{product_id[:8]}"


def product_type_from_tags(tags: Iterable[str]) -> str:
    for tag in tags:
        product_type = _PRODUCT_TYPES.get(tag.lower())
        if product_type:
            return product_type
    return "ebook"


def level_from_tags(tags: Iterable[str]) -> str:
    for tag in tags:
        if tag.lower() in _LEVELS:
            return tag
    return "Intermediate"


def categories_from_tags(tags: Iterable[str]) -> Tuple[str, ...]:
    """Mapeia tags livres para a lista fechada de categorias da loja."""

    categories: list[str] = []
    for tag in tags:
        if not tag.strip():
            continue
        formatted = " ".join(word.capitalize() for word in tag.split(" "))
        if formatted in _KNOWN_CATEGORIES:
            categories.append(formatted)
            continue
        lowered = tag.lower()
        for category in _KNOWN_CATEGORIES:
            candidate = category.lower()
            if candidate == formatted.lower() or candidate in lowered or lowered in candidate:
                categories.append(category)
                break
    return tuple(categories)


__all__ = [
    "Product",
    "categories_from_tags",
    "generate_slug",
    "level_from_tags",
    "product_type_from_tags",
]
