from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from vitrine.domain import Product, Tag
from vitrine.domain.entities.article import (
    days_between,
    estimate_reading_time,
    parse_timestamp,
    slugify,
)
from vitrine.domain.entities.product import (
    categories_from_tags,
    generate_slug,
    level_from_tags,
    product_type_from_tags,
)
from vitrine.domain.tag_colors import PALETTE, TAG_COLORS, tag_color


def test_tag_from_mapping_derives_slug_and_id() -> None:
    tag = Tag.from_mapping({"name": "Clean Code"})

    assert tag.slug == "clean-code"
    assert tag.id == "clean-code"
    assert tag.color is None


def test_tag_from_mapping_rejects_empty_name() -> None:
    with pytest.raises(ValueError):
        Tag.from_mapping({"name": "  ", "slug": "x"})


def test_with_color_keeps_existing_color() -> None:
    assert Tag(name="A", slug="a", color="#111111").with_color("#222222").color == "#111111"
    assert Tag(name="A", slug="a").with_color("#222222").color == "#222222"


def test_tag_color_uses_known_colors_and_stable_palette() -> None:
    assert tag_color("Python") == TAG_COLORS["python"]
    assert tag_color("Clean Code") == TAG_COLORS["clean-code"]
    unknown = tag_color("Elixir")
    assert unknown in PALETTE
    assert tag_color("Elixir") == unknown
    assert unknown == PALETTE[sum(ord(char) for char in "elixir") % len(PALETTE)]


def test_slugify_and_reading_time() -> None:
    assert slugify("  Machine   Learning ") == "machine-learning"
    assert estimate_reading_time(None) == 1
    assert estimate_reading_time("word " * 600) == 3


@pytest.mark.parametrize(
    "value",
    ["2024-05-01T10:00:00Z", "2024-05-01T10:00:00.000Z", "2024-05-01T10:00:00"],
)
def test_parse_timestamp_always_returns_utc_aware(value: str) -> None:
    assert parse_timestamp(value) == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)


def test_parse_timestamp_rejects_empty() -> None:
    with pytest.raises(ValueError):
        parse_timestamp("")


def test_days_between_counts_full_days() -> None:
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)

    assert days_between(start, start + timedelta(days=6, hours=23)) == 6
    assert days_between(start, start + timedelta(days=7)) == 7


def test_product_from_mapping_derives_fields() -> None:
    product = Product.from_mapping(
        {
            "id": "1234567890abcdef",
            "name": "React & Next.js: The Guide!",
            "price": 2900,
            "formatted_price": "$29",
            "url": "https://shop.example.com/long",
            "short_url": "https://shop.example.com/l/guide",
            "permalink": "guide",
            "tags": ["course", "Beginner", "javascript"],
            "sales_count": 51,
        }
    )

    assert product.slug == "react-nextjs-the-guide-12345678"
    assert product.url == "https://shop.example.com/l/guide"
    assert product.product_type == "course"
    assert product.level == "Beginner"
    assert product.categories == ("JavaScript",)
    assert product.popular is True


def test_product_defaults() -> None:
    assert product_type_from_tags([]) == "ebook"
    assert level_from_tags(["misc"]) == "Intermediate"
    assert categories_from_tags(["", "   "]) == ()
    assert generate_slug("A" * 80, "abc") == "a" * 50 + "-abc"
