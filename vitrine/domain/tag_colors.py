"""Cores de exibição para tags sem cor definida no CMS."""
from __future__ import annotations

from .entities.article import slugify

TAG_COLORS: dict[str, str] = {
    "react": "#61DAFB",
    "javascript": "#F7DF1E",
    "typescript": "#3178C6",
    "nextjs": "#000000",
    "css": "#1572B6",
    "html": "#E34F26",
    "nodejs": "#339933",
    "graphql": "#E10098",
    "aws": "#FF9900",
    "testing": "#FF6C37",
    "clean-code": "#4285F4",
    "performance": "#FF4500",
    "docker": "#2496ED",
    "kubernetes": "#326CE5",
    "golang": "#00ADD8",
    "python": "#3776AB",
    "machinelearning": "#FF6F00",
    "machine-learning": "#FF6F00",
    "database": "#4479A1",
    "cloud": "#0089D6",
    "security": "#EE0000",
    "redux": "#764ABC",
    "software-architecture": "#7B1FA2",
}

PALETTE: tuple[str, ...] = (
    "#FF2D55",
    "#007AFF",
    "#34C759",
    "#AF52DE",
    "#FF9500",
    "#5AC8FA",
    "#ff4b5c",
    "#6c5ce7",
    "#00b4d8",
    "#00917c",
    "#f72585",
)


def tag_color(name: str) -> str:
    """Retorna a cor conhecida da tag ou uma cor estável da paleta."""

    slug = slugify(name)
    known = TAG_COLORS.get(slug)
    if known:
        return known
    return PALETTE[sum(ord(char) for char in slug) % len(PALETTE)]


__all__ = ["PALETTE", "TAG_COLORS", "tag_color"]
