"""README section templating between my-badges markers."""

from __future__ import annotations

from typing import Sequence

from ..constants import (
    DEFAULT_IMAGE_SIZE,
    README_END_MARKER,
    README_HEADER,
    README_START_MARKER,
    badge_page_path,
)
from ..models import Badge


def quote_attr(value: object) -> str:
    """Escape a value for use inside a double or single quoted HTML attribute."""
    return (
        str(value)
        .replace("&", "&amp;")
        .replace("'", "&apos;")
        .replace('"', "&quot;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace("\r\n", "&#13;")
        .replace("\r", "&#13;")
        .replace("\n", "&#13;")
    )


def render_thumbnail(badge: Badge, size: int) -> str:
    desc = quote_attr(badge.desc)
    return (
        f'<a href="{badge_page_path(badge.id)}">'
        f'<img src="{badge.image}" alt="{desc}" title="{desc}" width="{int(size)}">'
        "</a>"
    )


def render_readme(
    document: str, badges: Sequence[Badge], size: int = DEFAULT_IMAGE_SIZE
) -> str:
    """Replace the managed my-badges section; documents without markers are returned as is."""
    start = document.find(README_START_MARKER)
    if start == -1:
        return document
    end = document.find(README_END_MARKER, start + len(README_START_MARKER))
    if end == -1:
        return document

    after = end + len(README_END_MARKER)
    needs_newline = document[after:after + 1] != "\n"
    thumbnails = "\n".join(render_thumbnail(badge, size) for badge in badges)
    block = (
        f"{README_START_MARKER}\n"
        f"{README_HEADER}"
        f"{thumbnails}"
        f"\n{README_END_MARKER}"
    )
    if needs_newline:
        block += "\n"
    return document[:start] + block + document[after:]


__all__ = ["quote_attr", "render_readme", "render_thumbnail"]
