"""Manifest serialization and per-badge page rendering."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Sequence

from jinja2 import Environment, FileSystemLoader

from ..constants import (
    DEFAULT_IMAGE_SIZE,
    MY_BADGES_JSON_PATH,
    PAGE_IMAGE_SIZE,
    PROJECT_URL,
    README_PATH,
    badge_page_path,
)
from ..models import Badge
from .readme import quote_attr, render_readme

_TEMPLATES_DIR = Path(__file__).with_name("templates")


def serialize_manifest(badges: Sequence[Badge]) -> str:
    """Serialize badges as the pretty-printed JSON manifest."""
    return json.dumps([badge.to_dict() for badge in badges], indent=2, ensure_ascii=False)


class PageRenderer:
    """Renders per-badge markdown pages from Jinja templates."""

    PAGE_TEMPLATE = "badge_page.md.j2"

    def __init__(self, templates_dir: Path | None = None) -> None:
        directories = [str(templates_dir)] if templates_dir else []
        if str(_TEMPLATES_DIR) not in directories:
            directories.append(str(_TEMPLATES_DIR))
        self._env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            keep_trailing_newline=False,
        )
        self._env.filters["quote_attr"] = quote_attr

    def render_page(self, badge: Badge) -> str:
        template = self._env.get_template(self.PAGE_TEMPLATE)
        return template.render(
            badge=badge.full(),
            width=PAGE_IMAGE_SIZE,
            project_url=PROJECT_URL,
        )


def build_uploads(
    readme: str,
    badges: Sequence[Badge],
    size: int = DEFAULT_IMAGE_SIZE,
    *,
    renderer: PageRenderer | None = None,
) -> Dict[str, str]:
    """Return desired content keyed by path for every generated artifact."""
    renderer = renderer or PageRenderer()
    uploads: Dict[str, str] = {MY_BADGES_JSON_PATH: serialize_manifest(badges)}
    rendered = render_readme(readme, badges, size)
    # An unchanged README has no managed section, or one that is already current.
    if rendered != readme:
        uploads[README_PATH] = rendered
    for badge in badges:
        uploads[badge_page_path(badge.id)] = renderer.render_page(badge)
    return uploads


__all__ = ["PageRenderer", "build_uploads", "serialize_manifest"]
