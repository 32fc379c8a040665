"""Renderers for the README section, badge pages and the manifest."""

from .pages import PageRenderer, build_uploads, serialize_manifest
from .readme import quote_attr, render_readme

__all__ = ["PageRenderer", "build_uploads", "quote_attr", "render_readme", "serialize_manifest"]
