"""Achievement badges for GitHub profiles."""

from .models import Badge, ContentItem, PresentationOptions
from .presentation import present
from .render.readme import render_readme
from .sync import Synchronizer

__version__ = "0.1.0"

__all__ = [
    "Badge",
    "ContentItem",
    "PresentationOptions",
    "Synchronizer",
    "present",
    "render_readme",
]
