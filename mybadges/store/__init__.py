"""Content store adapters; the GitHub-backed store lives in providers.github."""

from .base import ContentStore
from .local import LocalContentStore

__all__ = ["ContentStore", "LocalContentStore"]
