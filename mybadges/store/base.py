"""Content store contract shared by the remote and dry-run adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..constants import README_PATH
from ..models import ContentItem


class ContentStore(ABC):
    """Reads and writes single content items addressed by path."""

    @staticmethod
    def is_readme(path: str) -> bool:
        return path.lower() == README_PATH

    @abstractmethod
    async def read(self, path: str) -> Optional[ContentItem]:
        """Return the current item, or None when nothing exists at path.

        Failures other than absence raise RemoteReadError.
        """

    @abstractmethod
    async def write(self, path: str, content: str, revision: Optional[str] = None) -> Optional[str]:
        """Store content at path, guarded by revision, and return the new revision."""


__all__ = ["ContentStore"]
