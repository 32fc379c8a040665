"""Read-diff-write synchronization of generated artifacts."""

from __future__ import annotations

import asyncio
from typing import List, Mapping

from .errors import RemoteReadError
from .logging import get_logger
from .models import ContentItem
from .store.base import ContentStore


class Synchronizer:
    """Writes desired content only when it differs from what the store holds."""

    def __init__(self, store: ContentStore) -> None:
        self.store = store
        self.logger = get_logger("sync")

    async def current(self, path: str) -> ContentItem:
        """Return the current item; absence and read failures yield empty content."""
        try:
            item = await self.store.read(path)
        except RemoteReadError as exc:
            self.logger.warning("Treating %s as empty: %s", path, exc)
            item = None
        return item or ContentItem(path=path, content="")

    async def sync(self, path: str, desired: str) -> bool:
        """Upsert one path; return True when a write happened."""
        current = await self.current(path)
        if desired == current.content:
            self.logger.debug("%s is up to date", path)
            return False
        await self.store.write(current.path, desired, current.revision)
        return True

    async def sync_all(self, uploads: Mapping[str, str]) -> List[str]:
        """Sync every path concurrently and return the paths that were written."""
        paths = list(uploads)
        results = await asyncio.gather(*(self.sync(path, uploads[path]) for path in paths))
        written = [path for path, wrote in zip(paths, results) if wrote]
        self.logger.info("Synced %d files, %d written", len(paths), len(written))
        return written


__all__ = ["Synchronizer"]
