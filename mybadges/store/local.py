"""Filesystem store used for dry runs."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

from ..errors import RemoteReadError
from ..logging import get_logger
from ..models import ContentItem
from .base import ContentStore

logger = get_logger("store.local")


class LocalContentStore(ContentStore):
    """Mirrors repository paths under a local working directory."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    async def read(self, path: str) -> Optional[ContentItem]:
        return await asyncio.to_thread(self._read, path)

    async def write(self, path: str, content: str, revision: Optional[str] = None) -> Optional[str]:
        await asyncio.to_thread(self._write, path, content)
        logger.info("Skipped pushing %s (dryrun)", path)
        return None

    def resolve(self, path: str) -> Path:
        if self.is_readme(path) and self.root.is_dir():
            for candidate in sorted(self.root.iterdir()):
                if candidate.is_file() and candidate.name.lower() == path.lower():
                    return candidate
        return self.root / path

    def _read(self, path: str) -> Optional[ContentItem]:
        target = self.resolve(path)
        try:
            content = target.read_bytes().decode("utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise RemoteReadError(path, str(exc)) from exc
        return ContentItem(path=target.relative_to(self.root).as_posix(), content=content)

    def _write(self, path: str, content: str) -> None:
        target = self.resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content.encode("utf-8"))


__all__ = ["LocalContentStore"]
