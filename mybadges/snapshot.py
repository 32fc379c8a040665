"""Loads the user data snapshot and the previously published badges."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .errors import DataNotFound, MissingIdentity
from .logging import get_logger
from .models import Badge, UserSnapshot
from .providers import Provider


@dataclass
class Snapshot:
    """Inputs of one presentation run."""

    data: UserSnapshot
    badges: List[Badge]


class SnapshotLoader:
    """Obtains snapshots from a data file or the provider, caching fresh data."""

    def __init__(self, provider: Provider, cwd: Path) -> None:
        self.provider = provider
        self.cwd = Path(cwd)
        self.logger = get_logger("snapshot")

    async def load_data(
        self,
        *,
        data_path: str = "",
        user: Optional[str] = None,
        token: Optional[str] = None,
    ) -> UserSnapshot:
        if data_path:
            path = self.cwd / data_path
            if not path.is_file():
                raise DataNotFound(data_path)
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
            return json.loads(text)

        if not user:
            raise MissingIdentity()

        data = await self.provider.get_data(user=user, token=token)
        await asyncio.to_thread(self._cache, user, data)
        return data

    async def load_published(
        self,
        *,
        user: Optional[str],
        owner: Optional[str],
        repo: Optional[str],
        token: Optional[str] = None,
        dryrun: bool = False,
    ) -> List[Badge]:
        if not (owner and repo):
            return []
        return await self.provider.get_badges(
            user=user or owner,
            token=token,
            owner=owner,
            repo=repo,
            dryrun=dryrun,
            cwd=self.cwd,
        )

    async def load(
        self,
        *,
        data_path: str = "",
        user: Optional[str] = None,
        token: Optional[str] = None,
        owner: Optional[str] = None,
        repo: Optional[str] = None,
        dryrun: bool = False,
    ) -> Snapshot:
        data = await self.load_data(data_path=data_path, user=user, token=token)
        badges = await self.load_published(
            user=user, owner=owner, repo=repo, token=token, dryrun=dryrun
        )
        return Snapshot(data=data, badges=badges)

    def cache_path(self, user: str) -> Path:
        return self.cwd / "data" / f"{user}.json"

    def _cache(self, user: str, data: UserSnapshot) -> None:
        path = self.cache_path(user)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as exc:
            self.logger.warning("Could not cache data for %s at %s: %s", user, path, exc)


__all__ = ["Snapshot", "SnapshotLoader"]
