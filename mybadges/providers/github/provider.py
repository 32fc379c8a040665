"""GitHub implementation of the provider contract."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from ...constants import DEFAULT_IMAGE_SIZE, MY_BADGES_JSON_PATH, README_PATH
from ...logging import get_logger
from ...models import Badge, UserSnapshot, load_badges
from ...render.pages import PageRenderer, build_uploads
from ...store.base import ContentStore
from ...store.local import LocalContentStore
from ...sync import Synchronizer
from .client import GitHubClient
from .collect import collect
from .store import GitHubContentStore

logger = get_logger("provider.github")


class GitHubProvider:
    """Collects data through the REST API and publishes into a repository."""

    def __init__(
        self,
        client_factory: Callable[[Optional[str]], GitHubClient] | None = None,
        *,
        renderer: PageRenderer | None = None,
    ) -> None:
        self._client_factory = client_factory or GitHubClient
        self._renderer = renderer

    async def get_data(self, *, user: str, token: Optional[str]) -> UserSnapshot:
        return await collect(self._client_factory(token), user)

    async def get_badges(
        self,
        *,
        user: str,
        token: Optional[str],
        owner: Optional[str] = None,
        repo: Optional[str] = None,
        dryrun: bool = False,
        cwd: Optional[Path] = None,
    ) -> List[Badge]:
        store = self.store(
            token=token, owner=owner or user, repo=repo or user, dryrun=dryrun, cwd=cwd
        )
        item = await store.read(MY_BADGES_JSON_PATH)
        if item is None:
            logger.info("No published badges at %s", MY_BADGES_JSON_PATH)
            return []
        try:
            return load_badges(json.loads(item.content))
        except ValueError as exc:
            logger.warning("Ignoring unreadable %s: %s", item.path, exc)
            return []

    async def update_badges(
        self,
        *,
        user: str,
        badges: Sequence[Badge],
        token: Optional[str],
        owner: Optional[str] = None,
        repo: Optional[str] = None,
        size: int = DEFAULT_IMAGE_SIZE,
        dryrun: bool = False,
        cwd: Optional[Path] = None,
        committer_name: Optional[str] = None,
        committer_email: Optional[str] = None,
    ) -> List[str]:
        store = self.store(
            token=token,
            owner=owner or user,
            repo=repo or user,
            dryrun=dryrun,
            cwd=cwd,
            committer_name=committer_name,
            committer_email=committer_email,
        )
        synchronizer = Synchronizer(store)
        readme = await synchronizer.current(README_PATH)
        uploads = build_uploads(readme.content, badges, size, renderer=self._renderer)
        return await synchronizer.sync_all(uploads)

    def store(
        self,
        *,
        token: Optional[str],
        owner: str,
        repo: str,
        dryrun: bool,
        cwd: Optional[Path],
        committer_name: Optional[str] = None,
        committer_email: Optional[str] = None,
    ) -> ContentStore:
        if dryrun:
            if cwd is None:
                raise ValueError("Dry runs need a working directory")
            return LocalContentStore(cwd)
        return GitHubContentStore(
            self._client_factory(token),
            owner,
            repo,
            committer_name=committer_name,
            committer_email=committer_email,
        )


__all__ = ["GitHubProvider"]
