"""Data providers that collect snapshots and publish badges."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from ..models import Badge, UserSnapshot


class Provider(Protocol):
    """Contract for fetching user data and publishing badges to a repository."""

    async def get_data(self, *, user: str, token: Optional[str]) -> UserSnapshot:
        ...

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
        ...

    async def update_badges(
        self,
        *,
        user: str,
        badges: Sequence[Badge],
        token: Optional[str],
        owner: Optional[str] = None,
        repo: Optional[str] = None,
        size: int = 64,
        dryrun: bool = False,
        cwd: Optional[Path] = None,
        committer_name: Optional[str] = None,
        committer_email: Optional[str] = None,
    ) -> List[str]:
        ...


__all__ = ["Provider"]
