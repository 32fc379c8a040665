"""Collects the GitHub user snapshot consumed by badge definitions."""

from __future__ import annotations

from typing import Any, Dict, List

from ...logging import get_logger
from ...models import UserSnapshot
from .client import GitHubClient

logger = get_logger("collect")

PER_PAGE = 100
MAX_PAGES = 10

_USER_FIELDS = (
    "login",
    "name",
    "followers",
    "following",
    "public_repos",
    "public_gists",
    "created_at",
)
_REPO_FIELDS = (
    "name",
    "full_name",
    "fork",
    "language",
    "stargazers_count",
    "forks_count",
    "created_at",
    "pushed_at",
)


async def collect(client: GitHubClient, user: str) -> UserSnapshot:
    """Fetch the profile and owned repositories of user."""
    profile = await client.get(f"/users/{user}")
    if not isinstance(profile, dict):
        raise RuntimeError(f"Unexpected profile payload for {user}")

    repos: List[Dict[str, Any]] = []
    for page in range(1, MAX_PAGES + 1):
        batch = await client.get(
            f"/users/{user}/repos", type="owner", per_page=PER_PAGE, page=page
        )
        if not isinstance(batch, list):
            break
        repos.extend(_pick(repo, _REPO_FIELDS) for repo in batch if isinstance(repo, dict))
        if len(batch) < PER_PAGE:
            break

    logger.info("Collected %d repositories for %s", len(repos), user)
    return {"user": _pick(profile, _USER_FIELDS), "repos": repos}


def _pick(payload: Dict[str, Any], keys: tuple[str, ...]) -> Dict[str, Any]:
    return {key: payload.get(key) for key in keys}


__all__ = ["collect"]
