"""Built-in badge definitions over the GitHub provider snapshot."""

from __future__ import annotations

from typing import List

from ..constants import PROJECT_URL
from ..models import UserSnapshot
from .base import BadgeDefinition, Threshold, ThresholdBadge


def _image(group: str, badge_id: str) -> str:
    return f"{PROJECT_URL}/blob/master/src/all-badges/{group}/{badge_id}.png?raw=true"


def _owned_repos(snapshot: UserSnapshot) -> List[dict]:
    repos = snapshot.get("repos") or []
    return [repo for repo in repos if isinstance(repo, dict) and not repo.get("fork")]


def total_stars(snapshot: UserSnapshot) -> int:
    return sum(int(repo.get("stargazers_count") or 0) for repo in _owned_repos(snapshot))


def followers(snapshot: UserSnapshot) -> int:
    return int((snapshot.get("user") or {}).get("followers") or 0)


def public_repos(snapshot: UserSnapshot) -> int:
    return int((snapshot.get("user") or {}).get("public_repos") or 0)


def languages(snapshot: UserSnapshot) -> int:
    return len({repo["language"] for repo in _owned_repos(snapshot) if repo.get("language")})


def _steps(group: str, values: List[int], desc: str, body: str) -> List[Threshold]:
    return [
        Threshold(
            value=value,
            desc=desc.format(value=value),
            image=_image(group, f"{group}-{value}"),
            body=body,
        )
        for value in values
    ]


def builtin_definitions() -> List[BadgeDefinition]:
    """Return the default catalog in presentation order."""
    return [
        ThresholdBadge(
            "stars",
            total_stars,
            _steps(
                "stars",
                [100, 500, 1000, 2000, 5000, 10000],
                "I collected {value} stars.",
                "Repositories owned by me have {value} stars in total.",
            ),
        ),
        ThresholdBadge(
            "followers",
            followers,
            _steps(
                "followers",
                [10, 100, 1000],
                "I have {value} followers.",
                "{value} people follow my work on GitHub.",
            ),
        ),
        ThresholdBadge(
            "repos",
            public_repos,
            _steps(
                "repos",
                [10, 50, 100],
                "I published {value} repositories.",
                "I own {value} public repositories.",
            ),
        ),
        ThresholdBadge(
            "polyglot",
            languages,
            _steps(
                "polyglot",
                [3, 5, 10],
                "I write code in {value} languages.",
                "My repositories use {value} different primary languages.",
            ),
        ),
    ]


__all__ = ["builtin_definitions", "followers", "languages", "public_repos", "total_stars"]
