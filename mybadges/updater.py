"""Top-level badge update flow."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .catalog import default_catalog
from .catalog.base import BadgeDefinition
from .config import UpdateOptions
from .errors import MissingIdentity
from .logging import get_logger
from .models import Badge
from .presentation import present
from .providers import Provider
from .providers.github import GitHubProvider
from .snapshot import SnapshotLoader

logger = get_logger("updater")


@dataclass
class UpdateResult:
    """Badges that were published and the paths that changed."""

    badges: List[Badge]
    written: List[str] = field(default_factory=list)
    published: bool = True


def default_provider() -> Provider:
    return GitHubProvider()


async def update(
    options: UpdateOptions,
    *,
    provider: Optional[Provider] = None,
    catalog: Optional[Iterable[BadgeDefinition]] = None,
    rng: Optional[random.Random] = None,
) -> UpdateResult:
    """Load the snapshot, present badges and publish every artifact."""
    if not options.data_path and not options.user:
        raise MissingIdentity()

    provider = provider or default_provider()
    definitions = list(catalog) if catalog is not None else list(default_catalog())

    loader = SnapshotLoader(provider, options.cwd)
    snapshot = await loader.load(
        data_path=options.data_path,
        user=options.user,
        token=options.token,
        owner=options.owner,
        repo=options.repo,
        dryrun=options.dryrun,
    )

    badges = present(
        definitions, snapshot.data, snapshot.badges, options.presentation, rng=rng
    )
    logger.info("Presenting %d badges", len(badges))

    if not (options.owner and options.repo):
        logger.warning("No target repository; skipping publish")
        return UpdateResult(badges=badges, published=False)

    written = await provider.update_badges(
        user=options.user or options.owner,
        badges=badges,
        token=options.token,
        owner=options.owner,
        repo=options.repo,
        size=options.size,
        dryrun=options.dryrun,
        cwd=options.cwd,
        committer_name=options.committer_name,
        committer_email=options.committer_email,
    )
    return UpdateResult(badges=badges, written=list(written))


__all__ = ["UpdateResult", "default_provider", "update"]
