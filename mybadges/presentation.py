"""Badge selection, merge and ordering."""

from __future__ import annotations

import random
from typing import Dict, Iterable, List, Optional, Sequence

from .catalog.base import BadgeDefinition
from .errors import DuplicateBadgeId
from .logging import get_logger
from .models import Badge, PresentationOptions, UserSnapshot

logger = get_logger("presentation")


def select_definitions(
    catalog: Iterable[BadgeDefinition], options: PresentationOptions
) -> List[BadgeDefinition]:
    """Apply pick then omit; omit wins when a definition is named by both."""
    selected = list(catalog)
    if options.pick:
        selected = [definition for definition in selected if definition.matches(options.pick)]
    if options.omit:
        selected = [definition for definition in selected if not definition.matches(options.omit)]
    return selected


def evaluate(definitions: Sequence[BadgeDefinition], data: UserSnapshot) -> List[Badge]:
    """Evaluate definitions in catalog order, rejecting duplicate badge ids."""
    earned: List[Badge] = []
    seen: set[str] = set()
    for definition in definitions:
        badge = definition.evaluate(data)
        if badge is None:
            continue
        if badge.id in seen:
            raise DuplicateBadgeId(badge.id)
        seen.add(badge.id)
        earned.append(badge)
    return earned


def merge(
    definitions: Sequence[BadgeDefinition],
    data: UserSnapshot,
    existing: Sequence[Badge],
    fresh: Sequence[Badge],
) -> List[Badge]:
    """Merge freshly evaluated badges into the previously published order.

    Existing badges keep their position and take fresh attributes when they
    were re-evaluated. Existing badges that were not re-evaluated survive only
    while a selected definition still reports them as earned, and are rebuilt
    from that definition rather than copied from the published record. New
    badges are appended in catalog order.
    """
    fresh_by_id: Dict[str, Badge] = {badge.id: badge for badge in fresh}
    merged: List[Badge] = []
    placed: set[str] = set()

    for old in existing:
        if old.id in placed:
            logger.warning("Ignoring duplicate published badge %s", old.id)
            continue
        if old.id in fresh_by_id:
            merged.append(fresh_by_id[old.id])
            placed.add(old.id)
            continue
        retained = _retained(definitions, old.id, data)
        if retained is not None:
            merged.append(retained)
            placed.add(old.id)
        else:
            logger.debug("Dropping badge %s; no longer earned", old.id)

    for badge in fresh:
        if badge.id not in placed:
            merged.append(badge)
            placed.add(badge.id)
    return merged


def present(
    catalog: Iterable[BadgeDefinition],
    data: UserSnapshot,
    existing: Sequence[Badge],
    options: PresentationOptions,
    *,
    rng: Optional[random.Random] = None,
) -> List[Badge]:
    """Compute the final ordered badge list for a user."""
    definitions = select_definitions(catalog, options)
    fresh = evaluate(definitions, data)
    badges = merge(definitions, data, existing, fresh)
    logger.debug(
        "Evaluated %d definitions: %d earned, %d published",
        len(definitions),
        len(fresh),
        len(badges),
    )

    if options.shuffle:
        (rng or random.Random()).shuffle(badges)

    if options.compact:
        badges = [badge.compacted() for badge in badges]

    return badges


def _retained(
    definitions: Sequence[BadgeDefinition], badge_id: str, data: UserSnapshot
) -> Optional[Badge]:
    for definition in definitions:
        if badge_id not in definition.badge_ids:
            continue
        badge = definition.retains(badge_id, data)
        if badge is not None:
            return badge
    return None


__all__ = ["evaluate", "merge", "present", "select_definitions"]
