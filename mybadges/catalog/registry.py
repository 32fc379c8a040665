"""Ordered registry of badge definitions and entry point discovery."""

from __future__ import annotations

from importlib import metadata
from typing import Iterable, Iterator, List, Sequence

from ..errors import DuplicateBadgeId
from .base import BadgeDefinition

_ENTRY_POINT_GROUP = "mybadges.badges"


class BadgeRegistry:
    """Keeps badge definitions in registration order and rejects duplicate ids."""

    def __init__(self, definitions: Iterable[BadgeDefinition] = ()) -> None:
        self._definitions: List[BadgeDefinition] = []
        for definition in definitions:
            self.register(definition)

    def register(self, definition: BadgeDefinition) -> BadgeDefinition:
        if not isinstance(definition, BadgeDefinition):
            raise TypeError(f"Expected a BadgeDefinition, got {type(definition).__name__}")
        known = {badge_id for existing in self._definitions for badge_id in existing.badge_ids}
        known.update(existing.id for existing in self._definitions)
        for badge_id in {definition.id, *definition.badge_ids}:
            if badge_id in known:
                raise DuplicateBadgeId(badge_id)
        self._definitions.append(definition)
        return definition

    def __iter__(self) -> Iterator[BadgeDefinition]:
        return iter(list(self._definitions))

    def __len__(self) -> int:
        return len(self._definitions)

    def ids(self) -> List[str]:
        return [definition.id for definition in self._definitions]


def discover_definitions(builtins: Sequence[BadgeDefinition]) -> BadgeRegistry:
    """Return a registry holding builtins followed by entry point definitions."""
    registry = BadgeRegistry(builtins)
    for entry in sorted(_iter_entry_points(), key=lambda item: item.name):
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - depends on installed plugins
            raise RuntimeError(f"Failed to load badge entry point '{entry.name}': {exc}") from exc
        for definition in _coerce_definitions(loaded):
            registry.register(definition)
    return registry


def _coerce_definitions(obj: object) -> List[BadgeDefinition]:
    if isinstance(obj, BadgeDefinition):
        return [obj]
    if isinstance(obj, type) and issubclass(obj, BadgeDefinition):
        return [obj()]
    if isinstance(obj, (list, tuple)):
        return [item for entry in obj for item in _coerce_definitions(entry)]
    if callable(obj):
        return _coerce_definitions(obj())
    raise TypeError("Badge entry point must provide BadgeDefinition instances or factories")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points(group=_ENTRY_POINT_GROUP)


__all__ = ["BadgeRegistry", "discover_definitions"]
