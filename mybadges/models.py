"""Core data models shared across mybadges components."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional

UserSnapshot = Dict[str, Any]


@dataclass
class Badge:
    """Published achievement record as stored in the manifest."""

    id: str
    tier: int = 0
    desc: str = ""
    body: str = ""
    image: str = ""
    _full: Optional["Badge"] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Badge":
        """Build a badge from a manifest entry, defaulting a missing tier to 0."""
        badge_id = payload.get("id")
        if not isinstance(badge_id, str) or not badge_id:
            raise ValueError(f"Badge entry is missing an id: {payload!r}")
        tier = payload.get("tier")
        return cls(
            id=badge_id,
            tier=int(tier) if tier is not None else 0,
            desc=str(payload.get("desc") or ""),
            body=str(payload.get("body") or ""),
            image=str(payload.get("image") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "tier": self.tier,
            "desc": self.desc,
            "body": self.body,
            "image": self.image,
        }

    def compacted(self) -> "Badge":
        """Return the terse manifest form; the full badge stays reachable via full()."""
        first_line = self.desc.strip().splitlines()[0] if self.desc.strip() else ""
        return replace(self, desc=first_line, body="", _full=self.full())

    def full(self) -> "Badge":
        return self._full if self._full is not None else self


@dataclass
class ContentItem:
    """A content file read from a store together with its revision token."""

    path: str
    content: str
    revision: Optional[str] = None


@dataclass(frozen=True)
class PresentationOptions:
    """Controls which definitions are evaluated and how results are ordered."""

    pick: FrozenSet[str] = frozenset()
    omit: FrozenSet[str] = frozenset()
    compact: bool = False
    shuffle: bool = False

    @classmethod
    def build(
        cls,
        *,
        pick: Iterable[str] = (),
        omit: Iterable[str] = (),
        compact: bool = False,
        shuffle: bool = False,
    ) -> "PresentationOptions":
        return cls(
            pick=frozenset(pick),
            omit=frozenset(omit),
            compact=compact,
            shuffle=shuffle,
        )


def load_badges(payload: Any) -> List[Badge]:
    """Parse a manifest array into badges, normalizing legacy entries."""
    if not isinstance(payload, list):
        raise ValueError("Badge manifest must contain a JSON array")
    return [Badge.from_dict(entry) for entry in payload if isinstance(entry, Mapping)]


__all__ = ["Badge", "ContentItem", "PresentationOptions", "UserSnapshot", "load_badges"]
