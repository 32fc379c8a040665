"""Base classes for badge definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Tuple

from ..models import Badge, UserSnapshot

Metric = Callable[[UserSnapshot], float]


class BadgeDefinition(ABC):
    """Contract for eligibility rules that turn a snapshot into a badge."""

    id: str

    @property
    def badge_ids(self) -> Tuple[str, ...]:
        """Every badge id this definition can produce."""
        return (self.id,)

    def matches(self, ids: Iterable[str]) -> bool:
        """Return True when the definition or one of its badges is named in ids."""
        wanted = set(ids)
        return self.id in wanted or any(badge_id in wanted for badge_id in self.badge_ids)

    @abstractmethod
    def evaluate(self, snapshot: UserSnapshot) -> Optional[Badge]:
        """Return the earned badge, or None when the user is not eligible."""

    def retains(self, badge_id: str, snapshot: UserSnapshot) -> Optional[Badge]:
        """Rebuild a previously published badge_id, or None when it is no longer earned."""
        badge = self.evaluate(snapshot)
        return badge if badge is not None and badge.id == badge_id else None


@dataclass(frozen=True)
class Threshold:
    """One tier step of a threshold badge."""

    value: float
    desc: str
    image: str
    body: str = ""


class ThresholdBadge(BadgeDefinition):
    """Awards the highest threshold reached by a metric over the snapshot.

    Badge ids are ``<id>-<value>`` and tiers count from 1 in ascending
    threshold order. Lower thresholds that are still reached remain earned.
    """

    def __init__(self, id: str, metric: Metric, thresholds: Sequence[Threshold]) -> None:
        if not thresholds:
            raise ValueError(f"Threshold badge '{id}' needs at least one threshold")
        self.id = id
        self.metric = metric
        self.thresholds = tuple(sorted(thresholds, key=lambda step: step.value))

    @property
    def badge_ids(self) -> Tuple[str, ...]:
        return tuple(self._badge_id(step) for step in self.thresholds)

    def evaluate(self, snapshot: UserSnapshot) -> Optional[Badge]:
        value = self._measure(snapshot)
        earned: Optional[Badge] = None
        for tier, step in enumerate(self.thresholds, start=1):
            if value < step.value:
                break
            earned = self._build(tier, step, value)
        return earned

    def retains(self, badge_id: str, snapshot: UserSnapshot) -> Optional[Badge]:
        value = self._measure(snapshot)
        for tier, step in enumerate(self.thresholds, start=1):
            if self._badge_id(step) == badge_id:
                return self._build(tier, step, value) if value >= step.value else None
        return None

    def _build(self, tier: int, step: Threshold, value: float) -> Badge:
        return Badge(
            id=self._badge_id(step),
            tier=tier,
            desc=step.desc,
            body=step.body.replace("{value}", _format_number(value)),
            image=step.image,
        )

    def _measure(self, snapshot: UserSnapshot) -> float:
        try:
            return float(self.metric(snapshot))
        except (KeyError, TypeError, ValueError):
            return 0.0

    def _badge_id(self, step: Threshold) -> str:
        return f"{self.id}-{_format_number(step.value)}"


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


__all__ = ["BadgeDefinition", "Metric", "Threshold", "ThresholdBadge"]
