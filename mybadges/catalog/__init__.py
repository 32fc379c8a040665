"""Badge definitions and the ordered catalog registry."""

from __future__ import annotations

from .base import BadgeDefinition, Threshold, ThresholdBadge
from .builtin import builtin_definitions
from .registry import BadgeRegistry, discover_definitions


def default_catalog() -> BadgeRegistry:
    """Return built-in definitions plus any installed through entry points."""
    return discover_definitions(builtin_definitions())


__all__ = [
    "BadgeDefinition",
    "BadgeRegistry",
    "Threshold",
    "ThresholdBadge",
    "builtin_definitions",
    "default_catalog",
    "discover_definitions",
]
