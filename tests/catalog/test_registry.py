"""Tests for the badge registry."""

from __future__ import annotations

import pytest

from mybadges.catalog import registry as registry_module
from mybadges.catalog.base import Threshold, ThresholdBadge
from mybadges.catalog.registry import BadgeRegistry, discover_definitions
from mybadges.errors import DuplicateBadgeId


def _definition(name: str) -> ThresholdBadge:
    return ThresholdBadge(name, lambda data: 1, [Threshold(1, name, f"{name}.png")])


def test_registry_preserves_registration_order() -> None:
    registry = BadgeRegistry([_definition("b"), _definition("a")])

    assert registry.ids() == ["b", "a"]
    assert len(registry) == 2


def test_registry_rejects_duplicate_ids() -> None:
    registry = BadgeRegistry([_definition("a")])

    with pytest.raises(DuplicateBadgeId):
        registry.register(_definition("a"))


def test_registry_rejects_non_definitions() -> None:
    with pytest.raises(TypeError):
        BadgeRegistry([object()])  # type: ignore[list-item]


def test_discover_definitions_appends_entry_points(monkeypatch) -> None:
    class _EntryPoint:
        name = "extra"

        @staticmethod
        def load():
            return lambda: [_definition("extra")]

    monkeypatch.setattr(registry_module, "_iter_entry_points", lambda: [_EntryPoint()])

    registry = discover_definitions([_definition("builtin")])

    assert registry.ids() == ["builtin", "extra"]
