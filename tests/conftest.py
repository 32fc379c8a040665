from __future__ import annotations

import pytest

from mybadges.catalog.base import Threshold, ThresholdBadge
from tests._fixtures.memory_store import MemoryContentStore


@pytest.fixture
def memory_store() -> MemoryContentStore:
    """Provide an empty in-memory content store."""
    return MemoryContentStore()


@pytest.fixture
def streak_definition() -> ThresholdBadge:
    """Threshold badge over a longest-streak metric."""
    return ThresholdBadge(
        "streak",
        lambda data: data["streak"],
        [
            Threshold(7, "Seven day streak", "https://img.example/streak-7.png", "Streak of {value} days."),
            Threshold(30, "Thirty day streak", "https://img.example/streak-30.png", "Streak of {value} days."),
        ],
    )
