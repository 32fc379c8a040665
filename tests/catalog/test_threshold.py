"""Tests for threshold badge definitions."""

from __future__ import annotations

import pytest

from mybadges.catalog.base import Threshold, ThresholdBadge
from mybadges.catalog.builtin import builtin_definitions, languages, total_stars


def test_threshold_badge_awards_highest_tier(streak_definition: ThresholdBadge) -> None:
    badge = streak_definition.evaluate({"streak": 45})

    assert badge is not None
    assert badge.id == "streak-30"
    assert badge.tier == 2
    assert badge.body == "Streak of 45 days."


def test_threshold_badge_returns_none_below_first_threshold(streak_definition: ThresholdBadge) -> None:
    assert streak_definition.evaluate({"streak": 3}) is None


def test_threshold_badge_treats_missing_metric_as_zero(streak_definition: ThresholdBadge) -> None:
    assert streak_definition.evaluate({}) is None


def test_threshold_badge_retains_lower_tiers_still_reached(streak_definition: ThresholdBadge) -> None:
    retained = streak_definition.retains("streak-7", {"streak": 45})

    assert retained is not None
    assert (retained.id, retained.tier) == ("streak-7", 1)
    assert retained.desc == "Seven day streak"
    assert retained.body == "Streak of 45 days."
    assert streak_definition.retains("streak-30", {"streak": 10}) is None
    assert streak_definition.retains("other-7", {"streak": 45}) is None


def test_threshold_badge_sorts_thresholds() -> None:
    definition = ThresholdBadge(
        "stars",
        lambda data: data["stars"],
        [Threshold(500, "500", "b.png"), Threshold(100, "100", "a.png")],
    )

    assert definition.badge_ids == ("stars-100", "stars-500")
    assert definition.matches(["stars-500"])
    assert definition.matches(["stars"])
    assert not definition.matches(["followers"])


def test_threshold_badge_requires_thresholds() -> None:
    with pytest.raises(ValueError):
        ThresholdBadge("empty", lambda data: 0, [])


def test_builtin_metrics_ignore_forks() -> None:
    snapshot = {
        "user": {"followers": 12, "public_repos": 3},
        "repos": [
            {"stargazers_count": 90, "language": "Python", "fork": False},
            {"stargazers_count": 20, "language": "Go", "fork": False},
            {"stargazers_count": 1000, "language": "Rust", "fork": True},
        ],
    }

    assert total_stars(snapshot) == 110
    assert languages(snapshot) == 2


def test_builtin_catalog_evaluates_snapshot() -> None:
    snapshot = {
        "user": {"followers": 12, "public_repos": 3},
        "repos": [{"stargazers_count": 150, "language": "Python", "fork": False}],
    }

    earned = [definition.evaluate(snapshot) for definition in builtin_definitions()]
    ids = [badge.id for badge in earned if badge is not None]

    assert ids == ["stars-100", "followers-10"]
