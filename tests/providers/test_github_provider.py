"""Tests for the GitHub provider."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from mybadges.errors import RemoteReadError
from mybadges.models import Badge
from mybadges.providers.github import GitHubProvider, collect
from tests._fixtures.fake_github import FakeGitHub, file_payload

MANIFEST = "/repos/me/profile/contents/my-badges/my-badges.json"


def _provider(fake: FakeGitHub) -> GitHubProvider:
    return GitHubProvider(lambda token: fake.client(token))


def test_get_badges_normalizes_missing_tier() -> None:
    manifest = json.dumps([{"id": "a-commit", "desc": "d", "body": "", "image": "i"}])
    fake = FakeGitHub({("GET", MANIFEST): file_payload("my-badges/my-badges.json", manifest, "s")})

    badges = asyncio.run(
        _provider(fake).get_badges(user="me", token="t", owner="me", repo="profile")
    )

    assert badges == [Badge(id="a-commit", tier=0, desc="d", body="", image="i")]


def test_get_badges_returns_empty_when_manifest_missing() -> None:
    badges = asyncio.run(
        _provider(FakeGitHub()).get_badges(user="me", token="t", owner="me", repo="profile")
    )

    assert badges == []


def test_get_badges_propagates_other_failures() -> None:
    fake = FakeGitHub({("GET", MANIFEST): 500})

    with pytest.raises(RemoteReadError):
        asyncio.run(_provider(fake).get_badges(user="me", token="t", owner="me", repo="profile"))


def test_get_badges_ignores_invalid_manifest() -> None:
    fake = FakeGitHub({("GET", MANIFEST): file_payload("my-badges/my-badges.json", "{oops", "s")})

    assert asyncio.run(
        _provider(fake).get_badges(user="me", token="t", owner="me", repo="profile")
    ) == []


def test_update_badges_uploads_changed_artifacts() -> None:
    readme = "# Me\n<!-- my-badges start -->\n<!-- my-badges end -->\n"
    fake = FakeGitHub(
        {
            ("GET", "/repos/me/profile/readme"): file_payload("README.md", readme, "r1"),
            ("PUT", "/repos/me/profile/contents/README.md"): {"content": {"sha": "r2"}},
            ("PUT", "/repos/me/profile/contents/my-badges/my-badges.json"): {"content": {"sha": "m"}},
            ("PUT", "/repos/me/profile/contents/my-badges/x.md"): {"content": {"sha": "p"}},
        }
    )
    badge = Badge(id="x", tier=1, desc="X", body="Body", image="x.png")

    written = asyncio.run(
        _provider(fake).update_badges(
            user="me",
            badges=[badge],
            token="t",
            owner="me",
            repo="profile",
            committer_name="Bot",
            committer_email="bot@example.com",
        )
    )

    assert sorted(written) == ["my-badges/my-badges.json", "my-badges/x.md", "readme.md"]
    puts = {call["path"]: call["body"] for call in fake.calls if call["method"] == "PUT"}
    assert puts["/repos/me/profile/contents/README.md"]["sha"] == "r1"
    assert "sha" not in puts["/repos/me/profile/contents/my-badges/x.md"]


def test_update_badges_dry_run_writes_under_cwd(tmp_path: Path) -> None:
    fake = FakeGitHub()
    badge = Badge(id="x", tier=1, desc="X", body="Body", image="x.png")

    asyncio.run(
        _provider(fake).update_badges(
            user="me", badges=[badge], token=None, dryrun=True, cwd=tmp_path
        )
    )

    assert fake.calls == []
    assert json.loads((tmp_path / "my-badges" / "my-badges.json").read_text(encoding="utf-8"))[0]["id"] == "x"
    assert (tmp_path / "my-badges" / "x.md").exists()


def test_collect_fetches_profile_and_paginates_repos() -> None:
    page_one = [{"name": f"r{index}", "stargazers_count": 1, "fork": False} for index in range(100)]
    page_two = [{"name": "last", "stargazers_count": 5, "fork": False, "language": "Go"}]

    class _Paged(FakeGitHub):
        def __call__(self, request, timeout=None):
            if "page=2" in request.full_url:
                self.routes[("GET", "/users/me/repos")] = page_two
            return super().__call__(request, timeout)

    fake = _Paged(
        {
            ("GET", "/users/me"): {"login": "me", "followers": 3, "public_repos": 101, "bio": "x"},
            ("GET", "/users/me/repos"): page_one,
        }
    )

    snapshot = asyncio.run(collect(fake.client(), "me"))

    assert snapshot["user"]["followers"] == 3
    assert "bio" not in snapshot["user"]
    assert len(snapshot["repos"]) == 101
    assert snapshot["repos"][-1]["language"] == "Go"
