"""Tests for the urllib-based GitHub client."""

from __future__ import annotations

import asyncio

import pytest

from mybadges.providers.github.client import GitHubRequestError, decode_base64, encode_base64
from tests._fixtures.fake_github import FakeGitHub


def test_client_sends_authenticated_json_requests() -> None:
    fake = FakeGitHub({("PUT", "/repos/me/me/contents/a.md"): {"content": {"sha": "new"}}})

    result = asyncio.run(fake.client().put("/repos/me/me/contents/a.md", {"message": "hi"}))

    assert result == {"content": {"sha": "new"}}
    call = fake.calls[0]
    assert call["method"] == "PUT"
    assert call["headers"]["authorization"] == "Bearer secret"
    assert call["headers"]["content-type"] == "application/json"
    assert call["body"] == {"message": "hi"}
    assert call["timeout"] == 30.0


def test_client_encodes_query_parameters() -> None:
    fake = FakeGitHub({("GET", "/users/me/repos"): []})

    asyncio.run(fake.client(None).get("/users/me/repos", per_page=100, page=2, type=None))

    assert fake.calls[0]["url"].endswith("/users/me/repos?per_page=100&page=2")
    assert "authorization" not in fake.calls[0]["headers"]


def test_client_raises_with_status_and_message() -> None:
    fake = FakeGitHub({("GET", "/users/me"): 500})

    with pytest.raises(GitHubRequestError) as excinfo:
        asyncio.run(fake.client().get("/users/me"))

    assert excinfo.value.status == 500
    assert not excinfo.value.not_found
    assert "Server Error" in str(excinfo.value)


def test_client_flags_not_found() -> None:
    with pytest.raises(GitHubRequestError) as excinfo:
        asyncio.run(FakeGitHub().client().get("/users/ghost"))

    assert excinfo.value.not_found


def test_client_maps_transport_errors() -> None:
    fake = FakeGitHub({("GET", "/users/me"): TimeoutError("The read operation timed out")})

    with pytest.raises(GitHubRequestError) as excinfo:
        asyncio.run(fake.client().get("/users/me"))

    assert excinfo.value.status is None
    assert "timed out" in str(excinfo.value)


def test_client_escapes_repository_paths() -> None:
    client = FakeGitHub().client()

    assert client.readme_path("me", "my repo") == "/repos/me/my%20repo/readme"
    assert client.readme_path("a/b", "c") == "/repos/a%2Fb/c/readme"
    assert client.content_path("me", "me", "my-badges/a b.md") == "/repos/me/me/contents/my-badges/a%20b.md"


def test_base64_helpers_handle_wrapped_payloads() -> None:
    encoded = encode_base64("héllo world " * 10)
    wrapped = "\n".join(encoded[index:index + 60] for index in range(0, len(encoded), 60))

    assert decode_base64(wrapped) == "héllo world " * 10
