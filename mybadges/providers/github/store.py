"""Content store backed by the GitHub contents API."""

from __future__ import annotations

from typing import Optional

from ...errors import RemoteReadError
from ...logging import get_logger
from ...models import ContentItem
from ...store.base import ContentStore
from .client import GitHubClient, GitHubRequestError, decode_base64, encode_base64

logger = get_logger("store.github")


class GitHubContentStore(ContentStore):
    """Reads and commits files in one repository, base64 on the wire."""

    def __init__(
        self,
        client: GitHubClient,
        owner: str,
        repo: str,
        *,
        committer_name: str | None = None,
        committer_email: str | None = None,
    ) -> None:
        self.client = client
        self.owner = owner
        self.repo = repo
        self.committer_name = committer_name
        self.committer_email = committer_email

    async def read(self, path: str) -> Optional[ContentItem]:
        if self.is_readme(path):
            endpoint = self.client.readme_path(self.owner, self.repo)
        else:
            endpoint = self.client.content_path(self.owner, self.repo, path)
        try:
            payload = await self.client.get(endpoint)
        except GitHubRequestError as exc:
            if exc.not_found:
                return None
            raise RemoteReadError(path, str(exc), status=exc.status) from exc

        if not isinstance(payload, dict) or "content" not in payload:
            raise RemoteReadError(path, "response is not a file")
        try:
            content = decode_base64(str(payload.get("content") or ""))
        except ValueError as exc:
            raise RemoteReadError(path, f"undecodable content: {exc}") from exc
        return ContentItem(
            path=str(payload.get("path") or path),
            content=content,
            revision=payload.get("sha"),
        )

    async def write(self, path: str, content: str, revision: Optional[str] = None) -> Optional[str]:
        logger.info("Uploading %s %s", path, revision or "")
        body: dict[str, object] = {
            "message": f"chore: {path} {'updated' if revision else 'added'}",
            "content": encode_base64(content),
        }
        if revision:
            body["sha"] = revision
        if self.committer_name and self.committer_email:
            body["committer"] = {"name": self.committer_name, "email": self.committer_email}
        result = await self.client.put(self.client.content_path(self.owner, self.repo, path), body)
        if isinstance(result, dict):
            committed = result.get("content")
            if isinstance(committed, dict):
                return committed.get("sha")
        return None


__all__ = ["GitHubContentStore"]
