"""Minimal GitHub REST client on top of urllib."""

from __future__ import annotations

import asyncio
import base64
import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import quote, urlencode
from urllib.request import Request, urlopen

from ...logging import get_logger

logger = get_logger("github")

DEFAULT_API_URL = "https://api.github.com"


class GitHubRequestError(RuntimeError):
    """Raised when the GitHub API answers with an error or cannot be reached."""

    def __init__(self, message: str, *, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status

    @property
    def not_found(self) -> bool:
        return self.status == 404


@dataclass
class GitHubRequest:
    """Represents a single REST call."""

    method: str
    url: str
    headers: Dict[str, str]
    data: Optional[bytes] = None
    timeout: float = 30.0
    params: Dict[str, Any] = field(default_factory=dict)


def encode_base64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_base64(payload: str) -> str:
    # The contents API wraps base64 bodies at 60 columns.
    return base64.b64decode("".join(payload.split())).decode("utf-8")


class GitHubClient:
    """Issues authenticated REST requests; blocking I/O runs in a worker thread."""

    def __init__(
        self,
        token: str | None = None,
        *,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        opener: Callable[..., Any] | None = None,
    ) -> None:
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._opener = opener or urlopen

    async def get(self, path: str, **params: Any) -> Any:
        return await self.request("GET", path, params=params)

    async def put(self, path: str, payload: Mapping[str, Any]) -> Any:
        return await self.request("PUT", path, payload=payload)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        payload: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        request = self._build_request(method, path, params=params, payload=payload)
        return await asyncio.to_thread(self._send, request)

    def content_path(self, owner: str, repo: str, path: str) -> str:
        return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}/contents/{quote(path)}"

    def readme_path(self, owner: str, repo: str) -> str:
        return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}/readme"

    def _build_request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]],
        payload: Optional[Mapping[str, Any]],
    ) -> GitHubRequest:
        url = f"{self.base_url}{path}"
        query = {key: value for key, value in (params or {}).items() if value is not None}
        if query:
            url = f"{url}?{urlencode(query)}"
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "mybadges",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        data = None
        if payload is not None:
            data = json.dumps(payload).encode("utf-8")
            headers["Content-Type"] = "application/json"
        return GitHubRequest(
            method=method,
            url=url,
            headers=headers,
            data=data,
            timeout=self.timeout,
            params=dict(query),
        )

    def _send(self, request: GitHubRequest) -> Any:
        http_request = Request(
            request.url, data=request.data, headers=request.headers, method=request.method
        )
        logger.debug("%s %s", request.method, request.url)
        try:
            with self._opener(http_request, timeout=request.timeout) as response:
                raw = response.read()
        except HTTPError as exc:
            detail = exc.read().decode("utf-8", errors="ignore") if hasattr(exc, "read") else ""
            message = _error_message(detail) or str(exc.reason)
            raise GitHubRequestError(
                f"{request.method} {request.url} failed with status {exc.code}: {message}",
                status=exc.code,
            ) from exc
        except URLError as exc:
            raise GitHubRequestError(f"{request.method} {request.url} failed: {exc.reason}") from exc
        except OSError as exc:
            raise GitHubRequestError(f"{request.method} {request.url} failed: {exc}") from exc

        if not raw:
            return None
        try:
            return json.loads(raw.decode("utf-8"))
        except json.JSONDecodeError as exc:
            raise GitHubRequestError(f"{request.method} {request.url} returned invalid JSON") from exc


def _error_message(detail: str) -> str:
    if not detail.strip():
        return ""
    try:
        payload = json.loads(detail)
    except json.JSONDecodeError:
        return detail.strip()
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return payload["message"]
    return detail.strip()


__all__ = [
    "GitHubClient",
    "GitHubRequest",
    "GitHubRequestError",
    "decode_base64",
    "encode_base64",
]
