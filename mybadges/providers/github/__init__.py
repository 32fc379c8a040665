"""GitHub REST provider."""

from .client import GitHubClient, GitHubRequestError, decode_base64, encode_base64
from .collect import collect
from .provider import GitHubProvider
from .store import GitHubContentStore

__all__ = [
    "GitHubClient",
    "GitHubContentStore",
    "GitHubProvider",
    "GitHubRequestError",
    "collect",
    "decode_base64",
    "encode_base64",
]
