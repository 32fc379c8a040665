"""Error taxonomy shared across mybadges components."""

from __future__ import annotations

from typing import Optional


class MyBadgesError(RuntimeError):
    """Base class for failures that abort a badge update."""


class MissingIdentity(MyBadgesError):
    """Raised when no user was specified and no data file was given."""

    def __init__(self, message: str = "Specify username") -> None:
        super().__init__(message)


class DataNotFound(MyBadgesError):
    """Raised when an explicit data file path does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Data file not found: {path}")
        self.path = path


class DuplicateBadgeId(MyBadgesError):
    """Raised when a catalog produces the same badge id twice."""

    def __init__(self, badge_id: str) -> None:
        super().__init__(f"Duplicate badge id: {badge_id}")
        self.badge_id = badge_id


class RemoteReadError(MyBadgesError):
    """Raised when reading a content item fails for a reason other than absence."""

    def __init__(self, path: str, message: str, *, status: Optional[int] = None) -> None:
        detail = f"{message} (status {status})" if status is not None else message
        super().__init__(f"Failed to read {path}: {detail}")
        self.path = path
        self.status = status


__all__ = [
    "DataNotFound",
    "DuplicateBadgeId",
    "MissingIdentity",
    "MyBadgesError",
    "RemoteReadError",
]
