"""Configuration for mybadges runs (.mybadges.yml and CLI/env options)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import yaml

from .constants import DEFAULT_COMMITTER_EMAIL, DEFAULT_COMMITTER_NAME, DEFAULT_IMAGE_SIZE
from .models import PresentationOptions

CONFIG_FILENAME = ".mybadges.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file or run options are invalid."""


@dataclass
class FileConfig:
    """Defaults read from .mybadges.yml."""

    repo: Optional[str] = None
    size: Optional[int] = None
    compact: Optional[bool] = None
    shuffle: Optional[bool] = None
    pick: List[str] = field(default_factory=list)
    omit: List[str] = field(default_factory=list)
    committer_name: Optional[str] = None
    committer_email: Optional[str] = None


@dataclass
class UpdateOptions:
    """Normalized options for one update; assembled once at the boundary."""

    cwd: Path
    token: Optional[str] = None
    user: Optional[str] = None
    owner: Optional[str] = None
    repo: Optional[str] = None
    data_path: str = ""
    size: int = DEFAULT_IMAGE_SIZE
    dryrun: bool = False
    compact: bool = False
    shuffle: bool = False
    pick: List[str] = field(default_factory=list)
    omit: List[str] = field(default_factory=list)
    committer_name: str = DEFAULT_COMMITTER_NAME
    committer_email: str = DEFAULT_COMMITTER_EMAIL

    @property
    def presentation(self) -> PresentationOptions:
        return PresentationOptions.build(
            pick=self.pick, omit=self.omit, compact=self.compact, shuffle=self.shuffle
        )


def load_config(path: Path) -> FileConfig:
    """Load .mybadges.yml from a directory or explicit file path."""
    config_file = path / CONFIG_FILENAME if path.is_dir() else path
    if not config_file.exists():
        return FileConfig()

    text = config_file.read_text(encoding="utf-8")
    if not text.strip():
        return FileConfig()
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {config_file.name}: {exc}") from exc
    if data is None:
        return FileConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    committer = _as_dict(data.get("committer"))
    return FileConfig(
        repo=_as_str(data.get("repo")),
        size=_as_int(data.get("size")),
        compact=_as_bool(data.get("compact")),
        shuffle=_as_bool(data.get("shuffle")),
        pick=_as_id_list(data.get("pick")),
        omit=_as_id_list(data.get("omit")),
        committer_name=_as_str(committer.get("name")),
        committer_email=_as_str(committer.get("email")),
    )


def normalize_options(
    argv: Mapping[str, Any],
    env: Mapping[str, str] | None = None,
    file_config: FileConfig | None = None,
) -> UpdateOptions:
    """Merge explicit arguments, environment defaults and file defaults."""
    env = env or {}
    defaults = file_config or FileConfig()

    user = _as_str(argv.get("user")) or env.get("GITHUB_USER") or None
    repository = _as_str(argv.get("repo")) or env.get("GITHUB_REPO") or defaults.repo
    if repository:
        owner, _, repo = repository.partition("/")
        if not (owner and repo):
            raise ConfigError(f"Repository must be given as owner/repo, got '{repository}'")
    else:
        owner, repo = user, user

    size = _as_int(argv.get("size"))
    if size is None:
        size = defaults.size if defaults.size is not None else DEFAULT_IMAGE_SIZE

    cwd = argv.get("cwd")
    return UpdateOptions(
        cwd=Path(cwd) if cwd else Path("."),
        token=_as_str(argv.get("token")) or env.get("GITHUB_TOKEN") or None,
        user=user,
        owner=owner or None,
        repo=repo or None,
        data_path=_as_str(argv.get("data")) or "",
        size=size,
        dryrun=bool(argv.get("dryrun")),
        compact=_first_bool(argv.get("compact"), defaults.compact),
        shuffle=_first_bool(argv.get("shuffle"), defaults.shuffle),
        pick=_as_id_list(argv.get("pick")) or list(defaults.pick),
        omit=_as_id_list(argv.get("omit")) or list(defaults.omit),
        committer_name=_as_str(argv.get("committer_name"))
        or defaults.committer_name
        or DEFAULT_COMMITTER_NAME,
        committer_email=_as_str(argv.get("committer_email"))
        or defaults.committer_email
        or DEFAULT_COMMITTER_EMAIL,
    )


def _first_bool(explicit: Any, fallback: Optional[bool]) -> bool:
    if explicit:
        return True
    return bool(fallback)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, (str, float)):
        try:
            return int(float(value))
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_id_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    if isinstance(value, Sequence):
        return [str(item).strip() for item in value if isinstance(item, (str, int)) and str(item).strip()]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "FileConfig",
    "UpdateOptions",
    "load_config",
    "normalize_options",
]
