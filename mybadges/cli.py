"""CLI entrypoint for mybadges."""

from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from pathlib import Path

from .config import ConfigError, load_config, normalize_options
from .errors import MyBadgesError
from .logging import configure_logging
from .updater import update


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mybadges",
        description="Generate achievement badges and publish them into a profile repository.",
    )
    parser.add_argument(
        "user",
        nargs="?",
        default=None,
        help="GitHub username (defaults to $GITHUB_USER).",
    )
    parser.add_argument("--token", help="GitHub token (defaults to $GITHUB_TOKEN).")
    parser.add_argument(
        "--repo",
        help="Target repository as owner/repo (defaults to $GITHUB_REPO, then user/user).",
    )
    parser.add_argument("--data", default="", help="Read the user snapshot from this JSON file.")
    parser.add_argument("--size", type=int, default=None, help="README image size in pixels.")
    parser.add_argument(
        "--dryrun",
        "--dry-run",
        dest="dryrun",
        action="store_true",
        help="Read and write files under the working directory instead of GitHub.",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Store terse badge descriptions in the manifest.",
    )
    parser.add_argument("--shuffle", action="store_true", help="Randomize badge order.")
    parser.add_argument("--pick", default=None, help="Comma-separated badge ids to evaluate.")
    parser.add_argument("--omit", default=None, help="Comma-separated badge ids to skip.")
    parser.add_argument("--cwd", default=None, help="Working directory for data and dry runs.")
    parser.add_argument("--committer-name", dest="committer_name", default=None)
    parser.add_argument("--committer-email", dest="committer_email", default=None)
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write timestamped logs to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for mybadges."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    cwd = Path(args.cwd or os.getcwd())
    try:
        file_config = load_config(cwd)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    arguments = vars(args)
    arguments["cwd"] = cwd
    try:
        options = normalize_options(arguments, os.environ, file_config)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    try:
        result = asyncio.run(update(options))
    except MyBadgesError as exc:
        parser.exit(1, f"mybadges failed: {exc}\n")
    except RuntimeError as exc:
        parser.exit(1, f"mybadges failed: {exc}\nRun with --verbose for more details.\n")

    print(json.dumps([badge.to_dict() for badge in result.badges], indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main(sys.argv[1:])
