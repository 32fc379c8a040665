"""Tests for the logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

from mybadges.logging import configure_logging, get_logger


def test_configure_logging_replaces_handlers(tmp_path: Path) -> None:
    try:
        configure_logging(log_file=tmp_path / "first.log")
        logger = configure_logging(verbose=True)

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False
    finally:
        configure_logging()


def test_log_file_masks_github_tokens(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    token = "ghp_" + "a1B2" * 9
    try:
        configure_logging(log_file=log_file)
        get_logger("github").warning("GET failed for token %s", token)
    finally:
        configure_logging()

    text = log_file.read_text(encoding="utf-8")
    assert token not in text
    assert "GET failed for token <REDACTED>" in text
