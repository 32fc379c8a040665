"""Logging setup shared by the mybadges CLI and service."""

from __future__ import annotations

import logging
import re
from pathlib import Path

_LOGGER_NAME = "mybadges"

CONSOLE_FORMAT = "[mybadges] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_TOKEN_RE = re.compile(r"\b(?:gh[pousr]_[A-Za-z0-9]{20,}|github_pat_[A-Za-z0-9_]{20,})")


class TokenRedactingFilter(logging.Filter):
    """Masks GitHub tokens in a record's rendered message."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _TOKEN_RE.sub("<REDACTED>", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the mybadges hierarchy, e.g. ``mybadges.sync``."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | str | None = None
) -> logging.Logger:
    """Send mybadges records to stderr and, when log_file is set, to that file.

    Calling it again replaces the handlers installed by the previous call.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [_with_format(logging.StreamHandler(), CONSOLE_FORMAT)]
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(_with_format(logging.FileHandler(path, encoding="utf-8"), FILE_FORMAT))

    redactor = TokenRedactingFilter()
    for handler in handlers:
        handler.setLevel(level)
        handler.addFilter(redactor)
        logger.addHandler(handler)
    return logger


def _with_format(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    return handler


__all__ = ["TokenRedactingFilter", "configure_logging", "get_logger"]
