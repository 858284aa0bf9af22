"""Opt-in log routing for the ``mutable_string`` logger hierarchy.

Handlers are attached to the package logger only. The root logger and any
handlers the host application installed there are left alone, and records
still propagate to them.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..services.settings import Settings

__all__ = [
    "PACKAGE_LOGGER",
    "setup_logging",
    "setup_logging_from_settings",
    "reset_logging",
    "get_logger",
    "get_log_path",
]

PACKAGE_LOGGER = "mutable_string"
_DEFAULT_LOG_DIR = Path.home() / ".mutable_string" / "logs"
_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_CONFIGURED = False
_LOG_PATH: Path | None = None
_INSTALLED: list[logging.Handler] = []


def setup_logging(
    level: int = logging.INFO,
    *,
    log_dir: Path | str | None = None,
    console: bool = True,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
    force: bool = False,
) -> Path:
    """Route ``mutable_string.*`` records to a rotating file and optionally stderr.

    Calling again is a no-op unless ``force`` is set, in which case the
    handlers installed by the previous call are replaced.
    """

    global _CONFIGURED, _LOG_PATH
    if _CONFIGURED and not force and _LOG_PATH is not None:
        return _LOG_PATH

    reset_logging()

    target_dir = _resolve_log_dir(log_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    log_path = target_dir / "mutable_string.log"
    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    file_handler = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    _INSTALLED.append(file_handler)
    if console:
        _INSTALLED.append(logging.StreamHandler())

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in _INSTALLED:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    _CONFIGURED = True
    _LOG_PATH = log_path
    return log_path


def setup_logging_from_settings(settings: Settings, *, force: bool = False) -> Path:
    """Configure logging using the level, directory and console flag from ``settings``."""

    return setup_logging(
        settings.log_level,
        log_dir=settings.log_dir,
        console=settings.console_logging,
        force=force,
    )


def reset_logging() -> None:
    """Detach and close the handlers installed by :func:`setup_logging`."""

    global _CONFIGURED, _LOG_PATH
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    while _INSTALLED:
        handler = _INSTALLED.pop()
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    _CONFIGURED = False
    _LOG_PATH = None


def get_logger(name: str) -> logging.Logger:
    """Return a module-specific logger."""

    return logging.getLogger(name)


def get_log_path() -> Path | None:
    """Return the currently configured log file if available."""

    return _LOG_PATH


def _resolve_log_dir(log_dir: Path | str | None) -> Path:
    env_override = os.environ.get("MUTABLE_STRING_LOG_DIR")
    return Path(log_dir or env_override or _DEFAULT_LOG_DIR).expanduser()
