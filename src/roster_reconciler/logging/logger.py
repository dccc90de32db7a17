"""
Centralized logging for the roster reconciler.

Every module asks for ``get_logger("<area>")`` and receives a child of the
``roster_reconciler`` logger, so one set of handlers serves the whole package:

* a console handler (stderr, so JSON on stdout stays clean);
* when ``logging.to_file`` is set in ``config/roster_reconciler.yml``, a master
  log file plus one file per area (``logs/roster_reconciler_matching.log``);
* optional size-based rotation (``logging.rotate``).

``debug: true`` in the config, or ``configure_logging(verbose=True)`` from the
CLI, lowers everything to DEBUG.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from roster_reconciler.config import get_config

# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

BASE_LOGGER_NAME = "roster_reconciler"
PROJECT_ROOT = Path(__file__).resolve().parents[3]
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5


@dataclass
class _LogSettings:
    level: int = logging.INFO
    to_file: bool = False
    rotate: bool = False
    log_dir: Path = PROJECT_ROOT / "logs"
    master_file: str = "roster_reconciler.log"


_settings: Optional[_LogSettings] = None
_area_loggers: Dict[str, Logger] = {}


# -----------------------------------------------------------------------------
# Setup
# -----------------------------------------------------------------------------

def _read_settings(verbose: bool) -> _LogSettings:
    cfg = get_config()
    section = cfg.logging

    level_name = str(section.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    if verbose or cfg.debug:
        level = logging.DEBUG

    log_dir = Path(section.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    return _LogSettings(
        level=level,
        to_file=bool(section.get("to_file", False)),
        rotate=bool(section.get("rotate", False)),
        log_dir=log_dir,
        master_file=str(section.get("file", "roster_reconciler.log")),
    )


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _file_handler(path: Path, settings: _LogSettings) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    if settings.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=ROTATE_MAX_BYTES, backupCount=ROTATE_BACKUPS, encoding="utf-8"
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(settings.level)
    handler.setFormatter(_formatter())
    return handler


def configure_logging(*, verbose: bool = False) -> Logger:
    """Install the base handlers once; later calls return the configured logger."""
    global _settings

    base = logging.getLogger(BASE_LOGGER_NAME)
    if _settings is not None:
        if verbose:
            enable_debug()
        return base

    _settings = _read_settings(verbose)
    base.setLevel(_settings.level)
    base.propagate = False

    console = StreamHandler()
    console.setLevel(_settings.level)
    console.setFormatter(_formatter())
    base.addHandler(console)

    if _settings.to_file:
        base.addHandler(_file_handler(_settings.log_dir / _settings.master_file, _settings))

    return base


def enable_debug() -> None:
    """Lower every installed logger and handler to DEBUG."""
    configure_logging()
    _settings.level = logging.DEBUG
    loggers = [logging.getLogger(BASE_LOGGER_NAME), *_area_loggers.values()]
    for logger in loggers:
        logger.setLevel(logging.DEBUG)
        for handler in logger.handlers:
            handler.setLevel(logging.DEBUG)


def _prepare_area_logger(logger: Logger, name: str) -> None:
    logger.setLevel(_settings.level)
    logger.propagate = True
    if _settings.to_file:
        filename = f"{name.replace('.', '_')}.log"
        logger.addHandler(_file_handler(_settings.log_dir / filename, _settings))


def _qualify(name: str) -> str:
    if name == BASE_LOGGER_NAME or name.startswith(BASE_LOGGER_NAME + "."):
        return name
    return f"{BASE_LOGGER_NAME}.{name}"


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return the package logger, or the child logger for one area."""
    base = configure_logging()
    qualified = _qualify(name or BASE_LOGGER_NAME)
    if qualified == BASE_LOGGER_NAME:
        return base

    logger = _area_loggers.get(qualified)
    if logger is None:
        logger = logging.getLogger(qualified)
        _prepare_area_logger(logger, qualified)
        _area_loggers[qualified] = logger
    return logger


def log_debug(message: str, *args, **kwargs) -> None:
    get_logger().debug(message, *args, **kwargs)


def log_info(message: str, *args, **kwargs) -> None:
    get_logger().info(message, *args, **kwargs)


def log_warning(message: str, *args, **kwargs) -> None:
    get_logger().warning(message, *args, **kwargs)


def log_error(message: str, *args, **kwargs) -> None:
    get_logger().error(message, *args, **kwargs)


def list_active_loggers() -> List[str]:
    """Area loggers handed out so far; handy when checking configuration in tests."""
    return sorted(_area_loggers)
