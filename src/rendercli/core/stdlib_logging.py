from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "rendercli"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_INSTALLED_HANDLER: logging.Handler | None = None


def _level_from_name(name: str) -> int:
    level = getattr(logging, str(name).upper(), None)
    if isinstance(level, int):
        return level
    return logging.WARNING


def configure_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> logging.Handler:
    """Install the rendercli log handler on the ``rendercli`` logger.

    Logs go to ``log_path`` when given, otherwise to stderr. Stdout is never
    used because it carries command output. Calling this again replaces the
    handler installed by the previous call.
    """
    global _INSTALLED_HANDLER

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_level_from_name(level))
    logger.propagate = False

    if _INSTALLED_HANDLER is not None:
        logger.removeHandler(_INSTALLED_HANDLER)
        _INSTALLED_HANDLER.close()
        _INSTALLED_HANDLER = None

    handler: logging.Handler
    if log_path is not None:
        path = Path(log_path).expanduser().resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    _INSTALLED_HANDLER = handler
    return handler


def reset_logging_for_tests() -> None:
    """Test-only: drop the installed handler and restore defaults."""
    global _INSTALLED_HANDLER
    logger = logging.getLogger(LOGGER_NAME)
    if _INSTALLED_HANDLER is not None:
        logger.removeHandler(_INSTALLED_HANDLER)
        _INSTALLED_HANDLER.close()
        _INSTALLED_HANDLER = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


__all__ = ["configure_logging", "reset_logging_for_tests", "LOGGER_NAME", "LOG_FORMAT"]
