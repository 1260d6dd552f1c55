"""
Opt-in stdout logging for scripts and services using datum_enum.

datum_enum only creates module loggers (definition loads are logged at DEBUG)
and never installs handlers itself. Call `configure_logging()` once at startup
to see that output; level and format come from `EnumSettings`.
"""
from __future__ import annotations

import logging
import sys
from typing import Final

from .config import get_settings

DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
_CONFIGURED: bool = False


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, force: bool = False) -> None:
    """
    Attach a single stdout handler to the root logger.

    Repeated calls are no-ops unless `force` is set, in which case the root
    logger's existing handlers are replaced.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    settings = get_settings()
    root_logger = logging.getLogger()
    if force:
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=settings.log_format, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(_level_from_name(settings.log_level))

    _CONFIGURED = True


__all__ = ["configure_logging"]
