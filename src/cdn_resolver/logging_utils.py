"""Centralized logging setup for the CLI.

The library modules only create module-level loggers; handlers and levels are
installed here so that importing ``cdn_resolver`` never touches the root
logger configuration.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict

from .constants import Constants

_HANDLER_ATTR = "_cdn_resolver_handler"


def _level_from_env() -> int:
    name = os.environ.get(Constants.ENV_LOG_LEVEL, "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Install a stream handler on the root logger.

    The level comes from CDN_RESOLVER_LOG_LEVEL (default INFO). Calling this
    more than once reuses the existing handler.
    """
    root = logging.getLogger()
    root.setLevel(_level_from_env())
    for handler in root.handlers:
        if getattr(handler, _HANDLER_ATTR, False):
            return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)


def add_file_handler(path: str) -> logging.Handler:
    """Also write log records to ``path``; returns the handler."""
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(Constants.FILE_LOG_FORMAT))
    logging.getLogger().addHandler(handler)
    return handler


def is_debug_enabled(logger: logging.Logger) -> bool:
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Structured fields for ``extra=``; None values are dropped."""
    return {key: value for key, value in fields.items() if value is not None}
