"""Logging setup shared by every module of the avl-trees project.

All module loggers are children of the ``avl_trees`` project logger. The
project logger is configured once, writes to stdout (and optionally to a
file) and does not propagate to the root logger. Its initial level can be
preset with the ``AVL_TREES_LOG_LEVEL`` environment variable.
"""

import logging
import os
import sys
from typing import Optional, Union

PROJECT_LOGGER = "avl_trees"
LEVEL_ENV_VAR = "AVL_TREES_LOG_LEVEL"
DEFAULT_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def _resolve_level(level: Union[int, str, None]) -> int:
    """Map a level name or number to a logging level; None reads the environment."""
    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR, "INFO")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level!r}")
        return resolved
    return level


def setup_logging(
    level: Union[int, str, None] = None,
    format_string: Optional[str] = None,
    handler_type: str = "stream",
    log_file: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Configure the ``avl_trees`` project logger.

    Args:
        level: Level number or name. Defaults to ``$AVL_TREES_LOG_LEVEL``
            or INFO.
        format_string: Record format (optional)
        handler_type: "stream", "file", "both" or "none"
        log_file: Target file for the "file" and "both" handler types
        force: Close and replace handlers attached by an earlier call

    Returns:
        The project logger. Without ``force``, calling again after
        handlers were attached returns it unchanged.
    """
    logger = logging.getLogger(PROJECT_LOGGER)
    if logger.handlers and not force:
        return logger

    if handler_type not in ("stream", "file", "both", "none"):
        raise ValueError(f"Unknown handler type: {handler_type!r}")
    if handler_type in ("file", "both") and log_file is None:
        raise ValueError(f"handler_type={handler_type!r} requires log_file")

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)
    handlers = []
    if handler_type in ("stream", "both"):
        handlers.append(logging.StreamHandler(sys.stdout))
    if handler_type in ("file", "both"):
        handlers.append(logging.FileHandler(log_file, mode="w"))
    if not handlers:
        handlers.append(logging.NullHandler())

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(_resolve_level(level))
    logger.propagate = False
    return logger


def set_level(level: Union[int, str]) -> None:
    """Change the project logger's level, e.g. from a ``--log-level`` flag."""
    logging.getLogger(PROJECT_LOGGER).setLevel(_resolve_level(level))


def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for a module of the package.

    ``name`` may be a bare component name ("AVLTree") or a dotted module
    name that already starts with ``avl_trees`` (``__name__``).
    """
    if not logging.getLogger(PROJECT_LOGGER).handlers:
        setup_logging()

    if name == PROJECT_LOGGER or name.startswith(PROJECT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PROJECT_LOGGER}.{name}")


def get_test_logger(name: str) -> logging.Logger:
    """Return a ``Tests.<name>`` logger with its own stderr handler at INFO."""
    logger = logging.getLogger(f"Tests.{name}")

    if not logger.hasHandlers():
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(message)s'))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False

    return logger
