"""
Logging helpers for raytracing.

Library modules obtain a logger via ``logging.getLogger(__name__)`` and never
configure handlers. Scripts that want output call ``setup_default_logging``
once at start-up.
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "raytracing"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str = "INFO") -> logging.Logger:
    """
    Install a stderr handler on the root logger unless one already exists,
    and set the ``raytracing`` logger to ``level``.

    Args:
        level: Level name (``"DEBUG"``, ``"info"``, ...) or numeric level.
            Unknown names fall back to INFO.

    Returns:
        The ``raytracing`` package logger.
    """
    lvl = _resolve_level(level)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=lvl, format=DEFAULT_FORMAT)

    # set even when the app owns the root handlers
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(lvl)
    return package_logger


__all__ = ["setup_default_logging", "PACKAGE_LOGGER"]
