"""Logging helpers shared by the parser and the command-line interface."""

from __future__ import annotations

import logging
from typing import Final

__all__ = ["DEFAULT_LOG_FORMAT", "WithLogger", "configure_logging"]

DEFAULT_LOG_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: int | str = logging.WARNING, fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """Configure the root logger with a single stream handler.

    :param level: Numeric level or level name such as ``"DEBUG"``.
    :param fmt: Format string applied to the installed handler.
    :raises ValueError: If *level* is a string that is not a known level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            msg = f"{level!r} is not a valid logging level name"
            raise ValueError(msg)
        level = resolved

    logging.basicConfig(level=level, format=fmt, force=True)


class WithLogger:
    """Mixin providing a logger named after the concrete class."""

    _loggers: dict[type, logging.Logger] = {}

    @classmethod
    def _get_logger(cls) -> logging.Logger:
        """Return the cached logger of the class, creating it on first use."""
        if cls not in WithLogger._loggers:
            WithLogger._loggers[cls] = logging.getLogger(cls.__name__)
        return WithLogger._loggers[cls]

    @property
    def _logger(self) -> logging.Logger:
        return self._get_logger()
