"""Logging for the scrollmarks package.

The scanner is mostly embedded in editor hosts, so the package logger only
carries a ``NullHandler`` and leaves routing to the host. The command-line
entrypoint calls :func:`configure_logging` to get console output.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional

_LOGGER_NAME = "scrollmarks"
_CONSOLE_FORMAT = "%(levelname)-7s %(name)s: %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())


class _CliHandlerMixin:
    """Marks handlers installed by configure_logging."""


class _CliStreamHandler(_CliHandlerMixin, logging.StreamHandler):
    pass


class _CliFileHandler(_CliHandlerMixin, logging.FileHandler):
    pass


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``scrollmarks.<name>``, or the package logger when ``name`` is empty."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Send scrollmarks records to ``stream`` (stderr by default) and ``log_file``.

    Repeated calls replace the handlers installed by earlier calls. Handlers
    attached by a host are left in place.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = reset_logging()
    logger.setLevel(level)
    logger.propagate = False

    handlers: list[logging.Handler] = [_CliStreamHandler(stream)]
    if log_file is not None:
        handlers.append(_CliFileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        fmt = _FILE_FORMAT if isinstance(handler, logging.FileHandler) else _CONSOLE_FORMAT
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    return logger


def reset_logging() -> logging.Logger:
    """Drop the handlers from :func:`configure_logging` and propagate to root again."""
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, _CliHandlerMixin):
            logger.removeHandler(handler)
            handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    return logger


__all__ = ["configure_logging", "get_logger", "reset_logging"]
