"""Logging setup shared by every umlgen module.

Modules obtain their logger with ``get_logger(__name__)``; the command line
entry point calls ``setup_logging`` once to attach handlers.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "umlgen"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger inside the umlgen hierarchy."""
    if not name:
        return logging.getLogger(_LOGGER_NAME)
    if name != _LOGGER_NAME and not name.startswith(f"{_LOGGER_NAME}."):
        name = f"{_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(
    *, verbose: bool = False, log_file: str | Path | None = None
) -> logging.Logger:
    """Configure the umlgen logger with rich console output and an optional file.

    Args:
        verbose: Log at DEBUG instead of WARNING on the console.
        log_file: Optional path receiving a plain-text copy of every record.

    Returns:
        The configured package logger.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Calling twice must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True), show_path=False, rich_tracebacks=verbose
    )
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["get_logger", "setup_logging"]
