"""Logging setup for applications and the CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"
QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str = "INFO", console: Console | None = None) -> None:
    """
    Configure root logging with a rich handler.

    The library itself only creates module loggers; call this from an
    application entry point. httpx and httpcore are held at WARNING unless
    DEBUG is requested.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )

    quiet_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)
