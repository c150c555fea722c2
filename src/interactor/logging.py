"""Logging helpers used by the INTERACTOR command-line tool.

The library only emits records through module loggers; it never installs
handlers. The CLI calls the helpers below to get Rich console output and an
in-memory "flight recorder" that buffers records and writes them to disk when
something goes wrong.
"""

from __future__ import annotations

import logging
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import click_extra
import pydantic
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "interactor"


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries with a short bracketed prefix.

    Records from ``interactor.*`` loggers get an empty prefix; anything else
    gets e.g. ``"[pydantic]"``. The filter never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (DEBUG in debug mode).
        debug_mode: Show timestamps, logger names and source paths.
        color: Enable color output when True.

    Returns:
        RichHandler: Handler to attach to the root logger.
    """

    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = "%(asctime)s %(name)s: %(message)s" if debug_mode else "%(prefix)s %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))
    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure an in-memory buffer of log records backed by ``path``.

    Up to ``capacity`` records are kept. The buffer is written out when a
    record at ``flush_level`` or above arrives, or on close when
    ``flush_on_close`` is True.
    """

    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    command: str | None,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    capacity: int | None,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line startup summary followed by DEBUG diagnostics.

    ``capacity`` is None when the flight recorder is off.
    """

    logger.info(
        "INTERACTOR %s %s: console=%s, flight-recorder=%s",
        app_version,
        command or "<no command>",
        logging.getLevelName(level),
        f"ON ({capacity} records)" if capacity else "OFF",
    )

    logger.debug("Python %s on %s", sys.version.split()[0], platform.system())
    logger.debug("click-extra %s, pydantic %s", click_extra.__version__, pydantic.VERSION)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if capacity:
        logger.debug("Flight recorder writes to %s", log_path or "<none>")
    for name, lvl in logger_levels.items():
        logger.debug("Logger %s set to %s", name, logging.getLevelName(lvl))
