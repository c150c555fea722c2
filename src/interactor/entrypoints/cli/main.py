"""INTERACTOR CLI entry point.

Defines the top-level ``interactor`` command (via Click-Extra) and registers
its subcommands.

Currently available commands
- ``interactor run`` -- call a service by import target and report its outcome.

Examples
    $ interactor --version
    $ interactor run blog.services:create_post -p title=Hi -p body=There
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from interactor import __version__, config
from interactor.logging import config_console_handler, config_flight_recorder, log_startup

from .helpers import parse_log_level, warn
from .run import run as run_command

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """INTERACTOR command-line interface.

    Runs services built from a validator and a chain of fallible steps, and
    reports whether they succeeded or which failure they produced.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (logger names, timestamps and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path the flight recorder writes to.",
    default=None,
    envvar=config.LOG_PATH_ENV,
    show_envvar=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last DEBUG log records in memory and write them to --log-path "
        "when a WARNING/ERROR occurs (or on exit with --force-flush)."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit.",
    default=False,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum level of specific loggers (NAME=LEVEL). Repeatable "
        "(e.g. -L interactor.service_layer=DEBUG) or via INTERACTOR_LOGGER_LEVELS (comma/space list)."
    ),
    envvar="INTERACTOR_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def interactor(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path | None,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """INTERACTOR command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=ctx.color is not False)
    ]

    settings_error: config.InvalidSettingError | None = None
    capacity: int | None = None
    if flight_recorder:
        log_path = log_path or config.get_log_path()
        try:
            capacity = config.get_flight_recorder_capacity()
        except config.InvalidSettingError as e:
            settings_error = e
            capacity = config.DEFAULT_FLIGHT_RECORDER_CAPACITY
        handlers.append(
            config_flight_recorder(
                path=log_path, capacity=capacity, flush_on_close=force_flush
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    if settings_error is not None:
        warn(f"{settings_error}; using {config.DEFAULT_FLIGHT_RECORDER_CAPACITY}")

    log_startup(
        logger,
        app_version=__version__,
        command=ctx.invoked_subcommand,
        level=level,
        handlers=handlers,
        log_path=log_path,
        capacity=capacity,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


interactor.add_command(run_command)
