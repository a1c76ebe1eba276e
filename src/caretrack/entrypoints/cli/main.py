"""caretrack CLI entry point.

Defines the top-level ``caretrack`` command (via Click-Extra) and registers
its subcommands:

- ``caretrack run WORDS...``: execute one command line.
- ``caretrack shell``: interactive session.
- ``caretrack db``: forward-only database management.

Examples
    $ caretrack run add-patient n/Alice Tan ic/S1234567A w/2A
    $ caretrack -v shell
    $ caretrack db status
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir
from sqlalchemy.exc import ArgumentError

from caretrack import __version__, config
from caretrack.logging import config_console_handler, config_flight_recorder, log_startup

from .db import db as db_group
from .db import sanitize_url
from .helpers import parse_log_level
from .records import run, shell

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """caretrack command-line interface.

    caretrack keeps a caregiver's records: the patients in their care and the
    caring sessions (medication rounds, check-ups, therapy...) scheduled for
    each of them. Records live in a local SQLite database unless
    CARETRACK_DB_URL points elsewhere.
    """

DEFAULT_LOG_PATH = Path(user_log_dir(config.APP_NAME, appauthor=False)) / "latest.log"


def _display_url() -> str:
    try:
        return sanitize_url(config.get_db_url(ensure_exists=False))
    except ArgumentError:
        return "<invalid URL>"


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the flight recorder's log file.",
    default=DEFAULT_LOG_PATH,
    envvar="CARETRACK_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="CARETRACK_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING/ERROR occurs, or on exit "
        "if --force-flush is set."
    ),
    default=True,
    envvar="CARETRACK_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit even if nothing went wrong.",
    default=False,
    show_default=True,
    envvar="CARETRACK_FORCE_FLUSH",
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L sqlalchemy=INFO "
        "-L caretrack=DEBUG) or via CARETRACK_LOGGER_LEVELS (comma/space list)."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
    envvar="CARETRACK_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def caretrack(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """caretrack command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # root captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
        db_url=_display_url(),
    )

    ctx.call_on_close(logging.shutdown)


caretrack.add_command(run)
caretrack.add_command(shell)
caretrack.add_command(db_group)
