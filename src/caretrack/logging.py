"""Logging setup for the caretrack CLI.

Two handlers hang off the root logger:

- a Rich console handler on stderr whose level follows ``-v``/``-q``, and
- an optional in-memory *flight recorder* that keeps recent DEBUG records and
  writes them to a file once something goes wrong (WARNING or worse), so a
  failed run leaves a full trail behind without cluttering the console.

Records from other libraries get a short ``[lib]`` prefix on the console.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "caretrack"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[lib]`` for records from outside caretrack.

    Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            # "sqlalchemy.engine.Engine" -> "[sqlalchemy]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the console handler.

    Args:
        level: Minimum level shown on the console. Ignored in debug mode,
            which always shows DEBUG.
        debug_mode: Show timestamps, logger names and source paths.
        color: Allow colored output; mirrors Click-Extra's ``--color/--no-color``.

    Returns:
        RichHandler: A handler writing to stderr.
    """
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

    if debug_mode:
        handler.setFormatter(
            logging.Formatter(fmt="%(asctime)s %(name)s: %(message)s")
        )
    else:
        handler.setFormatter(logging.Formatter(fmt="%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder.

    Buffers up to *capacity* records and writes them to *path* when a record
    at *flush_level* or above arrives, or when the handler closes if
    *flush_on_close* is set. The file is opened lazily, so runs that never
    flush leave no empty log behind.

    Args:
        path: File the buffer is written to (overwritten per run).
        capacity: Number of records kept in memory.
        flush_level: Level that triggers a write.
        flush_on_close: Also write the buffer on shutdown.

    Returns:
        MemoryHandler: A buffering handler targeting a file handler.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] "
            "%(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
    db_url: str | None = None,
) -> None:
    """Log a one-line INFO summary and DEBUG-level environment details.

    Args:
        logger: Logger to write to.
        app_version: caretrack version.
        level: Effective console level.
        handlers: Handlers attached to the root logger.
        log_path: Flight-recorder file, if any.
        flight_recorder: Whether the flight recorder is on.
        flight_capacity: Flight-recorder buffer size, if on.
        force_flush_fr: Whether the buffer is written on shutdown.
        logger_levels: Per-logger level overrides.
        db_url: Database URL with any password already hidden.
    """
    logger.info(
        "caretrack %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Alembic: %s", alembic.__version__)
    logger.debug("SQLAlchemy: %s", sqlalchemy.__version__)
    logger.debug("Database: %s", db_url or "<default>")
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            str(log_path) if log_path else "<none>",
            flight_capacity,
            force_flush_fr,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
