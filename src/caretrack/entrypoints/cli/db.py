"""caretrack DB CLI: forward-only Alembic wrappers.

Only commands that inspect the schema or move it forward are offered;
``downgrade`` and ``stamp`` are left out. Alembic's own output goes to
stdout and caretrack's notices to stderr.

The database is the one :func:`caretrack.config.get_db_url` names:
``CARETRACK_DB_URL`` when set, otherwise a SQLite file in the user data
directory.

Failure modes
- Malformed URL or unreachable database: ``ClickException`` with guidance.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError, OperationalError

from caretrack import config
from caretrack.adapters.db.engine import make_engine

from .helpers import error, success, warn

if TYPE_CHECKING:
    from alembic.config import Config
    from sqlalchemy.engine import Engine

INVALID_URL_FORMAT_MSG = (
    f"The value of {config.DB_URL_ENVVAR} is not a valid SQLAlchemy database URL."
)

CANNOT_CONNECT_MSG = (
    "The database is not reachable.\n"
    f"Please check {config.DB_URL_ENVVAR} (or unset it to use the default "
    "local database)."
)

UPGRADE_SCHEMA_WARNING = (
    "This will upgrade the database schema to the latest version.\n"
    "Please ensure you have a backup before proceeding."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'caretrack db upgrade' to update the schema."


class MigrationStatus(Enum):
    """Where the database schema stands relative to the packaged migrations."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"


def sanitize_url(url: str) -> str:
    """Render *url* with any password replaced by ``***``."""
    return make_url(url).render_as_string(hide_password=True)


def _check_connection(url: str) -> None:
    engine = make_engine(url)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))  # pragma: no mutate
    finally:
        engine.dispose()


def get_checked_url() -> str:
    """Return the configured database URL after checking it can be reached.

    Raises:
        click.ClickException: If the URL is malformed or the database is
            unreachable.
    """
    url = config.get_db_url()
    try:
        _check_connection(url)
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
    return url


def _get_current_revision(engine: Engine) -> str | None:
    with engine.connect() as conn:
        return MigrationContext.configure(conn).get_current_revision()


def _get_head_revision(cfg: Config) -> str | None:
    return ScriptDirectory.from_config(cfg).get_current_head()


def migration_status(current: str | None, head: str | None) -> MigrationStatus:
    """Classify the schema revision *current* against *head*."""
    if current is None:
        return MigrationStatus.UNINITIALIZED
    if current == head:
        return MigrationStatus.UP_TO_DATE
    return MigrationStatus.OUT_OF_DATE


_verbose_option = click.option(
    "--verbose",
    "-v",
    "verbose",
    is_flag=True,
    help="Show alembic's more verbose output.",
)


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
@_verbose_option
def current(verbose: bool) -> None:
    """Show current DB revision."""
    cfg = config.build_alembic_config(db_url=get_checked_url(), stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
@_verbose_option
def heads(verbose: bool) -> None:
    """Show available head revisions."""
    cfg = config.build_alembic_config(stdout=sys.stdout)
    command.heads(cfg, verbose=verbose)


@db.command()
@_verbose_option
@click.option(
    "--indicate-current",
    "-i",
    "indicate_current",
    is_flag=True,
    help="Indicate the current revision.",
)
def history(verbose: bool, indicate_current: bool) -> None:
    """Show revision history."""
    url = get_checked_url() if indicate_current else None
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    command.history(cfg, verbose=verbose, indicate_current=indicate_current)


@db.command()
@click.option("--sql", is_flag=True, help="Generate SQL without executing.")
@click.option("--force", is_flag=True, help="Upgrade without confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Upgrade the database to the head revision."""
    url = get_checked_url()
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    if not force and not sql:
        warn(UPGRADE_SCHEMA_WARNING)
        click.echo(f"db: {click.style(sanitize_url(url), underline=True)}", err=True)
        click.confirm("Are you sure you want to proceed?", abort=True, err=True)
    command.upgrade(cfg, revision="head", sql=sql)
    if not sql:
        success("Upgrade complete!")


@db.command()
def status() -> None:
    """Show database connection and schema status."""
    try:
        url = get_checked_url()
    except click.ClickException as e:
        error("Cannot connect to database")
        click.echo(e.format_message())
        sys.exit(1)

    success("Database reachable")
    engine = make_engine(url)
    try:
        click.echo(f"Backend : {engine.dialect.name}")
        click.echo(f"URL     : {sanitize_url(url)}")
        current_rev = _get_current_revision(engine)
    finally:
        engine.dispose()

    head = _get_head_revision(config.build_alembic_config(db_url=url))
    state = migration_status(current_rev, head)
    shown = f"{current_rev} ({state.value})" if current_rev else state.value
    click.echo(f"Schema  : {shown}")

    if state is not MigrationStatus.UP_TO_DATE:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)
