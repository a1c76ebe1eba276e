"""Record-keeping commands: ``caretrack run`` and ``caretrack shell``.

Both speak the same command language (see ``caretrack run help``).
``run`` executes a single command line and exits non-zero when it is
rejected, which suits scripts. ``shell`` keeps reading lines until ``exit``
or end of input; a ``find-patient`` filter stays in effect across lines, so
later indexes refer to the filtered list.
"""

from __future__ import annotations

import logging

import click
from sqlalchemy.exc import ArgumentError, OperationalError

from caretrack.bootstrap.bootstrap import SchemaOutOfDateError, bootstrap
from caretrack.entrypoints.command_line import CommandDispatcher, Outcome

from .db import CANNOT_CONNECT_MSG, INVALID_URL_FORMAT_MSG, UPGRADE_SCHEMA_INSTRUCTIONS
from .helpers import error, print_patients

logger = logging.getLogger(__name__)

SHELL_PROMPT = "caretrack> "
SHELL_GREETING = "Welcome to caretrack. Type 'help' for commands, 'exit' to leave."


def build_dispatcher() -> CommandDispatcher:
    """Wire the application against the configured database.

    Raises:
        click.ClickException: If the database cannot be used as configured.
    """
    try:
        container = bootstrap()
    except SchemaOutOfDateError as e:
        raise click.ClickException(f"{e}\n{UPGRADE_SCHEMA_INSTRUCTIONS}") from e
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
    return CommandDispatcher(container.message_bus, container.clock)


def report(outcome: Outcome) -> None:
    """Show *outcome*: feedback and listings on stdout, failures on stderr."""
    if not outcome.ok:
        error(outcome.message)
        return
    click.echo(outcome.message)
    if outcome.patients is not None:
        print_patients(outcome.patients)


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("words", nargs=-1, required=True, type=click.UNPROCESSED)
def run(words: tuple[str, ...]) -> None:
    """Run a single command line, e.g.

    \b
      caretrack run add-patient n/Alice Tan ic/S1234567A w/2A
      caretrack run add-session 1 d/2099-01-01 t/09:00 type/medication
      caretrack run list-patients
    """
    dispatcher = build_dispatcher()
    outcome = dispatcher.execute(" ".join(words))
    report(outcome)
    if not outcome.ok:
        raise SystemExit(1)


@click.command()
def shell() -> None:
    """Read command lines interactively until 'exit' or end of input."""
    dispatcher = build_dispatcher()
    stdin = click.get_text_stream("stdin")

    click.echo(SHELL_GREETING, err=True)
    while True:
        click.echo(SHELL_PROMPT, nl=False, err=True)
        line = stdin.readline()
        if not line:
            click.echo(err=True)
            break
        if not line.strip():
            continue

        outcome = dispatcher.execute(line)
        report(outcome)
        if outcome.exit_requested:
            break

    logger.debug("Shell closed")
