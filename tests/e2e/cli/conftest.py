"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages at
every level, fixtures to register it, and a CliRunner whose database and
flight-recorder file live inside an isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from caretrack.entrypoints.cli.main import caretrack

# pylint: disable=redefined-outer-name

RUNNER_ENV = {
    "CARETRACK_DB_URL": "sqlite+pysqlite:///caretrack.db",
    "CARETRACK_LOG_PATH": "latest.log",
}


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests.

    Emits DEBUG/INFO/WARNING/ERROR/CRITICAL messages on the 'caretrack.demo'
    logger and additional messages on a 'some.thirdparty' logger to exercise
    logger-level filtering and flight-recorder behavior.
    """
    logger = logging.getLogger("caretrack.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any sections Click-Extra keeps."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `caretrack` for one test."""
    caretrack.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(caretrack, "log-demo")


@pytest.fixture
def runner():
    """A CliRunner with a relative database URL and log path.

    Combined with :func:`fs`, both files land in the test's isolated
    directory.
    """
    return CliRunner(env=RUNNER_ENV)


@pytest.fixture
def fs(runner):
    """Run the test inside ``runner.isolated_filesystem()``."""
    with runner.isolated_filesystem():
        yield
