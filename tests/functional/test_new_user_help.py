"""Functional tests for caretrack's help and version output.

The long-form ``HELP`` prose from :mod:`caretrack.entrypoints.cli.main` must
be rendered on ``--help`` (compared after stripping ANSI and collapsing
whitespace, since Click reflows it), and each subcommand lists its usage.
"""

from __future__ import annotations

import re
from textwrap import dedent
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

import caretrack
from caretrack.entrypoints.cli import main

if TYPE_CHECKING:
    from click.testing import Result

# pylint: disable=magic-value-comparison

ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")  # strip SGR styling only


def _normalize(s: str) -> str:
    """Return `s` with leading/trailing space trimmed and internal whitespace collapsed."""
    return re.sub(r"\s+", " ", s.strip())


def _assert_help_displayed(result: Result):
    """Help output holds the HELP prose, the usual sections and every subcommand."""
    text = ANSI_RE.sub("", result.output)
    expected_message = _normalize(dedent(main.HELP))
    assert expected_message
    assert expected_message in _normalize(text), "HELP text not rendered."
    assert "Usage:" in text
    assert "Options:" in text
    assert "Commands:" in text
    for name in ("run", "shell", "db"):
        assert re.search(rf"^\s+{name}\b", text, re.MULTILINE), f"{name} not listed"


class TestNewCaretrackUser:
    """A new caretrack user, unfamiliar with the tool, looks for help."""

    @staticmethod
    @pytest.mark.parametrize("args", (["-h"], ["--help"]))
    def test_caretrack_help_output(args: list[str]):
        """The long HELP prose and the subcommands appear on -h/--help."""
        result = CliRunner().invoke(main.caretrack, args)
        assert result.exit_code == 0, result.output
        _assert_help_displayed(result)

    @staticmethod
    def test_caretrack_version_output():
        """--version prints the package version."""
        result = CliRunner().invoke(main.caretrack, ["--version"])
        assert result.exit_code == 0
        assert caretrack.__version__ in result.output

    @staticmethod
    def test_run_help_shows_examples():
        """``run --help`` shows example command lines."""
        result = CliRunner().invoke(main.caretrack, ["run", "--help"])
        assert result.exit_code == 0, result.output
        text = ANSI_RE.sub("", result.output)
        assert "caretrack run add-session 1 d/2099-01-01 t/09:00 type/medication" in text

    @staticmethod
    def test_help_command_lists_the_command_language(sqlite_url_file, tmp_path):
        """``run help`` prints the usage of every record-keeping command."""
        runner = CliRunner(
            env={
                "CARETRACK_DB_URL": sqlite_url_file,
                "CARETRACK_LOG_PATH": str(tmp_path / "latest.log"),
            }
        )
        result = runner.invoke(main.caretrack, ["run", "help"])
        assert result.exit_code == 0, result.output
        for word in ("add-patient", "delete-patient", "add-session", "delete-session"):
            assert f"{word}:" in result.stdout
