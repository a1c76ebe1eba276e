"""End-to-end tests for the top-level ``caretrack`` options.

Runs the test-only ``log-demo`` command under verbosity flags, logger-level
overrides, debug formatting and flight-recorder settings, and checks what
reaches the console and the log file.
"""

import re
from pathlib import Path

import pytest

from caretrack.entrypoints.cli.main import caretrack

# pylint: disable=unused-argument

LOG_PATH = "flight_recorder.log"


def assert_in_output(pattern: str, output: str) -> None:
    """Fail unless regex *pattern* occurs in *output*."""
    if not re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' not found in output:\n{output}")


def assert_not_in_output(pattern: str, output: str) -> None:
    """Fail if regex *pattern* occurs in *output*."""
    if re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' found in output:\n{output}")


def read_log(path: str = LOG_PATH) -> str:
    """Contents of the flight-recorder file."""
    return Path(path).read_text(encoding="utf-8")


@pytest.mark.parametrize(
    "flags, shown, hidden",
    [
        ([], "WARNING", "INFO"),
        (["-v"], "INFO", "DEBUG"),
        (["-vv"], "DEBUG", None),
        (["-q"], "ERROR", "WARNING"),
        (["-qq"], "CRITICAL", "ERROR"),
    ],
    ids=["default", "-v", "-vv", "-q", "-qq"],
)
def test_verbosity_flags(registered_log_demo, runner, fs, flags, shown, hidden):
    """Each -v lowers and each -q raises the console threshold by one level."""
    result = runner.invoke(caretrack, flags + ["log-demo"])
    assert result.exit_code == 0
    assert_in_output(shown, result.stderr)
    if hidden:
        assert_not_in_output(hidden, result.stderr)


def test_console_logging_stays_off_stdout(registered_log_demo, runner, fs):
    """Log records go to stderr so stdout carries only command output."""
    result = runner.invoke(caretrack, ["-vv", "log-demo"])
    assert result.exit_code == 0
    assert result.stdout == ""


def test_third_party_records_are_prefixed(registered_log_demo, runner, fs):
    """Records from other libraries are tagged with their top-level package."""
    result = runner.invoke(caretrack, ["log-demo"])
    assert_in_output(r"\[some\]", result.stderr)
    assert_not_in_output(r"\[caretrack", result.stderr)


@pytest.mark.parametrize(
    "env, cli_args",
    [
        ({}, ["-vv", "-L", "some.thirdparty=INFO"]),
        ({"CARETRACK_LOGGER_LEVELS": "some.thirdparty=INFO"}, ["-vv"]),
    ],
    ids=["cli-flag", "env-var"],
)
def test_logger_level_silences_debug(registered_log_demo, runner, fs, env, cli_args):
    """A logger-level override hides that logger's DEBUG but keeps its INFO."""
    result = runner.invoke(caretrack, cli_args + ["log-demo"], env=env)
    assert result.exit_code == 0
    assert_not_in_output("This is a debug-level third-party test message.", result.stderr)
    assert_in_output("This is an info-level third-party test message.", result.stderr)


def test_bad_logger_level_is_a_usage_error(registered_log_demo, runner, fs):
    """Malformed -L values are rejected before anything runs."""
    result = runner.invoke(caretrack, ["-L", "sqlalchemy=LOUD", "log-demo"])
    assert result.exit_code == 2
    assert "Invalid log level: LOUD" in result.output


@pytest.mark.parametrize("flags, expect_paths", [(["--debug"], True), ([], False)])
def test_debug_mode_shows_paths(registered_log_demo, runner, fs, flags, expect_paths):
    """--debug adds source paths and line numbers to console records."""
    result = runner.invoke(caretrack, flags + ["log-demo"])
    assert result.exit_code == 0
    if expect_paths:
        assert_in_output(r"conftest\.py:\d+\b", result.stderr)
    else:
        assert_not_in_output(r"conftest\.py:\d+\b", result.stderr)


def test_flight_recorder_flush_on_warning(registered_log_demo, runner, fs):
    """The buffer is written up to and including the first WARNING+ record."""
    result = runner.invoke(
        caretrack, ["--log-path", LOG_PATH, "-L", "some.thirdparty=INFO", "log-demo"]
    )
    assert result.exit_code == 0
    content = read_log()
    # DEBUG from caretrack loggers, regardless of console level
    assert_in_output("This is a debug-level test message.", content)
    # overrides apply to the recorder too
    assert_not_in_output("This is a debug-level third-party test message.", content)
    assert_in_output("This is an info-level third-party test message.", content)
    assert_in_output("This is a critical-level test message.", content)
    # nothing after the last flush
    assert_not_in_output("This is a final debug-level test message.", content)


@pytest.mark.parametrize(
    "env, cli_args",
    [({}, ["--force-flush"]), ({"CARETRACK_FORCE_FLUSH": "true"}, [])],
    ids=["cli-flag", "env-var"],
)
def test_flight_recorder_force_flush(registered_log_demo, runner, fs, env, cli_args):
    """With force-flush the trailing DEBUG records are written on exit."""
    result = runner.invoke(caretrack, ["--log-path", LOG_PATH] + cli_args + ["log-demo"], env=env)
    assert result.exit_code == 0
    assert_in_output("This is a final debug-level test message.", read_log())


@pytest.mark.parametrize(
    "env, cli_args",
    [({}, ["--no-flight-recorder"]), ({"CARETRACK_FLIGHT_RECORDER": "0"}, [])],
    ids=["cli-flag", "env-var"],
)
def test_flight_recorder_can_be_disabled(registered_log_demo, runner, fs, env, cli_args):
    """Without the flight recorder no log file is written."""
    result = runner.invoke(caretrack, ["--log-path", LOG_PATH] + cli_args + ["log-demo"], env=env)
    assert result.exit_code == 0
    assert not Path(LOG_PATH).exists()


def test_quiet_run_leaves_no_log_file(runner, fs):
    """A run with nothing worse than INFO never creates the log file."""
    result = runner.invoke(caretrack, ["--log-path", LOG_PATH, "run", "list-patients"])
    assert result.exit_code == 0, result.output
    assert not Path(LOG_PATH).exists()


def test_flight_recorder_truncates_log(registered_log_demo, runner, fs):
    """Each run overwrites the log file rather than appending."""
    line_counts = []
    for _ in range(2):
        result = runner.invoke(caretrack, ["--log-path", LOG_PATH, "log-demo"])
        assert result.exit_code == 0
        line_counts.append(len(read_log().splitlines()))

    assert line_counts[0] == line_counts[1]


def test_startup_logging(registered_log_demo, runner, fs):
    """The flight recorder captures the startup summary and environment."""
    result = runner.invoke(
        caretrack,
        ["--log-path", "startup.log", "--flight-recorder", "--force-flush", "log-demo"],
    )
    assert result.exit_code == 0
    content = read_log("startup.log")
    assert_in_output(r"caretrack \d+\.\d+\.\d+: console=WARNING, flight-recorder=ON", content)
    assert_in_output(r"Python: \d+\.\d+\.\d+", content)
    assert_in_output(r"Platform: .+", content)
    assert_in_output(r"PID: \d+", content)
    assert_in_output(r"CWD: .+", content)
    assert_in_output(r"Alembic: \d+\.\d+\.\d+", content)
    assert_in_output(r"SQLAlchemy: \d+\.\d+\.\d+", content)
    assert_in_output(r"Database: sqlite\+pysqlite:///caretrack\.db", content)
    assert_in_output(r"Handlers: \['RichHandler', 'MemoryHandler'\]", content)
    assert_in_output(
        r"Flight recorder: path=startup\.log, capacity=2000, flush_on_close=True",
        content,
    )
    assert_in_output(
        r"Per-logger overrides: {'sqlalchemy': 'WARNING', 'alembic': 'WARNING'}",
        content,
    )
