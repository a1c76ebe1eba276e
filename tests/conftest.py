"""Global pytest fixtures for CARETRACK."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.clock",
    "tests.fixtures.datagen",
    "tests.fixtures.bus",
]


TESTS_ROOT = Path(__file__).parent.resolve()

# Top-level suite directory -> default marker
SUITE_MARKERS = ("unit", "integration", "functional", "e2e", "contract")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Mark each test with the suite its top-level directory names.

    Explicit marks win: a test already carrying a suite marker is left alone.
    """
    for item in items:
        try:
            suite = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if suite not in SUITE_MARKERS:
            continue
        if not any(item.iter_markers(name=suite)):
            item.add_marker(getattr(pytest.mark, suite))


# Helper to route to an existing engine fixture by name
@pytest.fixture
def engine(request: pytest.FixtureRequest) -> Engine:
    """Indirection fixture to parametrize over engine-providing fixtures.

    Example:
        ```py
        @pytest.mark.parametrize(
            "engine", ["sqlite_engine_memory", "sqlite_engine_file"], indirect=True
        )
        def test_something(engine): ...
        ```
    """
    return request.getfixturevalue(request.param)
