"""Clock fixtures: a "today" that does not move."""

from datetime import date

import pytest

from caretrack.adapters.clock import FixedClock

TODAY = date(2025, 1, 1)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """A clock stuck on :data:`TODAY`."""
    return FixedClock(TODAY)
