"""Clock adapters for CARETRACK."""

from datetime import date

from caretrack.interfaces.clock import Clock

# pylint: disable=too-few-public-methods


class SystemClock(Clock):
    """Reads the local wall-clock date."""

    def today(self) -> date:
        return date.today()


class FixedClock(Clock):
    """Always reports the same date.

    Note:
        Intended for tests and demos where "today" must not move.
    """

    def __init__(self, today: date) -> None:
        self._today = today

    def today(self) -> date:
        return self._today
