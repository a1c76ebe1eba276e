"""Interface for clocks.

Parsing rejects session dates in the past, so "today" is a dependency rather
than a global: production code reads the wall clock, tests pin a date.
"""

import abc
from datetime import date

# pylint: disable=too-few-public-methods


class Clock(abc.ABC):
    """Contract for a source of the current calendar date."""

    @abc.abstractmethod
    def today(self) -> date:
        """Return the current local date."""
