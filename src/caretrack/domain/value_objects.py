"""Module including value objects used across the domain layer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time

from caretrack.domain.errors import InvalidIndexValueError

CARE_TYPE_MAX_LENGTH = 50
NOTES_MAX_LENGTH = 200


@dataclass(frozen=True, slots=True)
class Index:
    """A position in a displayed list.

    Users count from one; the lists behind them count from zero. Holding the
    zero-based offset and deriving the other keeps the two from drifting.
    """

    zero_based: int

    def __post_init__(self) -> None:
        if self.zero_based < 0:
            raise InvalidIndexValueError(self.zero_based, "zero-based")

    @classmethod
    def from_zero_based(cls, value: int) -> Index:
        """Build an index from a zero-based offset."""
        return cls(value)

    @classmethod
    def from_one_based(cls, value: int) -> Index:
        """Build an index from a one-based position (as typed by a user)."""
        if value < 1:
            raise InvalidIndexValueError(value, "one-based")
        return cls(value - 1)

    @property
    def one_based(self) -> int:
        """The position as shown to users."""
        return self.zero_based + 1


@dataclass(frozen=True, slots=True)
class CaringSession:
    """A scheduled care event for a patient.

    The care type is stored lower-cased and missing notes become an empty
    string, so two sessions built from differently-cased input compare equal.

    Two sessions *overlap* when date, time and care type agree; notes are
    ignored for that check but still take part in ``==``.
    """

    date: date
    time: time
    care_type: str
    notes: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "care_type", self.care_type.lower())
        if self.notes is None:
            object.__setattr__(self, "notes", "")

    def overlaps(self, other: CaringSession) -> bool:
        """Return True if *other* is scheduled for the same slot and care type."""
        return (
            self.date == other.date
            and self.time == other.time
            and self.care_type.casefold() == other.care_type.casefold()
        )

    @property
    def date_text(self) -> str:
        """The date as ``YYYY-MM-DD``."""
        return self.date.isoformat()

    @property
    def time_text(self) -> str:
        """The time as ``HH:MM``."""
        return self.time.isoformat(timespec="minutes")

    def __str__(self) -> str:
        text = f"{self.care_type} on {self.date_text} at {self.time_text}"
        if self.notes:
            text += f" ({self.notes})"
        return text
