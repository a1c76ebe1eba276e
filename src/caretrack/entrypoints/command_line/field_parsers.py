"""Parsers for individual command fields.

Each parser takes the raw text of one field and either returns a typed value
or raises the :class:`~.errors.ParseError` subclass describing the first
constraint it broke.

Dates and times accept several formats. Each format is a *candidate*: a
function returning the parsed value, or ``None`` when the text is not in that
format. Candidates are tried in order and the first value wins, so the order
of :data:`DATE_CANDIDATES` decides how ambiguous text such as ``03-04-2025``
is read.
"""

from __future__ import annotations

import calendar
import re
from collections.abc import Callable, Sequence
from datetime import date, time
from typing import TypeVar

from caretrack.domain.value_objects import CARE_TYPE_MAX_LENGTH, NOTES_MAX_LENGTH, Index
from caretrack.interfaces.clock import Clock

from .errors import (
    CareTypeCharsetError,
    CareTypeLengthError,
    InvalidDateFormatError,
    InvalidIcError,
    InvalidIndexError,
    InvalidNameError,
    InvalidTimeFormatError,
    InvalidWardError,
    NotesLengthError,
    PastDateError,
)

T = TypeVar("T")

NAME_MAX_LENGTH = 100
WARD_MAX_LENGTH = 20

_INDEX_RE = re.compile(r"[0-9]+", re.ASCII)
_CARE_TYPE_RE = re.compile(r"[\w\s-]+", re.ASCII)
_NAME_RE = re.compile(r"[A-Za-z][A-Za-z '.-]*")
_IC_RE = re.compile(r"[A-Za-z][0-9]{7}[A-Za-z]", re.ASCII)
_WARD_RE = re.compile(r"[A-Za-z0-9-]+", re.ASCII)


# --- candidates ---


def _calendar_date(year: int, month: int, day: int) -> date | None:
    if year < 1 or not (1 <= month <= 12):
        return None
    if not (1 <= day <= calendar.monthrange(year, month)[1]):
        return None
    return date(year, month, day)


def _year_first(text: str) -> date | None:
    """``YYYY-MM-DD``"""
    match = re.fullmatch(r"(\d{4})-(\d{2})-(\d{2})", text, re.ASCII)
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    return _calendar_date(year, month, day)


def _day_first(text: str) -> date | None:
    """``DD-MM-YYYY``"""
    match = re.fullmatch(r"(\d{2})-(\d{2})-(\d{4})", text, re.ASCII)
    if match is None:
        return None
    day, month, year = (int(part) for part in match.groups())
    return _calendar_date(year, month, day)


def _clock_time(hour: int, minute: int) -> time | None:
    if 0 <= hour <= 23 and 0 <= minute <= 59:
        return time(hour, minute)
    return None


def _twenty_four_hour(text: str) -> time | None:
    """``H:MM`` from 0:00 to 23:59."""
    match = re.fullmatch(r"(\d{1,2}):(\d{2})", text, re.ASCII)
    if match is None:
        return None
    return _clock_time(int(match.group(1)), int(match.group(2)))


def _twelve_hour(separator: str) -> Callable[[str], time | None]:
    pattern = re.compile(rf"(\d{{1,2}}):(\d{{2}}){separator}(am|pm)", re.ASCII)

    def candidate(text: str) -> time | None:
        match = pattern.fullmatch(text)
        if match is None:
            return None
        hour, minute, meridiem = int(match.group(1)), int(match.group(2)), match.group(3)
        if not (1 <= hour <= 12):
            return None
        hour %= 12
        if meridiem == "pm":
            hour += 12
        return _clock_time(hour, minute)

    return candidate


DATE_CANDIDATES: tuple[Callable[[str], date | None], ...] = (_year_first, _day_first)

TIME_CANDIDATES: tuple[Callable[[str], time | None], ...] = (
    _twenty_four_hour,
    _twelve_hour(""),
    _twelve_hour(" "),
)


def first_match(text: str, candidates: Sequence[Callable[[str], T | None]]) -> T | None:
    """Return the value from the first candidate that accepts *text*."""
    for candidate in candidates:
        value = candidate(text)
        if value is not None:
            return value
    return None


# --- shared ---


def parse_index(text: str) -> Index:
    """Parse a one-based position typed by the user.

    Raises:
        InvalidIndexError: If *text* is not a positive whole number without sign.
    """
    trimmed = text.strip()
    if not _INDEX_RE.fullmatch(trimmed) or int(trimmed) == 0:
        raise InvalidIndexError(text)
    return Index.from_one_based(int(trimmed))


# --- caring sessions ---


def parse_date(text: str, clock: Clock) -> date:
    """Parse a session date in ``YYYY-MM-DD`` or ``DD-MM-YYYY`` form.

    ``YYYY-MM-DD`` is tried first. Today's date is accepted. Days past the
    end of the month are rejected, not clamped: ``2025-02-30`` is an
    invalid format, never 28 February.

    Raises:
        InvalidDateFormatError: If *text* is in neither form or names no real day.
        PastDateError: If the date is before ``clock.today()``.
    """
    trimmed = text.strip()
    parsed = first_match(trimmed, DATE_CANDIDATES)
    if parsed is None:
        raise InvalidDateFormatError(text)
    if parsed < clock.today():
        raise PastDateError(text)
    return parsed


def parse_time(text: str) -> time:
    """Parse a session time as ``H:MM`` (24h), ``H:MMam`` or ``H:MM am``.

    Matching ignores case.

    Raises:
        InvalidTimeFormatError: If *text* is in none of the accepted forms.
    """
    parsed = first_match(text.strip().lower(), TIME_CANDIDATES)
    if parsed is None:
        raise InvalidTimeFormatError(text)
    return parsed


def parse_type(text: str) -> str:
    """Parse a care type and return it lower-cased.

    Raises:
        CareTypeLengthError: If the trimmed text is empty or too long.
        CareTypeCharsetError: If it holds anything but letters, digits,
            underscores, whitespace and hyphens.
    """
    trimmed = text.strip()
    if not (1 <= len(trimmed) <= CARE_TYPE_MAX_LENGTH):
        raise CareTypeLengthError(text)
    if not _CARE_TYPE_RE.fullmatch(trimmed):
        raise CareTypeCharsetError(text)
    return trimmed.lower()


def parse_notes(text: str | None) -> str:
    """Parse optional session notes; absent notes become ``""``."""
    if text is None:
        return ""
    trimmed = text.strip()
    if len(trimmed) > NOTES_MAX_LENGTH:
        raise NotesLengthError(len(trimmed))
    return trimmed


# --- patients ---


def parse_name(text: str) -> str:
    """Parse a patient name, keeping its case."""
    trimmed = " ".join(text.split())
    if len(trimmed) > NAME_MAX_LENGTH or not _NAME_RE.fullmatch(trimmed):
        raise InvalidNameError(text)
    return trimmed


def parse_ic(text: str) -> str:
    """Parse an identity-card number such as ``S1234567A`` (upper-cased)."""
    trimmed = text.strip()
    if not _IC_RE.fullmatch(trimmed):
        raise InvalidIcError(text)
    return trimmed.upper()


def parse_ward(text: str) -> str:
    """Parse a ward label such as ``2A`` or ``ICU-3`` (upper-cased)."""
    trimmed = text.strip()
    if len(trimmed) > WARD_MAX_LENGTH or not _WARD_RE.fullmatch(trimmed):
        raise InvalidWardError(text)
    return trimmed.upper()
