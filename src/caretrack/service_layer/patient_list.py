"""The displayed patient list.

Users refer to patients by their position in the list they were last shown,
not by ID. That list is every stored patient (in creation order) narrowed by
the most recent ``find-patient`` filter. :class:`PatientListView` keeps that
filter between commands and resolves one-based positions against it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from caretrack.domain.aggregates import Patient
from caretrack.domain.value_objects import Index

from .errors import PatientIndexOutOfRangeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NameContainsKeywords:
    """Matches patients whose name contains any keyword as a whole word.

    Matching is case-insensitive; partial words do not match ("Ali" does not
    match "Alice").
    """

    keywords: tuple[str, ...]

    def __call__(self, patient: Patient) -> bool:
        words = {word.casefold() for word in patient.name.split()}
        return any(keyword.casefold() in words for keyword in self.keywords)


class PatientListView:
    """Holds the active filter and exposes the list the user is looking at."""

    def __init__(self) -> None:
        self._predicate: NameContainsKeywords | None = None

    @property
    def is_filtered(self) -> bool:
        """True while a ``find-patient`` filter is active."""
        return self._predicate is not None

    def filter_by(self, predicate: NameContainsKeywords) -> None:
        """Show only patients accepted by *predicate*."""
        logger.debug("Patient list filtered by %s", predicate)
        self._predicate = predicate

    def show_all(self) -> None:
        """Drop the filter."""
        self._predicate = None

    def displayed(self, patients: Sequence[Patient]) -> list[Patient]:
        """Return *patients* (creation order) narrowed by the active filter."""
        if self._predicate is None:
            return list(patients)
        return [patient for patient in patients if self._predicate(patient)]

    def resolve(
        self,
        patients: Sequence[Patient],
        index: Index,
        message: str | None = None,
    ) -> Patient:
        """Return the patient shown at *index*.

        Args:
            patients: Every stored patient, in creation order.
            index: Position in the displayed list.
            message: Optional override for the out-of-range message; may use
                ``{index}`` for the one-based position.

        Raises:
            PatientIndexOutOfRangeError: If *index* is past the displayed list.
        """
        shown = self.displayed(patients)
        if index.zero_based >= len(shown):
            raise PatientIndexOutOfRangeError(index.one_based, message)
        return shown[index.zero_based]
