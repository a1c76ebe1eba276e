"""Patient Aggregate"""

from __future__ import annotations

from collections.abc import Iterable

from caretrack.domain.errors import DuplicateSessionError, SessionIndexOutOfRangeError
from caretrack.domain.value_objects import CaringSession, Index


class Patient:
    """Aggregate root representing a patient under care.

    A patient owns an ordered collection of caring sessions. The collection is
    never handed out; callers ask the patient whether a session would overlap
    and ask it to add or remove one. Each session belongs to exactly one
    patient.
    """

    def __init__(
        self,
        patient_id: str,
        name: str,
        ic: str,
        ward: str,
        caring_sessions: Iterable[CaringSession] = (),
    ) -> None:
        self.patient_id = patient_id
        self.name = name
        self.ic = ic
        self.ward = ward
        self._caring_sessions: list[CaringSession] = list(caring_sessions)

    # --- Queries ---

    @property
    def caring_sessions(self) -> tuple[CaringSession, ...]:
        """The patient's sessions in the order they were added."""
        return tuple(self._caring_sessions)

    def has_overlapping_session(self, session: CaringSession) -> bool:
        """Return True if any existing session overlaps *session*."""
        return any(existing.overlaps(session) for existing in self._caring_sessions)

    def is_same_patient(self, other: Patient) -> bool:
        """Two records describe the same person when their IC numbers match."""
        return self.ic.upper() == other.ic.upper()

    # --- Mutations ---

    def add_caring_session(self, session: CaringSession) -> None:
        """Append *session* to this patient's schedule.

        Raises:
            DuplicateSessionError: If an overlapping session already exists.
        """
        if self.has_overlapping_session(session):
            raise DuplicateSessionError()
        self._caring_sessions.append(session)

    def remove_caring_session(self, index: Index) -> CaringSession:
        """Remove and return the session at *index*.

        Raises:
            SessionIndexOutOfRangeError: If *index* is past the last session.
        """
        if index.zero_based >= len(self._caring_sessions):
            raise SessionIndexOutOfRangeError(index.one_based)
        return self._caring_sessions.pop(index.zero_based)

    # --- Plumbing ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Patient):
            return NotImplemented
        return (
            self.patient_id == other.patient_id
            and self.name == other.name
            and self.ic == other.ic
            and self.ward == other.ward
            and self._caring_sessions == other._caring_sessions
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Patient(patient_id={self.patient_id!r}, name={self.name!r}, "
            f"ic={self.ic!r}, ward={self.ward!r}, "
            f"caring_sessions={len(self._caring_sessions)})"
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.ic}, ward {self.ward})"
