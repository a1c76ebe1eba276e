"""Patient repository interface.

A repository stores patient aggregates together with their caring sessions.
Patients are listed in creation order, which is the order IDs sort in.

Implementations must raise the errors defined here rather than backend
exceptions so the service layer can stay storage-agnostic.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from caretrack.domain.aggregates import Patient


# ============================================================================
#                               Errors
# ============================================================================


class PatientRepositoryError(Exception):
    """Base class for patient repository errors."""


class PatientNotFoundError(PatientRepositoryError):
    """Raised when no patient is stored under the requested ID."""

    def __init__(self, patient_id: str) -> None:
        super().__init__(f"Patient ({patient_id}) not found")
        self.patient_id = patient_id


class PatientAlreadyExistsError(PatientRepositoryError):
    """Raised when adding a patient whose ID or IC is already stored."""

    def __init__(self, patient_id: str, ic: str) -> None:
        super().__init__(f"Patient ({patient_id}, IC {ic}) already exists")
        self.patient_id = patient_id
        self.ic = ic


class SessionConflictError(PatientRepositoryError):
    """Raised when saving would store two overlapping sessions for one patient."""

    def __init__(self, patient_id: str) -> None:
        super().__init__(f"Patient ({patient_id}) has overlapping caring sessions")
        self.patient_id = patient_id


# ============================================================================
#                               Contract
# ============================================================================


class PatientRepository(abc.ABC):
    """Contract for patient storage."""

    @abc.abstractmethod
    def add(self, patient: Patient) -> None:
        """Store a new patient (and any sessions it already holds).

        Raises:
            PatientAlreadyExistsError: If the ID or IC is already stored.
        """

    @abc.abstractmethod
    def get(self, patient_id: str) -> Patient:
        """Load a patient with its sessions.

        Raises:
            PatientNotFoundError: If no such patient exists.
        """

    @abc.abstractmethod
    def list_all(self) -> list[Patient]:
        """Return every patient in creation order."""

    @abc.abstractmethod
    def save(self, patient: Patient) -> None:
        """Persist the patient's current sessions, replacing the stored ones.

        Raises:
            PatientNotFoundError: If the patient was never added.
            SessionConflictError: If the sessions contain an overlap.
        """

    @abc.abstractmethod
    def remove(self, patient_id: str) -> None:
        """Delete a patient and its sessions.

        Raises:
            PatientNotFoundError: If no such patient exists.
        """
