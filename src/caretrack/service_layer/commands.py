"""Module defining Commands."""

from dataclasses import dataclass

from caretrack.domain.value_objects import CaringSession, Index


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


# --- Patients ---


@dataclass(frozen=True)
class AddPatient(Command):
    """Command to add a new patient to the records."""

    name: str
    ic: str
    ward: str


@dataclass(frozen=True)
class DeletePatient(Command):
    """Command to delete the patient at a displayed index."""

    patient_index: Index


@dataclass(frozen=True)
class FindPatients(Command):
    """Command to narrow the displayed list to patients matching any keyword."""

    keywords: tuple[str, ...]


@dataclass(frozen=True)
class ListPatients(Command):
    """Command to clear any filter and display every patient."""


# --- Caring sessions ---


@dataclass(frozen=True)
class AddCaringSession(Command):
    """Command to schedule a caring session for the patient at a displayed index."""

    patient_index: Index
    session: CaringSession


@dataclass(frozen=True)
class DeleteCaringSession(Command):
    """Command to remove one session from the patient at a displayed index."""

    patient_index: Index
    session_index: Index
