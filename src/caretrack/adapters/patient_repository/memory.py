"""In-memory PatientRepository adapter implementation."""

from __future__ import annotations

from dataclasses import dataclass, field

from caretrack.domain.aggregates import Patient
from caretrack.domain.value_objects import CaringSession
from caretrack.interfaces.patient_repository import (
    PatientAlreadyExistsError,
    PatientNotFoundError,
    PatientRepository,
    SessionConflictError,
)

# pylint: disable=consider-using-assignment-expr


@dataclass(frozen=True, slots=True)
class PatientRecord:
    """Stored form of a patient: plain values, no behaviour."""

    patient_id: str
    name: str
    ic: str
    ward: str
    caring_sessions: tuple[CaringSession, ...] = ()

    @classmethod
    def from_patient(cls, patient: Patient) -> PatientRecord:
        """Snapshot a patient aggregate."""
        return cls(
            patient_id=patient.patient_id,
            name=patient.name,
            ic=patient.ic,
            ward=patient.ward,
            caring_sessions=patient.caring_sessions,
        )

    def to_patient(self) -> Patient:
        """Rebuild a fresh aggregate from this record."""
        return Patient(
            patient_id=self.patient_id,
            name=self.name,
            ic=self.ic,
            ward=self.ward,
            caring_sessions=self.caring_sessions,
        )


@dataclass(slots=True)
class InMemoryPatientData:
    """Shared backing store for in-memory patient repositories.

    Keyed by ``patient_id``. Records are immutable snapshots, so aggregates
    handed out by the repository can be mutated freely without touching the
    store until they are saved.
    """

    patients: dict[str, PatientRecord] = field(default_factory=dict)


class InMemoryPatientRepository(PatientRepository):
    """In-memory implementation of the PatientRepository interface."""

    def __init__(self, data: InMemoryPatientData | None = None) -> None:
        self._data = data if data is not None else InMemoryPatientData()

    def add(self, patient: Patient) -> None:
        for record in self._data.patients.values():
            if record.patient_id == patient.patient_id or record.ic == patient.ic:
                raise PatientAlreadyExistsError(patient.patient_id, patient.ic)
        self._check_no_overlap(patient)
        self._data.patients[patient.patient_id] = PatientRecord.from_patient(patient)

    def get(self, patient_id: str) -> Patient:
        record = self._data.patients.get(patient_id)
        if record is None:
            raise PatientNotFoundError(patient_id)
        return record.to_patient()

    def list_all(self) -> list[Patient]:
        return [
            self._data.patients[patient_id].to_patient()
            for patient_id in sorted(self._data.patients)
        ]

    def save(self, patient: Patient) -> None:
        if patient.patient_id not in self._data.patients:
            raise PatientNotFoundError(patient.patient_id)
        self._check_no_overlap(patient)
        self._data.patients[patient.patient_id] = PatientRecord.from_patient(patient)

    def remove(self, patient_id: str) -> None:
        if self._data.patients.pop(patient_id, None) is None:
            raise PatientNotFoundError(patient_id)

    @staticmethod
    def _check_no_overlap(patient: Patient) -> None:
        seen: list[CaringSession] = []
        for session in patient.caring_sessions:
            if any(session.overlaps(other) for other in seen):
                raise SessionConflictError(patient.patient_id)
            seen.append(session)
