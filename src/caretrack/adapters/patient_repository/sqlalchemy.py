"""Implementation of PatientRepository using SQLAlchemy Core."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, or_, select
from sqlalchemy.exc import IntegrityError

from caretrack.adapters.db.schema import caring_sessions, patients
from caretrack.domain.aggregates import Patient
from caretrack.domain.value_objects import CaringSession
from caretrack.interfaces.patient_repository import (
    PatientAlreadyExistsError,
    PatientNotFoundError,
    PatientRepository,
    SessionConflictError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.engine import Connection, Row


class SqlAlchemyPatientRepository(PatientRepository):
    """PatientRepository that reads and writes through one SQLAlchemy connection.

    The repository never commits; the owning unit of work does.
    """

    def __init__(self, connection: Connection):
        self.connection = connection

    # --- writes ---

    def add(self, patient: Patient) -> None:
        clash = self.connection.execute(
            select(patients.c.patient_id).where(
                or_(
                    patients.c.patient_id == patient.patient_id,
                    patients.c.ic == patient.ic,
                )
            )
        ).first()
        if clash is not None:
            raise PatientAlreadyExistsError(patient.patient_id, patient.ic)

        try:
            self.connection.execute(
                insert(patients).values(
                    patient_id=patient.patient_id,
                    name=patient.name,
                    ic=patient.ic,
                    ward=patient.ward,
                )
            )
        except IntegrityError as e:
            # a concurrent writer got there between the check and the insert
            raise PatientAlreadyExistsError(patient.patient_id, patient.ic) from e

        self._write_sessions(patient)

    def save(self, patient: Patient) -> None:
        self._require_exists(patient.patient_id)
        self.connection.execute(
            delete(caring_sessions).where(
                caring_sessions.c.patient_id == patient.patient_id
            )
        )
        self._write_sessions(patient)

    def remove(self, patient_id: str) -> None:
        self._require_exists(patient_id)
        # explicit delete so backends without cascading FKs stay consistent
        self.connection.execute(
            delete(caring_sessions).where(caring_sessions.c.patient_id == patient_id)
        )
        self.connection.execute(delete(patients).where(patients.c.patient_id == patient_id))

    # --- reads ---

    def get(self, patient_id: str) -> Patient:
        row = self.connection.execute(
            select(patients).where(patients.c.patient_id == patient_id)
        ).first()
        if row is None:
            raise PatientNotFoundError(patient_id)
        return self._to_patient(row, self._load_sessions([patient_id]).get(patient_id, []))

    def list_all(self) -> list[Patient]:
        rows = self.connection.execute(
            select(patients).order_by(patients.c.patient_id)
        ).all()
        sessions = self._load_sessions([row.patient_id for row in rows])
        return [self._to_patient(row, sessions.get(row.patient_id, [])) for row in rows]

    # --- helpers ---

    def _require_exists(self, patient_id: str) -> None:
        found = self.connection.execute(
            select(patients.c.patient_id).where(patients.c.patient_id == patient_id)
        ).first()
        if found is None:
            raise PatientNotFoundError(patient_id)

    def _write_sessions(self, patient: Patient) -> None:
        sessions = patient.caring_sessions
        for i, session in enumerate(sessions):
            if any(session.overlaps(other) for other in sessions[:i]):
                raise SessionConflictError(patient.patient_id)
        if not sessions:
            return
        try:
            self.connection.execute(
                insert(caring_sessions),
                [
                    {
                        "patient_id": patient.patient_id,
                        "position": position,
                        "session_date": session.date,
                        "session_time": session.time,
                        "care_type": session.care_type,
                        "notes": session.notes,
                    }
                    for position, session in enumerate(sessions)
                ],
            )
        except IntegrityError as e:
            raise SessionConflictError(patient.patient_id) from e

    def _load_sessions(
        self, patient_ids: Sequence[str]
    ) -> dict[str, list[CaringSession]]:
        if not patient_ids:
            return {}
        rows = self.connection.execute(
            select(caring_sessions)
            .where(caring_sessions.c.patient_id.in_(patient_ids))
            .order_by(caring_sessions.c.patient_id, caring_sessions.c.position)
        ).all()
        by_patient: dict[str, list[CaringSession]] = {}
        for row in rows:
            by_patient.setdefault(row.patient_id, []).append(
                CaringSession(
                    date=row.session_date,
                    time=row.session_time,
                    care_type=row.care_type,
                    notes=row.notes,
                )
            )
        return by_patient

    @staticmethod
    def _to_patient(row: Row, sessions: Sequence[CaringSession]) -> Patient:
        return Patient(
            patient_id=row.patient_id,
            name=row.name,
            ic=row.ic,
            ward=row.ward,
            caring_sessions=sessions,
        )
