"""Units of Work for CARETRACK.

Provides a context-managed UnitOfWork using a SQLAlchemy Connection and the
SqlAlchemyPatientRepository, plus an in-memory variant for demos and tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from caretrack.adapters.patient_repository import (
    InMemoryPatientData,
    InMemoryPatientRepository,
    SqlAlchemyPatientRepository,
)
from caretrack.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.patients = SqlAlchemyPatientRepository(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Unit of Work over an in-memory patient store.

    Writes are staged on a copy of the store and only published on commit, so
    leaving the context without committing discards them.
    """

    def __init__(self, data: InMemoryPatientData | None = None):
        self.data = data if data is not None else InMemoryPatientData()
        self._staged: InMemoryPatientData
        self.committed = False

    def __enter__(self):
        self._staged = InMemoryPatientData(patients=dict(self.data.patients))
        self.patients = InMemoryPatientRepository(self._staged)
        return super().__enter__()

    def commit(self):
        self.data.patients = dict(self._staged.patients)
        self.committed = True

    def rollback(self):
        self._staged = InMemoryPatientData(patients=dict(self.data.patients))
        self.patients = InMemoryPatientRepository(self._staged)
