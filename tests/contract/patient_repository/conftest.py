"""Fixtures for patient repository contract tests."""

from collections.abc import Iterator

import pytest

from caretrack.adapters.patient_repository import (
    InMemoryPatientRepository,
    SqlAlchemyPatientRepository,
)
from caretrack.interfaces.patient_repository import PatientRepository


@pytest.fixture(params=["memory", "sqlalchemy"])
def patient_repository(request: pytest.FixtureRequest) -> Iterator[PatientRepository]:
    """Yield an empty PatientRepository for the requested backend.

    Supported params:
      - `"memory"` → InMemoryPatientRepository
      - `"sqlalchemy"` → SqlAlchemyPatientRepository on in-memory SQLite
    """
    match request.param:
        case "memory":
            yield InMemoryPatientRepository()
        case "sqlalchemy":
            engine = request.getfixturevalue("sqlite_engine_memory")
            with engine.connect() as conn:
                yield SqlAlchemyPatientRepository(conn)
                conn.rollback()
        case _:
            raise ValueError(f"unknown patient repository type: {request.param}")
