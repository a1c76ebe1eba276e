"""A message bus over in-memory storage, for service-layer and dispatcher tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import pytest

from caretrack.adapters.id_generators import SequentialIdGenerator
from caretrack.adapters.patient_repository import InMemoryPatientData, InMemoryPatientRepository
from caretrack.adapters.patient_repository.memory import PatientRecord
from caretrack.adapters.unit_of_work import InMemoryUnitOfWork
from caretrack.bootstrap.bootstrap import build_message_bus
from caretrack.domain.aggregates import Patient
from caretrack.service_layer.handlers import COMMAND_HANDLERS
from caretrack.service_layer.messagebus import MessageBus
from caretrack.service_layer.patient_list import PatientListView


@dataclass
class BusHarness:
    """A wired message bus plus the pieces tests want to inspect."""

    bus: MessageBus
    uow: InMemoryUnitOfWork
    patient_list: PatientListView

    def stored_patients(self) -> list[Patient]:
        """Patients as committed, in creation order."""
        return InMemoryPatientRepository(self.uow.data).list_all()


def build_test_bus(*patients: Patient) -> BusHarness:
    """Wire the real handlers over an in-memory store seeded with *patients*."""
    data = InMemoryPatientData(
        patients={p.patient_id: PatientRecord.from_patient(p) for p in patients}
    )
    uow = InMemoryUnitOfWork(data)
    patient_list = PatientListView()
    bus = build_message_bus(
        uow,
        COMMAND_HANDLERS,
        patient_list=patient_list,
        id_generator=SequentialIdGenerator(),
    )
    return BusHarness(bus=bus, uow=uow, patient_list=patient_list)


@pytest.fixture
def make_bus() -> Callable[..., BusHarness]:
    """Factory fixture for :func:`build_test_bus`."""
    return build_test_bus
