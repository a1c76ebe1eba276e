"""Handlers for adding, removing and listing patients."""

import logging
from collections.abc import Callable

from caretrack.domain.aggregates import Patient
from caretrack.interfaces.id_generator import IdGenerator
from caretrack.interfaces.patient_repository import PatientAlreadyExistsError
from caretrack.interfaces.unit_of_work import AbstractUnitOfWork
from caretrack.service_layer import commands
from caretrack.service_layer.errors import DuplicatePatientError
from caretrack.service_layer.patient_list import NameContainsKeywords, PatientListView
from caretrack.service_layer.results import CommandResult

logger = logging.getLogger(__name__)

MESSAGE_PATIENT_ADDED = "New patient added: {patient}"
MESSAGE_PATIENT_DELETED = "Deleted Patient: {patient}"
MESSAGE_INVALID_PATIENT_INDEX = (
    "Invalid patient index. Please use a number from the patient list."
)
MESSAGE_PATIENTS_LISTED = "{count} patients listed!"
MESSAGE_ALL_PATIENTS_LISTED = "Listed all patients"


def add_patient(
    cmd: commands.AddPatient,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
) -> CommandResult:
    """Add a new patient with no sessions.

    Raises:
        DuplicatePatientError: If a patient with the same IC is on record.
    """
    patient = Patient(
        patient_id=id_generator.new_id(),
        name=cmd.name,
        ic=cmd.ic,
        ward=cmd.ward,
    )

    with uow:
        if any(patient.is_same_patient(other) for other in uow.patients.list_all()):
            raise DuplicatePatientError(cmd.ic)
        try:
            uow.patients.add(patient)
        except PatientAlreadyExistsError as e:
            raise DuplicatePatientError(cmd.ic) from e
        uow.commit()

    logger.info("Added patient %s", patient.patient_id)
    return CommandResult(MESSAGE_PATIENT_ADDED.format(patient=patient))


def delete_patient(
    cmd: commands.DeletePatient,
    uow: AbstractUnitOfWork,
    patient_list: PatientListView,
) -> CommandResult:
    """Delete the patient shown at ``cmd.patient_index`` along with their sessions.

    Raises:
        PatientIndexOutOfRangeError: If the index is past the displayed list.
    """
    with uow:
        patient = patient_list.resolve(
            uow.patients.list_all(),
            cmd.patient_index,
            MESSAGE_INVALID_PATIENT_INDEX,
        )
        uow.patients.remove(patient.patient_id)
        uow.commit()

    logger.info("Deleted patient %s", patient.patient_id)
    return CommandResult(MESSAGE_PATIENT_DELETED.format(patient=patient))


def find_patients(
    cmd: commands.FindPatients,
    uow: AbstractUnitOfWork,
    patient_list: PatientListView,
) -> CommandResult:
    """Narrow the displayed list to patients whose names match any keyword."""
    patient_list.filter_by(NameContainsKeywords(cmd.keywords))
    with uow:
        shown = patient_list.displayed(uow.patients.list_all())

    return CommandResult(
        MESSAGE_PATIENTS_LISTED.format(count=len(shown)),
        patients=tuple(shown),
    )


def list_patients(
    cmd: commands.ListPatients,  # pylint: disable=unused-argument
    uow: AbstractUnitOfWork,
    patient_list: PatientListView,
) -> CommandResult:
    """Clear any filter and display every patient."""
    patient_list.show_all()
    with uow:
        shown = patient_list.displayed(uow.patients.list_all())

    return CommandResult(MESSAGE_ALL_PATIENTS_LISTED, patients=tuple(shown))


COMMAND_HANDLERS: dict[type, Callable[..., CommandResult]] = {
    commands.AddPatient: add_patient,
    commands.DeletePatient: delete_patient,
    commands.FindPatients: find_patients,
    commands.ListPatients: list_patients,
}
