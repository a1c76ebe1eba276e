"""Handlers for scheduling and removing caring sessions."""

import logging
from collections.abc import Callable

from caretrack.domain.errors import DuplicateSessionError
from caretrack.interfaces.patient_repository import SessionConflictError
from caretrack.interfaces.unit_of_work import AbstractUnitOfWork
from caretrack.service_layer import commands
from caretrack.service_layer.patient_list import PatientListView
from caretrack.service_layer.results import CommandResult

logger = logging.getLogger(__name__)

MESSAGE_SESSION_ADDED = "Caring session added for {name}: {care_type} on {date} at {time} ({notes})"
MESSAGE_SESSION_DELETED = "Deleted caring session for {name}: {session}"


def add_caring_session(
    cmd: commands.AddCaringSession,
    uow: AbstractUnitOfWork,
    patient_list: PatientListView,
) -> CommandResult:
    """Schedule a caring session for the patient shown at ``cmd.patient_index``.

    The overlap check runs before anything is written; a rejected command
    leaves the patient's sessions exactly as they were.

    Raises:
        PatientIndexOutOfRangeError: If the index is past the displayed list.
        DuplicateSessionError: If the patient already has a session with the
            same date, time and care type.
    """
    session = cmd.session

    with uow:
        patient = patient_list.resolve(uow.patients.list_all(), cmd.patient_index)

        if patient.has_overlapping_session(session):
            raise DuplicateSessionError()

        patient.add_caring_session(session)
        try:
            uow.patients.save(patient)
        except SessionConflictError as e:
            raise DuplicateSessionError() from e
        uow.commit()

    logger.info(
        "Added %s session on %s %s for patient %s",
        session.care_type,
        session.date_text,
        session.time_text,
        patient.patient_id,
    )
    return CommandResult(
        MESSAGE_SESSION_ADDED.format(
            name=patient.name,
            care_type=session.care_type,
            date=session.date_text,
            time=session.time_text,
            notes=session.notes,
        )
    )


def delete_caring_session(
    cmd: commands.DeleteCaringSession,
    uow: AbstractUnitOfWork,
    patient_list: PatientListView,
) -> CommandResult:
    """Remove the session at ``cmd.session_index`` from the patient shown at ``cmd.patient_index``.

    Raises:
        PatientIndexOutOfRangeError: If the patient index is past the displayed list.
        SessionIndexOutOfRangeError: If the patient has no session at that index.
    """
    with uow:
        patient = patient_list.resolve(uow.patients.list_all(), cmd.patient_index)
        removed = patient.remove_caring_session(cmd.session_index)
        uow.patients.save(patient)
        uow.commit()

    logger.info(
        "Removed session %d from patient %s",
        cmd.session_index.one_based,
        patient.patient_id,
    )
    return CommandResult(
        MESSAGE_SESSION_DELETED.format(name=patient.name, session=removed)
    )


COMMAND_HANDLERS: dict[type, Callable[..., CommandResult]] = {
    commands.AddCaringSession: add_caring_session,
    commands.DeleteCaringSession: delete_caring_session,
}
