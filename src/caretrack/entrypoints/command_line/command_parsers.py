"""Turn a typed command line into a service-layer command.

A line is a command word followed by its arguments::

    add-session 1 d/2099-01-01 t/09:00 type/medication notes/check vitals

:func:`parse_command_line` picks the parser for the command word; each parser
checks the overall shape first and then the individual fields, stopping at the
first problem.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from caretrack.domain.value_objects import CaringSession
from caretrack.interfaces.clock import Clock
from caretrack.service_layer import commands

from . import field_parsers
from .errors import InvalidCommandFormatError, ParseError, UnknownCommandError
from .tokenizer import tokenize

PREFIX_DATE = "d/"
PREFIX_TIME = "t/"
PREFIX_TYPE = "type/"
PREFIX_NOTES = "notes/"
PREFIX_NAME = "n/"
PREFIX_IC = "ic/"
PREFIX_WARD = "w/"

ADD_SESSION_USAGE = (
    "add-session: Adds a caring session for a patient.\n"
    "Parameters: PATIENT_INDEX d/DATE t/TIME type/CARE_TYPE [notes/NOTES]\n"
    "Example: add-session 1 d/2025-10-16 t/14:30 type/medication notes/Give insulin shot"
)
DELETE_SESSION_USAGE = (
    "delete-session: Deletes a caring session from a patient.\n"
    "Parameters: PATIENT_INDEX SESSION_INDEX (both must be positive integers)\n"
    "Example: delete-session 1 2"
)
ADD_PATIENT_USAGE = (
    "add-patient: Adds a patient to the records.\n"
    "Parameters: n/NAME ic/IC w/WARD\n"
    "Example: add-patient n/John Doe ic/S1234567A w/2A"
)
DELETE_PATIENT_USAGE = (
    "delete-patient: Deletes the patient identified by the index number used in "
    "the displayed patient list.\n"
    "Parameters: INDEX (must be a positive integer)\n"
    "Example: delete-patient 1"
)
FIND_PATIENT_USAGE = (
    "find-patient: Finds all patients whose names contain any of the specified "
    "keywords (case-insensitive) and displays them as a list with index numbers.\n"
    "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
    "Example: find-patient alice bob"
)
LIST_PATIENTS_USAGE = "list-patients: Lists all patients and clears any filter."
HELP_USAGE = "help: Shows how to use every command."
EXIT_USAGE = "exit: Leaves the interactive shell."


@dataclass(frozen=True)
class ShowHelp:
    """Request to show :data:`HELP_TEXT`; handled without touching storage."""


@dataclass(frozen=True)
class ExitShell:
    """Request to leave the interactive shell."""


Parsed = commands.Command | ShowHelp | ExitShell


# --- caring sessions ---


def parse_add_session(args: str, clock: Clock) -> commands.AddCaringSession:
    """Parse ``PATIENT_INDEX d/DATE t/TIME type/CARE_TYPE [notes/NOTES]``.

    Raises:
        InvalidCommandFormatError: If the preamble is not a single token or a
            required prefix is missing.
        ParseError: The field-specific error for the first invalid field,
            checked in the order index, date, time, type, notes.
    """
    argmap = tokenize(args, PREFIX_DATE, PREFIX_TIME, PREFIX_TYPE, PREFIX_NOTES)
    preamble = argmap.preamble.split()
    if len(preamble) != 1 or not argmap.has(PREFIX_DATE, PREFIX_TIME, PREFIX_TYPE):
        raise InvalidCommandFormatError(ADD_SESSION_USAGE)

    patient_index = field_parsers.parse_index(preamble[0])
    session_date = field_parsers.parse_date(argmap.get_value(PREFIX_DATE), clock)
    session_time = field_parsers.parse_time(argmap.get_value(PREFIX_TIME))
    care_type = field_parsers.parse_type(argmap.get_value(PREFIX_TYPE))
    notes = field_parsers.parse_notes(argmap.get_value(PREFIX_NOTES))

    return commands.AddCaringSession(
        patient_index=patient_index,
        session=CaringSession(session_date, session_time, care_type, notes),
    )


def parse_delete_session(args: str) -> commands.DeleteCaringSession:
    """Parse ``PATIENT_INDEX SESSION_INDEX``.

    Any problem, including a bad index, is reported as the command format
    error with the underlying cause chained.
    """
    try:
        parts = args.split()
        if len(parts) != 2:
            raise InvalidCommandFormatError(DELETE_SESSION_USAGE)
        patient_index = field_parsers.parse_index(parts[0])
        session_index = field_parsers.parse_index(parts[1])
    except InvalidCommandFormatError:
        raise
    except ParseError as e:
        raise InvalidCommandFormatError(DELETE_SESSION_USAGE) from e

    return commands.DeleteCaringSession(
        patient_index=patient_index, session_index=session_index
    )


# --- patients ---


def parse_add_patient(args: str) -> commands.AddPatient:
    """Parse ``n/NAME ic/IC w/WARD``."""
    argmap = tokenize(args, PREFIX_NAME, PREFIX_IC, PREFIX_WARD)
    if argmap.preamble or not argmap.has(PREFIX_NAME, PREFIX_IC, PREFIX_WARD):
        raise InvalidCommandFormatError(ADD_PATIENT_USAGE)

    return commands.AddPatient(
        name=field_parsers.parse_name(argmap.get_value(PREFIX_NAME)),
        ic=field_parsers.parse_ic(argmap.get_value(PREFIX_IC)),
        ward=field_parsers.parse_ward(argmap.get_value(PREFIX_WARD)),
    )


def parse_delete_patient(args: str) -> commands.DeletePatient:
    """Parse ``INDEX``."""
    try:
        return commands.DeletePatient(field_parsers.parse_index(args))
    except ParseError as e:
        raise InvalidCommandFormatError(DELETE_PATIENT_USAGE) from e


def parse_find_patient(args: str) -> commands.FindPatients:
    """Parse ``KEYWORD [MORE_KEYWORDS]...``."""
    keywords = tuple(args.split())
    if not keywords:
        raise InvalidCommandFormatError(FIND_PATIENT_USAGE)
    return commands.FindPatients(keywords)


# --- dispatch ---

_USAGES = (
    ADD_PATIENT_USAGE,
    DELETE_PATIENT_USAGE,
    FIND_PATIENT_USAGE,
    LIST_PATIENTS_USAGE,
    ADD_SESSION_USAGE,
    DELETE_SESSION_USAGE,
    HELP_USAGE,
    EXIT_USAGE,
)

HELP_TEXT = "\n\n".join(_USAGES)

_PARSERS: dict[str, Callable[[str, Clock], Parsed]] = {
    "add-session": parse_add_session,
    "delete-session": lambda args, _clock: parse_delete_session(args),
    "add-patient": lambda args, _clock: parse_add_patient(args),
    "delete-patient": lambda args, _clock: parse_delete_patient(args),
    "find-patient": lambda args, _clock: parse_find_patient(args),
    "list-patients": lambda _args, _clock: commands.ListPatients(),
    "help": lambda _args, _clock: ShowHelp(),
    "exit": lambda _args, _clock: ExitShell(),
}

COMMAND_WORDS = tuple(_PARSERS)


def parse_command_line(line: str, clock: Clock) -> Parsed:
    """Parse a full command line.

    Args:
        line: The command word and its arguments.
        clock: Source of "today" for date checks.

    Raises:
        InvalidCommandFormatError: If *line* is blank (carries :data:`HELP_TEXT`).
        UnknownCommandError: If the command word is not recognised.
        ParseError: Whatever the command's own parser raises.
    """
    stripped = line.strip()
    if not stripped:
        raise InvalidCommandFormatError(HELP_TEXT)

    command_word, *rest = stripped.split(maxsplit=1)
    args = rest[0] if rest else ""
    parser = _PARSERS.get(command_word)
    if parser is None:
        raise UnknownCommandError(command_word)
    return parser(args, clock)
