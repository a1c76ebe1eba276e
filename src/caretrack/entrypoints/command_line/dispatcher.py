"""Run one command line end to end and report the outcome.

This is where user-facing failures stop: parse errors, domain rule
violations and rejected commands all become an :class:`Outcome` with
``ok=False`` and the error's message. Anything else is a bug and propagates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from caretrack.domain.aggregates import Patient
from caretrack.domain.errors import DomainError
from caretrack.interfaces.clock import Clock
from caretrack.service_layer.errors import CommandError
from caretrack.service_layer.messagebus import MessageBus

from .command_parsers import HELP_TEXT, ExitShell, ShowHelp, parse_command_line
from .errors import ParseError

logger = logging.getLogger(__name__)

MESSAGE_EXITING = "Exiting caretrack."


@dataclass(frozen=True)
class Outcome:
    """What happened when a command line was executed.

    Attributes:
        ok: False when the command was rejected.
        message: Feedback or error text for the user.
        patients: Patients to display, if the command produced a listing.
        exit_requested: True when the user asked to leave the shell.
    """

    ok: bool
    message: str
    patients: tuple[Patient, ...] | None = None
    exit_requested: bool = False


class CommandDispatcher:
    """Parses command lines and hands the resulting commands to the bus."""

    def __init__(self, message_bus: MessageBus, clock: Clock) -> None:
        self.message_bus = message_bus
        self.clock = clock

    def execute(self, line: str) -> Outcome:
        """Execute *line* and describe the result.

        Raises:
            Exception: Only for failures that are not the user's to fix.
        """
        try:
            parsed = parse_command_line(line, self.clock)
            if isinstance(parsed, ShowHelp):
                return Outcome(ok=True, message=HELP_TEXT)
            if isinstance(parsed, ExitShell):
                return Outcome(ok=True, message=MESSAGE_EXITING, exit_requested=True)
            result = self.message_bus.handle(parsed)
        except (ParseError, DomainError, CommandError) as e:
            logger.debug("Command line %r failed: %s", line, e)
            return Outcome(ok=False, message=str(e))

        return Outcome(ok=True, message=result.feedback, patients=result.patients)
