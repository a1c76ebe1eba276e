"""Results returned by command handlers."""

from __future__ import annotations

from dataclasses import dataclass

from caretrack.domain.aggregates import Patient


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a successfully handled command.

    Attributes:
        feedback: Message to show the user.
        patients: The displayed patient list, when the command changes what is
            displayed; None otherwise.
    """

    feedback: str
    patients: tuple[Patient, ...] | None = None
