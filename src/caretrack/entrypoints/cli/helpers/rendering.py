"""Rich rendering of patient listings."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from caretrack.domain.aggregates import Patient


def patient_table(patients: Sequence[Patient]) -> Table:
    """Build a table of *patients* numbered the way commands refer to them.

    Each patient's sessions are listed one per line, numbered for
    ``delete-session``.
    """
    table = Table(show_lines=True)
    table.add_column("#", justify="right", style="bold")
    table.add_column("Name")
    table.add_column("IC")
    table.add_column("Ward")
    table.add_column("Sessions")

    for position, patient in enumerate(patients, start=1):
        sessions = "\n".join(
            f"{n}. {session}"
            for n, session in enumerate(patient.caring_sessions, start=1)
        )
        table.add_row(
            str(position),
            patient.name,
            patient.ic,
            patient.ward,
            sessions or "-",
        )
    return table


def print_patients(patients: Sequence[Patient], console: Console | None = None) -> None:
    """Print *patients* as a table on stdout (or *console*)."""
    console = console or Console()
    if not patients:
        console.print("No patients to show.")
        return
    console.print(patient_table(patients))
