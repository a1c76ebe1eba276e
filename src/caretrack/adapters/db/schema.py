"""Patient and caring-session schema.

Two tables: ``patients`` holds one row per patient; ``caring_sessions`` holds
the patient's sessions with their display ``position`` (zero-based, in the
order they were added).

Constraints (enforced here):

| Constraint                                                 | Purpose                          |
|------------------------------------------------------------|----------------------------------|
| UNIQUE(patients.ic)                                        | one record per person            |
| UNIQUE(patient_id, position)                               | stable session ordering          |
| UNIQUE(patient_id, session_date, session_time, care_type)  | no overlapping sessions          |
| FK caring_sessions.patient_id ON DELETE CASCADE            | sessions die with their patient  |
| CHECK(position >= 0)                                       | zero-based positions             |

Care types are stored lower-cased, so the overlap constraint is
case-insensitive in effect.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Integer,
    String,
    Table,
    Time,
    UniqueConstraint,
)

from caretrack.adapters.db.metadata import metadata
from caretrack.domain.value_objects import CARE_TYPE_MAX_LENGTH, NOTES_MAX_LENGTH

__all__ = ["patients", "caring_sessions"]

patients = Table(
    "patients",
    metadata,
    Column(
        "patient_id",
        String(26),
        primary_key=True,
        comment="ULID (26 chars); sorts in creation order.",
    ),
    Column("name", String(100), nullable=False),
    Column("ic", String(9), nullable=False, unique=True, comment="Identity card number."),
    Column("ward", String(20), nullable=False),
    comment="One row per patient under care.",
)

caring_sessions = Table(
    "caring_sessions",
    metadata,
    Column("session_pk", Integer, primary_key=True, autoincrement=True),
    Column(
        "patient_id",
        String(26),
        ForeignKey("patients.patient_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "position",
        Integer,
        nullable=False,
        comment="Zero-based display position within the patient's sessions.",
    ),
    Column("session_date", Date, nullable=False),
    Column("session_time", Time, nullable=False),
    Column("care_type", String(CARE_TYPE_MAX_LENGTH), nullable=False),
    Column("notes", String(NOTES_MAX_LENGTH), nullable=False, default=""),
    UniqueConstraint("patient_id", "position"),
    UniqueConstraint(
        "patient_id",
        "session_date",
        "session_time",
        "care_type",
        name="uq_caring_sessions_slot",
    ),
    CheckConstraint("position >= 0", name="non_negative_position"),
    comment="Scheduled caring sessions, one row per session.",
)
