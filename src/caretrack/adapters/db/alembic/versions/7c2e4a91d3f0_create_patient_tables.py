"""Create patients and caring_sessions tables

Revision ID: 7c2e4a91d3f0
Revises:
Create Date: 2025-10-16

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "7c2e4a91d3f0"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "patients",
        sa.Column(
            "patient_id",
            sa.String(length=26),
            nullable=False,
            comment="ULID (26 chars); sorts in creation order.",
        ),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column(
            "ic", sa.String(length=9), nullable=False, comment="Identity card number."
        ),
        sa.Column("ward", sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint("patient_id", name=op.f("pk_patients")),
        sa.UniqueConstraint("ic", name=op.f("uq_patients_ic")),
        comment="One row per patient under care.",
    )

    op.create_table(
        "caring_sessions",
        sa.Column("session_pk", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("patient_id", sa.String(length=26), nullable=False),
        sa.Column(
            "position",
            sa.Integer(),
            nullable=False,
            comment="Zero-based display position within the patient's sessions.",
        ),
        sa.Column("session_date", sa.Date(), nullable=False),
        sa.Column("session_time", sa.Time(), nullable=False),
        sa.Column("care_type", sa.String(length=50), nullable=False),
        sa.Column("notes", sa.String(length=200), nullable=False),
        sa.PrimaryKeyConstraint("session_pk", name=op.f("pk_caring_sessions")),
        sa.ForeignKeyConstraint(
            ["patient_id"],
            ["patients.patient_id"],
            name=op.f("fk_caring_sessions_patient_id_patients"),
            ondelete="CASCADE",
        ),
        sa.UniqueConstraint(
            "patient_id",
            "position",
            name=op.f("uq_caring_sessions_patient_id_position"),
        ),
        sa.UniqueConstraint(
            "patient_id",
            "session_date",
            "session_time",
            "care_type",
            name="uq_caring_sessions_slot",
        ),
        sa.CheckConstraint(
            "position >= 0", name=op.f("ck_caring_sessions_non_negative_position")
        ),
        comment="Scheduled caring sessions, one row per session.",
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("caring_sessions")
    op.drop_table("patients")
