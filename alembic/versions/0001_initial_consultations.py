"""initial consultations schema

Revision ID: 0001_initial_consultations
Revises: 
Create Date: 2026-10-19 10:00:00.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001_initial_consultations"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.Text, nullable=True),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("login_method", sa.String(64), nullable=True),
        sa.Column("role", sa.String(16), nullable=False, server_default="user"),
        sa.Column("user_type", sa.String(16), nullable=False, server_default="customer"),
        sa.Column("is_approved_trainer", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("last_signed_in", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_users_user_type", "users", ["user_type"])

    op.create_table(
        "user_profiles",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("profile_photo", sa.Text, nullable=True),
        sa.Column("bio", sa.Text, nullable=True),
        sa.Column("height", sa.Integer, nullable=True),
        sa.Column("weight", sa.Integer, nullable=True),
        sa.Column("age", sa.Integer, nullable=True),
        sa.Column("gender", sa.String(16), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_user_profiles_user_id", "user_profiles", ["user_id"])

    op.create_table(
        "trainer_profiles",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("profile_photo", sa.Text, nullable=True),
        sa.Column("bio", sa.Text, nullable=True),
        sa.Column("specialties", sa.Text, nullable=True),
        sa.Column("certifications", sa.Text, nullable=True),
        sa.Column("social_links", sa.Text, nullable=True),
        sa.Column("is_verified", sa.Boolean, nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index("ix_trainer_profiles_user_id", "trainer_profiles", ["user_id"])

    op.create_table(
        "consultations",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("goals", sa.Text, nullable=True),
        sa.Column("current_level", sa.String(100), nullable=True),
        sa.Column("tags", sa.Text, nullable=True),
        sa.Column("status", sa.String(16), nullable=False, server_default="open"),
        sa.Column("is_paid", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("amount", sa.Integer, nullable=False, server_default="0"),
        sa.Column("best_answer_id", sa.String(64), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_consultations_user_id", "consultations", ["user_id"])
    op.create_index("ix_consultations_status_created", "consultations", ["status", "created_at"])

    op.create_table(
        "proposals",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("consultation_id", sa.String(64), nullable=False),
        sa.Column("trainer_id", sa.String(64), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("program", sa.Text, nullable=True),
        sa.Column("duration", sa.String(100), nullable=True),
        sa.Column("frequency", sa.String(100), nullable=True),
        sa.Column("is_best_answer", sa.Boolean, nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.UniqueConstraint("trainer_id", "consultation_id", name="uq_proposals_trainer_consultation"),
    )
    op.create_index("ix_proposals_consultation_id", "proposals", ["consultation_id"])
    op.create_index("ix_proposals_trainer_id", "proposals", ["trainer_id"])
    op.create_index("ix_proposals_consultation_created", "proposals", ["consultation_id", "created_at"])


def downgrade() -> None:
    op.drop_index("ix_proposals_consultation_created", table_name="proposals")
    op.drop_index("ix_proposals_trainer_id", table_name="proposals")
    op.drop_index("ix_proposals_consultation_id", table_name="proposals")
    op.drop_table("proposals")
    op.drop_index("ix_consultations_status_created", table_name="consultations")
    op.drop_index("ix_consultations_user_id", table_name="consultations")
    op.drop_table("consultations")
    op.drop_index("ix_trainer_profiles_user_id", table_name="trainer_profiles")
    op.drop_table("trainer_profiles")
    op.drop_index("ix_user_profiles_user_id", table_name="user_profiles")
    op.drop_table("user_profiles")
    op.drop_index("ix_users_user_type", table_name="users")
    op.drop_table("users")
