"""Time-based staffing requirements per schedule

Revision ID: 20250114_000000
Revises: 20250110_180000
Create Date: 2025-01-14 00:00:00.000000
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20250114_000000"
down_revision: Union[str, None] = "20250110_180000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "time_based_requirements",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("schedule_id", sa.Integer(), sa.ForeignKey("schedules.id", ondelete="CASCADE"), nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("end_time", sa.Time(), nullable=False),
        sa.Column("min_employees", sa.Integer(), nullable=False),
        sa.Column("max_employees", sa.Integer(), nullable=True),
        sa.Column("min_supervisors", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("notes", sa.String(length=1000), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.CheckConstraint("day_of_week >= 0 AND day_of_week <= 6", name="ck_time_based_requirements_day"),
        sa.CheckConstraint("min_employees >= 0", name="ck_time_based_requirements_min_employees"),
        sa.CheckConstraint("min_supervisors <= min_employees", name="ck_time_based_requirements_supervisors"),
    )
    op.create_index("ix_time_based_requirements_schedule_id", "time_based_requirements", ["schedule_id"])
    op.create_index(
        "ix_time_based_requirements_times",
        "time_based_requirements",
        ["start_time", "end_time"],
    )


def downgrade() -> None:
    op.drop_index("ix_time_based_requirements_times", table_name="time_based_requirements")
    op.drop_index("ix_time_based_requirements_schedule_id", table_name="time_based_requirements")
    op.drop_table("time_based_requirements")
