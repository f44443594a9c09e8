"""Employee availability and time-off requests

Revision ID: 20250120_000000
Revises: 20250114_000000
Create Date: 2025-01-20 00:00:00.000000
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20250120_000000"
down_revision: Union[str, None] = "20250114_000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

time_off_type = sa.Enum("vacation", "sick", "personal", "other", name="time_off_type")
time_off_status = sa.Enum("pending", "approved", "denied", name="time_off_status")


def upgrade() -> None:
    op.create_table(
        "employee_availability",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("employee_id", sa.Integer(), sa.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("end_time", sa.Time(), nullable=False),
        sa.Column("is_available", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.UniqueConstraint("employee_id", "day_of_week", name="uq_employee_availability_day"),
        sa.CheckConstraint("day_of_week >= 0 AND day_of_week <= 6", name="ck_employee_availability_day"),
        sa.CheckConstraint("start_time < end_time", name="ck_employee_availability_window"),
    )
    op.create_index("ix_employee_availability_employee_id", "employee_availability", ["employee_id"])

    op.create_table(
        "time_off_requests",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("employee_id", sa.Integer(), sa.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("request_type", time_off_type, nullable=False),
        sa.Column("status", time_off_status, nullable=False, server_default="pending"),
        sa.Column("reason", sa.String(length=1000), nullable=True),
        sa.Column("approved_by", sa.Integer(), sa.ForeignKey("employees.id"), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.CheckConstraint("start_date <= end_date", name="ck_time_off_requests_dates"),
    )
    op.create_index("ix_time_off_requests_employee_id", "time_off_requests", ["employee_id"])


def downgrade() -> None:
    op.drop_index("ix_time_off_requests_employee_id", table_name="time_off_requests")
    op.drop_table("time_off_requests")
    op.drop_index("ix_employee_availability_employee_id", table_name="employee_availability")
    op.drop_table("employee_availability")
    time_off_status.drop(op.get_bind(), checkfirst=True)
    time_off_type.drop(op.get_bind(), checkfirst=True)
