from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Time,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from . import Base


class EmployeeAvailability(Base):
    """One weekly window per employee and weekday (0 = Sunday)."""

    __tablename__ = "employee_availability"
    __table_args__ = (
        UniqueConstraint("employee_id", "day_of_week", name="uq_employee_availability_day"),
        CheckConstraint("day_of_week >= 0 AND day_of_week <= 6", name="ck_employee_availability_day"),
        CheckConstraint("start_time < end_time", name="ck_employee_availability_window"),
    )

    id = Column(Integer, primary_key=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    day_of_week = Column(Integer, nullable=False)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    is_available = Column(Boolean, nullable=False, default=True, server_default="true")
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    employee = relationship("Employee")
