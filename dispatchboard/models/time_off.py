from sqlalchemy import CheckConstraint, Column, Date, DateTime, Enum, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from . import Base
from ..constants import TIME_OFF_STATUSES, TIME_OFF_TYPES

time_off_type_enum = Enum(*TIME_OFF_TYPES, name="time_off_type")
time_off_status_enum = Enum(*TIME_OFF_STATUSES, name="time_off_status")


class TimeOffRequest(Base):
    __tablename__ = "time_off_requests"
    __table_args__ = (CheckConstraint("start_date <= end_date", name="ck_time_off_requests_dates"),)

    id = Column(Integer, primary_key=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    request_type = Column(time_off_type_enum, nullable=False)
    status = Column(time_off_status_enum, nullable=False, default="pending", server_default="pending")
    reason = Column(String(1000), nullable=True)
    approved_by = Column(Integer, ForeignKey("employees.id"), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    employee = relationship("Employee", foreign_keys=[employee_id])
    approver = relationship("Employee", foreign_keys=[approved_by])

    def covers(self, value) -> bool:
        return self.start_date <= value <= self.end_date
