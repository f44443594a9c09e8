from sqlalchemy import Boolean, CheckConstraint, Column, Date, DateTime, Enum, Integer, String, func
from sqlalchemy.orm import relationship

from . import Base
from ..constants import SCHEDULE_STATUSES

schedule_status_enum = Enum(*SCHEDULE_STATUSES, name="schedule_status")


class Schedule(Base):
    __tablename__ = "schedules"
    __table_args__ = (
        CheckConstraint("start_date <= end_date", name="ck_schedules_date_range"),
    )

    id = Column(Integer, primary_key=True)
    name = Column(String(200), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    status = Column(schedule_status_enum, nullable=False, default="draft")
    version = Column(Integer, nullable=False, default=1)
    is_active = Column(Boolean, nullable=False, default=True, server_default="true")
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    assignments = relationship("ScheduleAssignment", back_populates="schedule", cascade="all, delete-orphan")
    requirements = relationship("TimeBasedRequirement", back_populates="schedule", cascade="all, delete-orphan")

    def covers(self, value) -> bool:
        return self.start_date <= value <= self.end_date
