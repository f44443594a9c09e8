from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Time,
    func,
)
from sqlalchemy.orm import relationship

from . import Base


class TimeBasedRequirement(Base):
    __tablename__ = "time_based_requirements"
    __table_args__ = (
        CheckConstraint("day_of_week >= 0 AND day_of_week <= 6", name="ck_time_based_requirements_day"),
        CheckConstraint("min_employees >= 0", name="ck_time_based_requirements_min_employees"),
        CheckConstraint("min_supervisors <= min_employees", name="ck_time_based_requirements_supervisors"),
    )

    id = Column(Integer, primary_key=True)
    schedule_id = Column(Integer, ForeignKey("schedules.id", ondelete="CASCADE"), nullable=False, index=True)
    day_of_week = Column(Integer, nullable=False)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    min_employees = Column(Integer, nullable=False)
    max_employees = Column(Integer, nullable=True)
    min_supervisors = Column(Integer, nullable=False, default=0, server_default="0")
    notes = Column(String(1000), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, server_default="true")
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    schedule = relationship("Schedule", back_populates="requirements")

    @property
    def crosses_midnight(self) -> bool:
        return self.end_time < self.start_time

    @property
    def requires_supervisor(self) -> bool:
        return (self.min_supervisors or 0) > 0
