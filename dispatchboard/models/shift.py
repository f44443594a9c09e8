from sqlalchemy import Boolean, Column, DateTime, Integer, Numeric, String, Time, func
from sqlalchemy.orm import relationship

from . import Base


class Shift(Base):
    __tablename__ = "shifts"

    id = Column(Integer, primary_key=True)
    name = Column(String(120), nullable=False)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    duration_hours = Column(Numeric(4, 2), nullable=False)
    crosses_midnight = Column(Boolean, nullable=False, default=False, server_default="false")
    requires_supervisor = Column(Boolean, nullable=False, default=False, server_default="false")
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    assignments = relationship("ScheduleAssignment", back_populates="shift")
