from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, String, func

from . import Base
from ..constants import EMPLOYEE_POSITIONS, SUPERVISOR_POSITIONS

employee_position_enum = Enum(*EMPLOYEE_POSITIONS, name="employee_position")


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True)
    first_name = Column(String(120), nullable=False)
    last_name = Column(String(120), nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    phone = Column(String(40), nullable=True)
    position = Column(employee_position_enum, nullable=False, default="dispatcher")
    is_active = Column(Boolean, nullable=False, default=True, server_default="true")
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_supervisor(self) -> bool:
        return self.position in SUPERVISOR_POSITIONS
