from datetime import date, time

from pydantic import BaseModel, ConfigDict, Field


class AssignmentCreate(BaseModel):
    employee_id: int = Field(gt=0)
    shift_id: int = Field(gt=0)
    date: date
    is_supervisor_shift: bool | None = None


class AssignmentRead(BaseModel):
    id: int
    schedule_id: int
    employee_id: int
    shift_id: int
    date: date
    is_supervisor_shift: bool
    start_time: time | None = None
    end_time: time | None = None

    model_config = ConfigDict(from_attributes=True)
