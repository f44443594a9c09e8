from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

TimeOffType = Literal["vacation", "sick", "personal", "other"]
TimeOffStatus = Literal["pending", "approved", "denied"]


class TimeOffCreate(BaseModel):
    employee_id: int = Field(gt=0)
    start_date: date
    end_date: date
    request_type: TimeOffType
    reason: str | None = Field(default=None, max_length=1000)

    @model_validator(mode="after")
    def check_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self


class TimeOffDecision(BaseModel):
    status: Literal["approved", "denied"]
    approved_by: int = Field(gt=0)


class TimeOffRead(BaseModel):
    id: int
    employee_id: int
    start_date: date
    end_date: date
    request_type: str
    status: str
    reason: str | None = None
    approved_by: int | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
