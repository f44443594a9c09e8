from datetime import datetime, time

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .requirement import coerce_day_of_week


class AvailabilityEntry(BaseModel):
    day_of_week: int
    start_time: time
    end_time: time
    is_available: bool = True

    @field_validator("day_of_week", mode="before")
    @classmethod
    def resolve_day(cls, value):
        return coerce_day_of_week(value)

    @model_validator(mode="after")
    def check_window(self):
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


class AvailabilityRead(BaseModel):
    id: int
    employee_id: int
    day_of_week: int
    start_time: time
    end_time: time
    is_available: bool
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
