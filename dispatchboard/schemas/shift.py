from datetime import time

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ShiftCreate(BaseModel):
    name: str = Field(min_length=1, max_length=120)
    start_time: time
    end_time: time
    requires_supervisor: bool = False

    @model_validator(mode="after")
    def check_window(self):
        if self.start_time == self.end_time:
            raise ValueError("Shift start and end times must differ")
        return self


class ShiftUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    start_time: time | None = None
    end_time: time | None = None
    requires_supervisor: bool | None = None


class ShiftRead(BaseModel):
    id: int
    name: str
    start_time: time
    end_time: time
    duration_hours: float
    crosses_midnight: bool
    requires_supervisor: bool

    model_config = ConfigDict(from_attributes=True)
