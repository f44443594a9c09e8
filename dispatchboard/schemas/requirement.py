from datetime import datetime, time

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..services.requirements import InvalidRequirementInput, resolve_day_of_week


def coerce_day_of_week(value):
    if value is None:
        return value
    try:
        return resolve_day_of_week(value)
    except InvalidRequirementInput as exc:
        raise ValueError(str(exc)) from exc


class RequirementCreate(BaseModel):
    day_of_week: int
    start_time: time
    end_time: time
    min_employees: int = Field(ge=0)
    max_employees: int | None = Field(default=None, ge=0)
    min_supervisors: int = Field(default=0, ge=0)
    requires_supervisor: bool = False
    notes: str | None = Field(default=None, max_length=1000)

    @field_validator("day_of_week", mode="before")
    @classmethod
    def resolve_day(cls, value):
        return coerce_day_of_week(value)

    @model_validator(mode="after")
    def check_counts(self):
        if self.start_time == self.end_time:
            raise ValueError("Requirement window must not be empty")
        if self.requires_supervisor and self.min_supervisors == 0:
            self.min_supervisors = 1
        if self.min_supervisors > self.min_employees:
            raise ValueError("min_supervisors cannot exceed min_employees")
        if self.max_employees is not None and self.max_employees < self.min_employees:
            raise ValueError("max_employees cannot be below min_employees")
        return self


class RequirementUpdate(BaseModel):
    day_of_week: int | None = None
    start_time: time | None = None
    end_time: time | None = None
    min_employees: int | None = Field(default=None, ge=0)
    max_employees: int | None = Field(default=None, ge=0)
    min_supervisors: int | None = Field(default=None, ge=0)
    requires_supervisor: bool | None = None
    notes: str | None = Field(default=None, max_length=1000)
    is_active: bool | None = None

    @field_validator("day_of_week", mode="before")
    @classmethod
    def resolve_day(cls, value):
        return coerce_day_of_week(value)


class RequirementRead(BaseModel):
    id: int
    schedule_id: int
    day_of_week: int
    start_time: time
    end_time: time
    min_employees: int
    max_employees: int | None = None
    min_supervisors: int
    requires_supervisor: bool
    notes: str | None = None
    is_active: bool
    crosses_midnight: bool
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
