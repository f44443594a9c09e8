from pydantic import BaseModel


class TimeBlockRead(BaseModel):
    start: str
    end: str


class RequirementStatusRead(BaseModel):
    date: str
    time_block: TimeBlockRead
    required: int
    actual: int
    required_supervisors: int
    actual_supervisors: int
    satisfied: bool
    type: str = "total"
    requirement_id: int | None = None


class StaffingSummary(BaseModel):
    total: int
    satisfied: int
    unsatisfied: int
    shortfall: int


class StaffingReport(BaseModel):
    schedule_id: int
    start_date: str
    end_date: str
    statuses: list[RequirementStatusRead]
    summary: StaffingSummary
