from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..schemas.staffing import StaffingReport
from ..services.requirements import InvalidRequirementInput
from ..services.staffing import (
    RangeOutsideSchedule,
    ScheduleNotFound,
    build_report,
    requirement_statuses,
    requirement_statuses_for_range,
)

router = APIRouter(prefix="/api/schedules", tags=["staffing"])


@router.get("/{schedule_id}/staffing", response_model=StaffingReport)
async def staffing_status(
    schedule_id: int,
    date: date | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    db: Session = Depends(get_db),
):
    if date is not None and (start_date is not None or end_date is not None):
        raise HTTPException(status_code=400, detail="Use either date or start_date/end_date, not both")
    try:
        if date is not None:
            statuses = requirement_statuses(db, schedule_id, date)
            return build_report(schedule_id, date, date, statuses)
        first, last, statuses = requirement_statuses_for_range(db, schedule_id, start_date, end_date)
    except ScheduleNotFound as exc:
        raise HTTPException(status_code=404, detail="Schedule not found") from exc
    except RangeOutsideSchedule as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except InvalidRequirementInput as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return build_report(schedule_id, first, last, statuses)
