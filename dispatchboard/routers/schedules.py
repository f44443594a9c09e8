from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session, joinedload

from ..db import get_db
from ..models import Employee, Schedule, ScheduleAssignment, Shift
from ..schemas.assignment import AssignmentCreate, AssignmentRead
from ..schemas.schedule import ScheduleCreate, ScheduleRead, ScheduleUpdate
from ..services.availability import assignment_conflict
from ..services.staffing import ScheduleNotFound, get_schedule

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/schedules", tags=["schedules"])


def _require_schedule(db: Session, schedule_id: int) -> Schedule:
    try:
        return get_schedule(db, schedule_id)
    except ScheduleNotFound as exc:
        raise HTTPException(status_code=404, detail="Schedule not found") from exc


def _serialize_assignment(assignment: ScheduleAssignment) -> AssignmentRead:
    shift = assignment.shift
    return AssignmentRead(
        id=assignment.id,
        schedule_id=assignment.schedule_id,
        employee_id=assignment.employee_id,
        shift_id=assignment.shift_id,
        date=assignment.date,
        is_supervisor_shift=assignment.is_supervisor_shift,
        start_time=shift.start_time if shift else None,
        end_time=shift.end_time if shift else None,
    )


@router.get("", response_model=list[ScheduleRead])
async def list_schedules(
    status: str | None = None,
    include_inactive: bool = False,
    db: Session = Depends(get_db),
):
    query = db.query(Schedule)
    if status:
        query = query.filter(Schedule.status == status)
    if not include_inactive:
        query = query.filter(Schedule.is_active.is_(True))
    return query.order_by(Schedule.start_date.desc(), Schedule.id.desc()).all()


@router.post("", response_model=ScheduleRead, status_code=201)
async def create_schedule(payload: ScheduleCreate, db: Session = Depends(get_db)):
    schedule = Schedule(
        name=payload.name.strip(),
        start_date=payload.start_date,
        end_date=payload.end_date,
        status=payload.status,
        version=1,
        is_active=True,
    )
    db.add(schedule)
    db.commit()
    logger.info("Created schedule %s (%s to %s)", schedule.id, schedule.start_date, schedule.end_date)
    return schedule


@router.get("/{schedule_id}", response_model=ScheduleRead)
async def get_schedule_detail(schedule_id: int, db: Session = Depends(get_db)):
    return _require_schedule(db, schedule_id)


@router.patch("/{schedule_id}", response_model=ScheduleRead)
async def update_schedule(schedule_id: int, payload: ScheduleUpdate, db: Session = Depends(get_db)):
    schedule = _require_schedule(db, schedule_id)
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    start = changes.get("start_date", schedule.start_date)
    end = changes.get("end_date", schedule.end_date)
    if start > end:
        raise HTTPException(status_code=422, detail="start_date must be on or before end_date")
    for key, value in changes.items():
        setattr(schedule, key, value)
    if changes:
        schedule.version = (schedule.version or 1) + 1
    db.commit()
    return schedule


@router.delete("/{schedule_id}", response_model=ScheduleRead)
async def archive_schedule(schedule_id: int, db: Session = Depends(get_db)):
    schedule = _require_schedule(db, schedule_id)
    schedule.is_active = False
    schedule.status = "archived"
    schedule.version = (schedule.version or 1) + 1
    db.commit()
    logger.info("Archived schedule %s", schedule.id)
    return schedule


@router.get("/{schedule_id}/assignments", response_model=list[AssignmentRead])
async def list_assignments(
    schedule_id: int,
    date: date | None = None,
    db: Session = Depends(get_db),
):
    _require_schedule(db, schedule_id)
    query = (
        db.query(ScheduleAssignment)
        .options(joinedload(ScheduleAssignment.shift))
        .filter(ScheduleAssignment.schedule_id == schedule_id)
    )
    if date is not None:
        query = query.filter(ScheduleAssignment.date == date)
    rows = query.order_by(ScheduleAssignment.date.asc(), ScheduleAssignment.id.asc()).all()
    return [_serialize_assignment(row) for row in rows]


@router.post("/{schedule_id}/assignments", response_model=AssignmentRead, status_code=201)
async def create_assignment(schedule_id: int, payload: AssignmentCreate, db: Session = Depends(get_db)):
    schedule = _require_schedule(db, schedule_id)
    if not schedule.covers(payload.date):
        raise HTTPException(status_code=422, detail="Assignment date is outside the schedule range")

    employee = db.query(Employee).filter(Employee.id == payload.employee_id).one_or_none()
    if not employee or not employee.is_active:
        raise HTTPException(status_code=404, detail="Employee not found")
    shift = db.query(Shift).filter(Shift.id == payload.shift_id).one_or_none()
    if not shift:
        raise HTTPException(status_code=404, detail="Shift not found")

    conflict = (
        db.query(ScheduleAssignment.id)
        .filter(
            ScheduleAssignment.schedule_id == schedule.id,
            ScheduleAssignment.employee_id == employee.id,
            ScheduleAssignment.date == payload.date,
        )
        .first()
    )
    if conflict:
        raise HTTPException(
            status_code=409,
            detail=f"{employee.full_name} is already assigned on {payload.date.isoformat()}",
        )
    unavailable = assignment_conflict(db, employee, shift, payload.date)
    if unavailable:
        raise HTTPException(status_code=409, detail=unavailable)

    is_supervisor_shift = payload.is_supervisor_shift
    if is_supervisor_shift is None:
        is_supervisor_shift = bool(shift.requires_supervisor and employee.is_supervisor)

    assignment = ScheduleAssignment(
        schedule_id=schedule.id,
        employee_id=employee.id,
        shift_id=shift.id,
        date=payload.date,
        is_supervisor_shift=is_supervisor_shift,
    )
    db.add(assignment)
    db.commit()
    logger.info(
        "Assigned employee %s to shift %s on %s (schedule %s)",
        employee.id,
        shift.id,
        payload.date,
        schedule.id,
    )
    return _serialize_assignment(assignment)


@router.delete("/{schedule_id}/assignments/{assignment_id}", status_code=204)
async def delete_assignment(schedule_id: int, assignment_id: int, db: Session = Depends(get_db)):
    _require_schedule(db, schedule_id)
    assignment = (
        db.query(ScheduleAssignment)
        .filter(ScheduleAssignment.id == assignment_id, ScheduleAssignment.schedule_id == schedule_id)
        .one_or_none()
    )
    if not assignment:
        raise HTTPException(status_code=404, detail="Assignment not found")
    db.delete(assignment)
    db.commit()
    return Response(status_code=204)
