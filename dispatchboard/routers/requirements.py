from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import TimeBasedRequirement
from ..schemas.requirement import RequirementCreate, RequirementRead, RequirementUpdate
from ..services.staffing import ScheduleNotFound, get_schedule

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/schedules/{schedule_id}/requirements", tags=["requirements"])
NULLABLE_FIELDS = {"max_employees", "notes"}


def _require_schedule(db: Session, schedule_id: int) -> None:
    try:
        get_schedule(db, schedule_id)
    except ScheduleNotFound as exc:
        raise HTTPException(status_code=404, detail="Schedule not found") from exc


def _get_requirement(db: Session, schedule_id: int, requirement_id: int) -> TimeBasedRequirement:
    requirement = (
        db.query(TimeBasedRequirement)
        .filter(
            TimeBasedRequirement.id == requirement_id,
            TimeBasedRequirement.schedule_id == schedule_id,
        )
        .one_or_none()
    )
    if not requirement:
        raise HTTPException(status_code=404, detail="Requirement not found")
    return requirement


def _validate_requirement(requirement: TimeBasedRequirement) -> None:
    if requirement.start_time == requirement.end_time:
        raise HTTPException(status_code=422, detail="Requirement window must not be empty")
    if requirement.min_supervisors > requirement.min_employees:
        raise HTTPException(status_code=422, detail="min_supervisors cannot exceed min_employees")
    if requirement.max_employees is not None and requirement.max_employees < requirement.min_employees:
        raise HTTPException(status_code=422, detail="max_employees cannot be below min_employees")


@router.get("", response_model=list[RequirementRead])
async def list_requirements(
    schedule_id: int,
    include_inactive: bool = False,
    db: Session = Depends(get_db),
):
    _require_schedule(db, schedule_id)
    query = db.query(TimeBasedRequirement).filter(TimeBasedRequirement.schedule_id == schedule_id)
    if not include_inactive:
        query = query.filter(TimeBasedRequirement.is_active.is_(True))
    return query.order_by(
        TimeBasedRequirement.day_of_week.asc(),
        TimeBasedRequirement.start_time.asc(),
        TimeBasedRequirement.id.asc(),
    ).all()


@router.post("", response_model=RequirementRead, status_code=201)
async def create_requirement(schedule_id: int, payload: RequirementCreate, db: Session = Depends(get_db)):
    _require_schedule(db, schedule_id)
    requirement = TimeBasedRequirement(
        schedule_id=schedule_id,
        day_of_week=payload.day_of_week,
        start_time=payload.start_time,
        end_time=payload.end_time,
        min_employees=payload.min_employees,
        max_employees=payload.max_employees,
        min_supervisors=payload.min_supervisors,
        notes=payload.notes,
        is_active=True,
    )
    db.add(requirement)
    db.commit()
    logger.info(
        "Created requirement %s for schedule %s (day %s, %s-%s, min %s)",
        requirement.id,
        schedule_id,
        requirement.day_of_week,
        requirement.start_time.strftime("%H:%M"),
        requirement.end_time.strftime("%H:%M"),
        requirement.min_employees,
    )
    return requirement


@router.patch("/{requirement_id}", response_model=RequirementRead)
async def update_requirement(
    schedule_id: int,
    requirement_id: int,
    payload: RequirementUpdate,
    db: Session = Depends(get_db),
):
    _require_schedule(db, schedule_id)
    requirement = _get_requirement(db, schedule_id, requirement_id)
    changes = payload.model_dump(exclude_unset=True)
    requires_supervisor = changes.pop("requires_supervisor", None)
    for key, value in changes.items():
        if value is None and key not in NULLABLE_FIELDS:
            continue
        setattr(requirement, key, value)
    if requires_supervisor and not requirement.min_supervisors:
        requirement.min_supervisors = 1
    elif requires_supervisor is False:
        if changes.get("min_supervisors"):
            raise HTTPException(status_code=422, detail="min_supervisors conflicts with requires_supervisor=false")
        requirement.min_supervisors = 0
    _validate_requirement(requirement)
    db.commit()
    return requirement


@router.delete("/{requirement_id}", response_model=RequirementRead)
async def deactivate_requirement(schedule_id: int, requirement_id: int, db: Session = Depends(get_db)):
    _require_schedule(db, schedule_id)
    requirement = _get_requirement(db, schedule_id, requirement_id)
    requirement.is_active = False
    db.commit()
    logger.info("Deactivated requirement %s on schedule %s", requirement.id, schedule_id)
    return requirement
