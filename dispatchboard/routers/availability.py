from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Employee, EmployeeAvailability
from ..schemas.availability import AvailabilityEntry, AvailabilityRead
from ..services.availability import upsert_availability

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/employees/{employee_id}/availability", tags=["availability"])


def _require_employee(db: Session, employee_id: int) -> Employee:
    employee = db.query(Employee).filter(Employee.id == employee_id).one_or_none()
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee


@router.get("", response_model=list[AvailabilityRead])
async def list_availability(employee_id: int, db: Session = Depends(get_db)):
    _require_employee(db, employee_id)
    return (
        db.query(EmployeeAvailability)
        .filter(EmployeeAvailability.employee_id == employee_id)
        .order_by(EmployeeAvailability.day_of_week.asc())
        .all()
    )


@router.post("", response_model=AvailabilityRead)
async def set_availability(employee_id: int, payload: AvailabilityEntry, db: Session = Depends(get_db)):
    """Create or replace the employee's window for one weekday."""
    _require_employee(db, employee_id)
    entry = upsert_availability(
        db,
        employee_id,
        payload.day_of_week,
        payload.start_time,
        payload.end_time,
        payload.is_available,
    )
    db.commit()
    logger.info(
        "Availability for employee %s on day %s set to %s-%s (%s)",
        employee_id,
        entry.day_of_week,
        entry.start_time.strftime("%H:%M"),
        entry.end_time.strftime("%H:%M"),
        "available" if entry.is_available else "unavailable",
    )
    return entry


@router.put("", response_model=list[AvailabilityRead])
async def replace_availability(
    employee_id: int,
    payload: list[AvailabilityEntry],
    db: Session = Depends(get_db),
):
    """Replace the whole week; weekdays missing from the payload are cleared."""
    _require_employee(db, employee_id)
    days = [entry.day_of_week for entry in payload]
    if len(days) != len(set(days)):
        raise HTTPException(status_code=422, detail="Each day_of_week may appear only once")
    stale = db.query(EmployeeAvailability).filter(EmployeeAvailability.employee_id == employee_id)
    if days:
        stale = stale.filter(EmployeeAvailability.day_of_week.notin_(days))
    stale.delete(synchronize_session=False)
    for entry in payload:
        upsert_availability(db, employee_id, entry.day_of_week, entry.start_time, entry.end_time, entry.is_available)
    db.commit()
    logger.info("Replaced weekly availability for employee %s (%d day(s))", employee_id, len(days))
    return (
        db.query(EmployeeAvailability)
        .filter(EmployeeAvailability.employee_id == employee_id)
        .order_by(EmployeeAvailability.day_of_week.asc())
        .all()
    )
