from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from ..constants import DAY_NAMES
from ..models import Employee, EmployeeAvailability, Shift, TimeOffRequest
from .requirements import day_of_week_for, parse_time_of_day, window_contains


def approved_time_off(db: Session, employee_id: int, on_date: date) -> Optional[TimeOffRequest]:
    return (
        db.query(TimeOffRequest)
        .filter(
            TimeOffRequest.employee_id == employee_id,
            TimeOffRequest.status == "approved",
            TimeOffRequest.start_date <= on_date,
            TimeOffRequest.end_date >= on_date,
        )
        .first()
    )


def availability_for(db: Session, employee_id: int, day_of_week: int) -> Optional[EmployeeAvailability]:
    return (
        db.query(EmployeeAvailability)
        .filter(
            EmployeeAvailability.employee_id == employee_id,
            EmployeeAvailability.day_of_week == day_of_week,
        )
        .one_or_none()
    )


def assignment_conflict(db: Session, employee: Employee, shift: Shift, on_date: date) -> Optional[str]:
    """Explain why the employee cannot work the shift on that date, or return None.

    Employees with no availability entry for the weekday are treated as available.
    """
    if approved_time_off(db, employee.id, on_date):
        return f"{employee.full_name} has approved time off on {on_date.isoformat()}"
    day = day_of_week_for(on_date)
    entry = availability_for(db, employee.id, day)
    if entry is None:
        return None
    if not entry.is_available:
        return f"{employee.full_name} is not available on {DAY_NAMES[day]}"
    window_start = parse_time_of_day(entry.start_time)
    window_end = parse_time_of_day(entry.end_time)
    if not window_contains(window_start, window_end, parse_time_of_day(shift.start_time)):
        return (
            f"{shift.name} starts outside {employee.full_name}'s availability "
            f"({entry.start_time.strftime('%H:%M')}-{entry.end_time.strftime('%H:%M')})"
        )
    return None


def upsert_availability(
    db: Session,
    employee_id: int,
    day_of_week: int,
    start_time,
    end_time,
    is_available: bool,
) -> EmployeeAvailability:
    entry = availability_for(db, employee_id, day_of_week)
    if entry is None:
        entry = EmployeeAvailability(employee_id=employee_id, day_of_week=day_of_week)
        db.add(entry)
    entry.start_time = start_time
    entry.end_time = end_time
    entry.is_available = is_available
    return entry
