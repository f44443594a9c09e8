from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from ..models import Schedule, ScheduleAssignment, TimeBasedRequirement
from .requirements import Assignment, RequirementStatus, TimeBasedRequirement as Requirement
from .requirements import evaluate, evaluate_range, summarize

logger = logging.getLogger(__name__)


class ScheduleNotFound(LookupError):
    pass


class RangeOutsideSchedule(ValueError):
    pass


def get_schedule(db: Session, schedule_id: int) -> Schedule:
    schedule = db.query(Schedule).filter(Schedule.id == schedule_id).one_or_none()
    if not schedule:
        raise ScheduleNotFound(f"Schedule {schedule_id} not found")
    return schedule


def load_requirements(db: Session, schedule_id: int) -> List[Requirement]:
    rows = (
        db.query(TimeBasedRequirement)
        .filter(
            TimeBasedRequirement.schedule_id == schedule_id,
            TimeBasedRequirement.is_active.is_(True),
        )
        .order_by(
            TimeBasedRequirement.day_of_week,
            TimeBasedRequirement.start_time,
            TimeBasedRequirement.id,
        )
        .all()
    )
    return [
        Requirement(
            id=row.id,
            schedule_id=row.schedule_id,
            day_of_week=row.day_of_week,
            start_time=row.start_time,
            end_time=row.end_time,
            min_employees=row.min_employees,
            min_supervisors=row.min_supervisors or 0,
            requires_supervisor=row.requires_supervisor,
            notes=row.notes,
        )
        for row in rows
    ]


def load_assignments(db: Session, schedule_id: int, start_date: date, end_date: date) -> List[Assignment]:
    rows = (
        db.query(ScheduleAssignment)
        .options(joinedload(ScheduleAssignment.shift), joinedload(ScheduleAssignment.employee))
        .filter(
            ScheduleAssignment.schedule_id == schedule_id,
            ScheduleAssignment.date >= start_date,
            ScheduleAssignment.date <= end_date,
        )
        .order_by(ScheduleAssignment.date, ScheduleAssignment.id)
        .all()
    )
    assignments: List[Assignment] = []
    for row in rows:
        shift = row.shift
        if not shift:
            continue
        employee = row.employee
        assignments.append(
            Assignment(
                employee_id=row.employee_id,
                shift_id=row.shift_id,
                date=row.date,
                start_time=shift.start_time,
                end_time=shift.end_time,
                is_supervisor=bool(row.is_supervisor_shift or (employee and employee.is_supervisor)),
            )
        )
    return assignments


def requirement_statuses(db: Session, schedule_id: int, on_date: date) -> List[RequirementStatus]:
    get_schedule(db, schedule_id)
    requirements = load_requirements(db, schedule_id)
    assignments = load_assignments(db, schedule_id, on_date, on_date)
    statuses = evaluate(on_date, assignments, requirements)
    _log_shortfalls(schedule_id, statuses)
    return statuses


def requirement_statuses_for_range(
    db: Session,
    schedule_id: int,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> tuple[date, date, List[RequirementStatus]]:
    """Evaluate every day in the range, clipped to the schedule's own dates.

    Missing bounds default to the schedule's start and end. Reversed bounds
    are swapped before clipping.
    """

    schedule = get_schedule(db, schedule_id)
    first = start_date or schedule.start_date
    last = end_date or schedule.end_date
    normalized_start = max(min(first, last), schedule.start_date)
    normalized_end = min(max(first, last), schedule.end_date)
    if normalized_start > normalized_end:
        raise RangeOutsideSchedule(
            f"Range does not overlap schedule dates {schedule.start_date} to {schedule.end_date}"
        )
    requirements = load_requirements(db, schedule_id)
    assignments = load_assignments(db, schedule_id, normalized_start, normalized_end)
    statuses = evaluate_range(normalized_start, normalized_end, assignments, requirements)
    _log_shortfalls(schedule_id, statuses)
    return normalized_start, normalized_end, statuses


def build_report(schedule_id: int, start_date: date, end_date: date, statuses: List[RequirementStatus]) -> dict:
    return {
        "schedule_id": schedule_id,
        "start_date": start_date.isoformat(),
        "end_date": end_date.isoformat(),
        "statuses": [status.as_dict() for status in statuses],
        "summary": summarize(statuses),
    }


def _log_shortfalls(schedule_id: int, statuses: List[RequirementStatus]) -> None:
    unmet = [status for status in statuses if not status.satisfied]
    if not unmet:
        return
    logger.warning(
        "Schedule %s has %d understaffed block(s); first on %s %s-%s (%d/%d)",
        schedule_id,
        len(unmet),
        unmet[0].date,
        unmet[0].time_block.start,
        unmet[0].time_block.end,
        unmet[0].actual,
        unmet[0].required,
    )
