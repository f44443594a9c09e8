"""Seed demo employees, shifts, a schedule and its staffing requirements."""

from datetime import date, time, timedelta

from dispatchboard.db import SessionLocal
from dispatchboard.models import Employee, Schedule, ScheduleAssignment, Shift, TimeBasedRequirement
from dispatchboard.services.shifts import apply_times

DEMO_SCHEDULE = "Demo rotation"

# 24-hour coverage blocks: (start, end, min staff, min supervisors)
REQUIREMENT_BLOCKS = [
    (time(5, 0), time(9, 0), 6, 1),
    (time(9, 0), time(21, 0), 8, 1),
    (time(21, 0), time(1, 0), 7, 1),
    (time(1, 0), time(5, 0), 6, 1),
]

SHIFTS = [
    ("Early Shift", time(5, 0), time(15, 0), False),
    ("Day Shift", time(9, 0), time(19, 0), False),
    ("Swing Shift", time(15, 0), time(1, 0), True),
    ("Graveyard", time(21, 0), time(7, 0), True),
]


def ensure_employee(session, email: str, first_name: str, last_name: str, position: str) -> Employee:
    employee = session.query(Employee).filter(Employee.email == email).one_or_none()
    if employee:
        return employee
    employee = Employee(
        first_name=first_name,
        last_name=last_name,
        email=email,
        position=position,
        is_active=True,
    )
    session.add(employee)
    session.flush()
    return employee


def ensure_shift(session, name: str, start: time, end: time, requires_supervisor: bool) -> Shift:
    shift = session.query(Shift).filter(Shift.name == name).one_or_none()
    if shift is None:
        shift = Shift(name=name, requires_supervisor=requires_supervisor)
        apply_times(shift, start, end)
        session.add(shift)
        session.flush()
    return shift


def ensure_schedule(session) -> Schedule:
    schedule = session.query(Schedule).filter(Schedule.name == DEMO_SCHEDULE).one_or_none()
    if schedule:
        return schedule
    start = date.today()
    schedule = Schedule(
        name=DEMO_SCHEDULE,
        start_date=start,
        end_date=start + timedelta(days=13),
        status="draft",
        version=1,
        is_active=True,
    )
    session.add(schedule)
    session.flush()
    for day_of_week in range(7):
        for start_time, end_time, min_staff, min_supervisors in REQUIREMENT_BLOCKS:
            session.add(
                TimeBasedRequirement(
                    schedule_id=schedule.id,
                    day_of_week=day_of_week,
                    start_time=start_time,
                    end_time=end_time,
                    min_employees=min_staff,
                    min_supervisors=min_supervisors,
                    is_active=True,
                )
            )
    return schedule


def ensure_assignments(session, schedule: Schedule, employees: list[Employee], shifts: list[Shift]) -> None:
    current = schedule.start_date
    while current <= schedule.end_date:
        for index, employee in enumerate(employees):
            exists = (
                session.query(ScheduleAssignment.id)
                .filter(
                    ScheduleAssignment.schedule_id == schedule.id,
                    ScheduleAssignment.employee_id == employee.id,
                    ScheduleAssignment.date == current,
                )
                .first()
            )
            if exists:
                continue
            shift = shifts[(index + current.toordinal()) % len(shifts)]
            session.add(
                ScheduleAssignment(
                    schedule_id=schedule.id,
                    employee_id=employee.id,
                    shift_id=shift.id,
                    date=current,
                    is_supervisor_shift=employee.is_supervisor and shift.requires_supervisor,
                )
            )
        current += timedelta(days=1)


def main() -> None:
    session = SessionLocal()
    try:
        employees = [
            ensure_employee(session, f"supervisor{i}@example.com", f"Supervisor{i}", "Smith", "shift_supervisor")
            for i in range(1, 4)
        ]
        employees.extend(
            ensure_employee(session, f"dispatcher{i}@example.com", f"Dispatcher{i}", "Jones", "dispatcher")
            for i in range(1, 13)
        )
        shifts = [ensure_shift(session, *row) for row in SHIFTS]
        schedule = ensure_schedule(session)
        ensure_assignments(session, schedule, employees, shifts)
        session.commit()
        print("Demo data ready:")
        print(f"  Schedule #{schedule.id}: {schedule.start_date} to {schedule.end_date}")
        print(f"  {len(employees)} employees across {len(shifts)} shifts")
    finally:
        session.close()


if __name__ == "__main__":
    main()
