from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterable, List, Optional, Sequence, Union

from ..constants import DAY_NAMES

SECONDS_PER_DAY = 24 * 60 * 60

TimeValue = Union[time, str]
DateValue = Union[date, str]


class InvalidRequirementInput(ValueError):
    """Raised when evaluator input cannot be interpreted."""


@dataclass(frozen=True)
class Assignment:
    employee_id: int
    shift_id: int
    date: DateValue
    start_time: TimeValue
    end_time: Optional[TimeValue] = None
    is_supervisor: bool = False


@dataclass(frozen=True)
class TimeBasedRequirement:
    schedule_id: int
    day_of_week: Union[int, str]
    start_time: TimeValue
    end_time: TimeValue
    min_employees: int
    min_supervisors: int = 0
    requires_supervisor: bool = False
    notes: Optional[str] = None
    id: Optional[int] = None

    @property
    def supervisor_minimum(self) -> int:
        if self.requires_supervisor and self.min_supervisors < 1:
            return 1
        return max(0, self.min_supervisors)


@dataclass(frozen=True)
class TimeBlock:
    start: str
    end: str


@dataclass(frozen=True)
class RequirementStatus:
    date: str
    time_block: TimeBlock
    required: int
    actual: int
    required_supervisors: int = 0
    actual_supervisors: int = 0
    satisfied: bool = False
    type: str = "total"
    requirement_id: Optional[int] = None

    @property
    def shortfall(self) -> int:
        return max(0, self.required - self.actual)

    def as_dict(self) -> dict:
        return {
            "date": self.date,
            "time_block": {"start": self.time_block.start, "end": self.time_block.end},
            "required": self.required,
            "actual": self.actual,
            "required_supervisors": self.required_supervisors,
            "actual_supervisors": self.actual_supervisors,
            "satisfied": self.satisfied,
            "type": self.type,
            "requirement_id": self.requirement_id,
        }


def parse_time_of_day(value: TimeValue) -> int:
    """Return seconds since midnight for a ``time`` or an ``HH:MM[:SS]`` string."""
    if isinstance(value, datetime):
        value = value.time()
    if isinstance(value, time):
        return value.hour * 3600 + value.minute * 60 + value.second
    if not isinstance(value, str):
        raise InvalidRequirementInput(f"Unsupported time value: {value!r}")
    candidate = value.strip()
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            parsed = datetime.strptime(candidate, fmt).time()
        except ValueError:
            continue
        return parsed.hour * 3600 + parsed.minute * 60 + parsed.second
    raise InvalidRequirementInput(f"Invalid time of day: {value!r}")


def parse_date(value: DateValue) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError as exc:
        raise InvalidRequirementInput(f"Invalid calendar date: {value!r}") from exc


def day_of_week_for(value: DateValue) -> int:
    """Weekday number with Sunday as 0."""
    return (parse_date(value).weekday() + 1) % 7


def resolve_day_of_week(value: Union[int, str]) -> int:
    if isinstance(value, bool):
        raise InvalidRequirementInput(f"Invalid day of week: {value!r}")
    if isinstance(value, int):
        if 0 <= value <= 6:
            return value
        raise InvalidRequirementInput(f"Day of week out of range: {value}")
    candidate = str(value).strip().lower()
    if candidate.isdigit():
        return resolve_day_of_week(int(candidate))
    for index, name in enumerate(DAY_NAMES):
        if candidate in (name, name[:3]):
            return index
    raise InvalidRequirementInput(f"Unknown day of week: {value!r}")


def window_contains(start: int, end: int, second: int) -> bool:
    if start == end:
        raise InvalidRequirementInput("Time window must not be empty")
    if end > start:
        return start <= second < end
    # wraps past midnight
    return second >= start or second < end


def window_seconds(start: TimeValue, end: TimeValue) -> int:
    start_second = parse_time_of_day(start)
    end_second = parse_time_of_day(end)
    if start_second == end_second:
        raise InvalidRequirementInput("Time window must not be empty")
    return (end_second - start_second) % SECONDS_PER_DAY


def format_time_of_day(second: int) -> str:
    """``HH:MM``, or ``HH:MM:SS`` when the value is not on a whole minute."""
    minutes, seconds = divmod(second % SECONDS_PER_DAY, 60)
    hours, minutes = divmod(minutes, 60)
    if seconds:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{hours:02d}:{minutes:02d}"


def evaluate(
    on_date: DateValue,
    assignments: Sequence[Assignment],
    requirements: Sequence[TimeBasedRequirement],
) -> List[RequirementStatus]:
    """Compute one status per requirement that applies to ``on_date``.

    Assignments are expected to be pre-filtered to ``on_date``. Each one
    counts toward a requirement when its shift start time falls within the
    requirement window, start inclusive and end exclusive. Windows whose end
    is earlier than their start run into the next day.
    """

    target = parse_date(on_date)
    weekday = day_of_week_for(target)
    start_seconds = [(parse_time_of_day(a.start_time), a.is_supervisor) for a in assignments]

    statuses: List[RequirementStatus] = []
    for requirement in requirements:
        if resolve_day_of_week(requirement.day_of_week) != weekday:
            continue
        window_start = parse_time_of_day(requirement.start_time)
        window_end = parse_time_of_day(requirement.end_time)
        if window_start == window_end:
            raise InvalidRequirementInput(
                f"Requirement window {format_time_of_day(window_start)}-{format_time_of_day(window_end)} is empty"
            )
        actual = 0
        actual_supervisors = 0
        for second, is_supervisor in start_seconds:
            if not window_contains(window_start, window_end, second):
                continue
            actual += 1
            if is_supervisor:
                actual_supervisors += 1
        required = max(0, requirement.min_employees)
        required_supervisors = requirement.supervisor_minimum
        statuses.append(
            RequirementStatus(
                date=target.isoformat(),
                time_block=TimeBlock(start=format_time_of_day(window_start), end=format_time_of_day(window_end)),
                required=required,
                actual=actual,
                required_supervisors=required_supervisors,
                actual_supervisors=actual_supervisors,
                satisfied=actual >= required and actual_supervisors >= required_supervisors,
                requirement_id=requirement.id,
            )
        )
    return statuses


def evaluate_range(
    start_date: DateValue,
    end_date: DateValue,
    assignments: Iterable[Assignment],
    requirements: Sequence[TimeBasedRequirement],
) -> List[RequirementStatus]:
    first = parse_date(start_date)
    last = parse_date(end_date)
    if first > last:
        first, last = last, first
    by_date: dict[date, list[Assignment]] = defaultdict(list)
    for assignment in assignments:
        by_date[parse_date(assignment.date)].append(assignment)

    statuses: List[RequirementStatus] = []
    current = first
    while current <= last:
        statuses.extend(evaluate(current, by_date.get(current, []), requirements))
        current += timedelta(days=1)
    return statuses


def summarize(statuses: Sequence[RequirementStatus]) -> dict:
    satisfied = sum(1 for status in statuses if status.satisfied)
    return {
        "total": len(statuses),
        "satisfied": satisfied,
        "unsatisfied": len(statuses) - satisfied,
        "shortfall": sum(status.shortfall for status in statuses),
    }
